import os
import logging
from typing import NamedTuple, Optional

from .models import AssetKind, AudioPrompt, Payload

logger = logging.getLogger(__name__)

EXPORT_FILENAMES = {
    AssetKind.BLUEPRINT: ("blueprint.md", "text/markdown; charset=utf-8"),
    AssetKind.AUDIO_PROMPT: ("suno_prompt.json", "application/json"),
    AssetKind.STORYBOARD: ("image_frames.txt", "text/plain; charset=utf-8"),
}


class ExportFile(NamedTuple):
    content: str
    filename: str
    media_type: str


def render_export(kind: AssetKind, payload: Payload) -> ExportFile:
    filename, media_type = EXPORT_FILENAMES[kind]
    if isinstance(payload, AudioPrompt):
        content = payload.model_dump_json(indent=2)
    else:
        content = payload
    return ExportFile(content=content, filename=filename, media_type=media_type)


def attachment_headers(filename: str) -> dict:
    return {"Content-Disposition": f'attachment; filename="{filename}"'}


def save_as_file(content: str, path: str) -> Optional[str]:
    """Best-effort save; returns the path written, or None if the write failed."""
    try:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        logger.info(f"Saved export to {path}")
        return path
    except OSError as e:
        logger.error(f"Failed to save export to {path}: {e}")
        return None
