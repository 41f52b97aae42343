import json
import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from .exceptions import EmptyResponseError, SchemaViolationError
from .models import AssetKind, AudioPrompt, Payload
from .prompts import BLUEPRINT_SYSTEM_PROMPT, IMAGE_FRAMES_SYSTEM_PROMPT, SUNO_SYSTEM_PROMPT
from .settings import GENERATION_MODEL

logger = logging.getLogger(__name__)

AUDIO_PROMPT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "style": {"type": "string"},
        "lyrics": {"type": "string"},
    },
    "required": ["style", "lyrics"],
    "additionalProperties": False,
}


def _strip_code_fence(text: str) -> str:
    s = text.strip()
    if s.startswith("```") and s.endswith("```"):
        lines = s.splitlines()
        if len(lines) >= 3:
            s = "\n".join(lines[1:-1]).strip()
    return s


def parse_audio_prompt(raw: str) -> AudioPrompt:
    """Turn a schema-mode reply into an AudioPrompt or raise SchemaViolationError."""
    try:
        data = json.loads(_strip_code_fence(raw))
    except (json.JSONDecodeError, RecursionError) as e:
        raise SchemaViolationError(AssetKind.AUDIO_PROMPT.value, "not valid JSON") from e
    try:
        return AudioPrompt.model_validate(data)
    except ValidationError as e:
        raise SchemaViolationError(AssetKind.AUDIO_PROMPT.value, "missing or non-string style/lyrics") from e


class AssetGenerator:
    """
    One asset kind: a static instruction template plus, for structured kinds,
    the schema the reply must follow. Calling it performs a single boundary call.
    """

    def __init__(self, kind: AssetKind, template: str, output_schema: Optional[Dict[str, Any]] = None,
                 model: str = GENERATION_MODEL):
        self.kind = kind
        self.template = template
        self.output_schema = output_schema
        self.model = model

    def build_instruction(self, theme: str) -> str:
        return self.template.format(theme=theme)

    async def __call__(self, client, script_text: str, theme: str) -> Payload:
        logger.info(f"Generating {self.kind.value}")
        raw = await client.generate(
            self.model,
            script_text,
            instruction=self.build_instruction(theme),
            output_schema=self.output_schema,
            schema_name=self.kind.value,
        )
        if self.output_schema is not None:
            return parse_audio_prompt(raw)
        if not raw.strip():
            raise EmptyResponseError(self.kind.value)
        return raw


BLUEPRINT = AssetGenerator(AssetKind.BLUEPRINT, BLUEPRINT_SYSTEM_PROMPT)
AUDIO_PROMPT = AssetGenerator(AssetKind.AUDIO_PROMPT, SUNO_SYSTEM_PROMPT, output_schema=AUDIO_PROMPT_SCHEMA)
STORYBOARD = AssetGenerator(AssetKind.STORYBOARD, IMAGE_FRAMES_SYSTEM_PROMPT)

GENERATORS: Dict[AssetKind, AssetGenerator] = {
    AssetKind.BLUEPRINT: BLUEPRINT,
    AssetKind.AUDIO_PROMPT: AUDIO_PROMPT,
    AssetKind.STORYBOARD: STORYBOARD,
}
