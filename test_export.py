"""
Tests for export rendering and configuration helpers.
"""
import json

import pytest

from script_toolkit import settings
from script_toolkit.exceptions import ConfigurationError
from script_toolkit.export import render_export, save_as_file
from script_toolkit.llm import LLMClient
from script_toolkit.models import AssetKind, AudioPrompt


class TestRenderExport:

    def test_text_kinds_keep_content(self):
        export = render_export(AssetKind.STORYBOARD, "Shot 1: wide")

        assert export.content == "Shot 1: wide"
        assert export.filename == "image_frames.txt"
        assert export.media_type.startswith("text/plain")

    def test_blueprint_is_markdown(self):
        export = render_export(AssetKind.BLUEPRINT, "# Scene")

        assert export.filename == "blueprint.md"

    def test_audio_prompt_is_pretty_json(self):
        export = render_export(AssetKind.AUDIO_PROMPT, AudioPrompt(style="dark synth", lyrics="[Verse]"))

        assert export.filename == "suno_prompt.json"
        assert json.loads(export.content) == {"style": "dark synth", "lyrics": "[Verse]"}
        assert "\n  " in export.content


class TestSaveAsFile:

    def test_writes_utf8(self, tmp_path):
        target = tmp_path / "out" / "blueprint.md"

        written = save_as_file("Café noir — scene 1", str(target))

        assert written == str(target)
        assert target.read_text(encoding="utf-8") == "Café noir — scene 1"

    def test_failure_is_swallowed(self, tmp_path):
        # a directory cannot be opened as a file
        assert save_as_file("x", str(tmp_path)) is None


class TestSettings:

    def test_require_api_key(self, monkeypatch):
        monkeypatch.setattr(settings, "GEMINI_API_KEY", "abc")

        assert settings.require_api_key() == "abc"
        assert settings.has_all_keys() is True

    def test_missing_key(self, monkeypatch):
        monkeypatch.setattr(settings, "GEMINI_API_KEY", "")

        assert settings.has_all_keys() is False
        with pytest.raises(ConfigurationError):
            settings.require_api_key()

    def test_client_construction_needs_key(self, monkeypatch):
        monkeypatch.setattr(settings, "GEMINI_API_KEY", "")

        with pytest.raises(ConfigurationError):
            LLMClient()

    def test_client_defaults_to_gemini_endpoint(self):
        client = LLMClient(api_key="abc")

        assert client.base_url == settings.GEMINI_BASE_URL
        assert client.api_key == "abc"
