"""
Pytest configuration and fixtures shared by the root-level test modules.
"""
import asyncio
import os

import pytest

# Keep the settings import quiet and deterministic before app modules load
os.environ.setdefault("GEMINI_API_KEY", "test-key-for-testing")

from script_toolkit.models import AssetKind, GenerationRequest


SAMPLE_SCRIPT = "INT. OFFICE - DAY\nJane stares at the screen."

DEFAULT_RESPONSES = {
    "blueprint": "# Scene 1\n- **PUSH IN** on Jane.",
    "audio_prompt": '{"style": "dark synth", "lyrics": "[Verse] ..."}',
    "storyboard": "Shot 1: Jane at her desk.\nPrompt: neon-lit office --ar 16:9 --style raw",
    "guidance": "  Let us hear the hum of the monitor before Jane reacts.  ",
}


class FakeLLMClient:
    """Scripted stand-in for LLMClient; records every call it receives."""

    def __init__(self, responses=None, errors=None, delays=None):
        self.responses = dict(DEFAULT_RESPONSES, **(responses or {}))
        self.errors = errors or {}
        self.delays = delays or {}
        self.calls = []

    @staticmethod
    def kind_for(instruction, output_schema):
        if output_schema is not None:
            return "audio_prompt"
        if "cinematic blueprint" in instruction:
            return "blueprint"
        if "storyboard" in instruction:
            return "storyboard"
        return "guidance"

    async def generate(self, model, input_text, *, instruction, output_schema=None, **kwargs):
        kind = self.kind_for(instruction, output_schema)
        self.calls.append({
            "kind": kind,
            "model": model,
            "input_text": input_text,
            "instruction": instruction,
            "output_schema": output_schema,
            **kwargs,
        })
        if kind in self.delays:
            await asyncio.sleep(self.delays[kind])
        if kind in self.errors:
            raise self.errors[kind]
        return self.responses[kind]

    def kinds_called(self):
        return sorted(call["kind"] for call in self.calls)


@pytest.fixture
def fake_client():
    return FakeLLMClient()


@pytest.fixture
def make_client():
    return FakeLLMClient


@pytest.fixture
def sample_script():
    return SAMPLE_SCRIPT


@pytest.fixture
def make_request():
    def _make(*kinds, theme="Cyberpunk Noir", script_text=SAMPLE_SCRIPT):
        return GenerationRequest(
            script_text=script_text,
            theme=theme,
            enabled_kinds=frozenset(kinds or AssetKind),
        )
    return _make
