from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .settings import MIN_SCRIPT_CHARS, MIN_THEME_CHARS


class AssetKind(str, Enum):
    BLUEPRINT = "blueprint"
    AUDIO_PROMPT = "audio_prompt"
    STORYBOARD = "storyboard"


class ResultStatus(str, Enum):
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class AudioPrompt(BaseModel):
    """Music-generation prompt pair: a style description and performable lyrics."""
    model_config = ConfigDict(extra="forbid")

    style: str
    lyrics: str


Payload = Union[AudioPrompt, str]


class GenerationRequest(BaseModel):
    """One user submission. Built (and validated) by the caller, frozen afterwards."""
    model_config = ConfigDict(frozen=True)

    script_text: str
    theme: str
    enabled_kinds: FrozenSet[AssetKind]

    @field_validator("script_text")
    @classmethod
    def _script_long_enough(cls, value: str) -> str:
        if len(value.strip()) <= MIN_SCRIPT_CHARS:
            raise ValueError(f"script_text must be longer than {MIN_SCRIPT_CHARS} characters")
        return value

    @field_validator("theme")
    @classmethod
    def _theme_long_enough(cls, value: str) -> str:
        if len(value.strip()) <= MIN_THEME_CHARS:
            raise ValueError(f"theme must be longer than {MIN_THEME_CHARS} characters")
        return value

    @field_validator("enabled_kinds")
    @classmethod
    def _at_least_one_kind(cls, value: FrozenSet[AssetKind]) -> FrozenSet[AssetKind]:
        if not value:
            raise ValueError("at least one asset kind must be enabled")
        return value


class GenerateForm(BaseModel):
    """Request body for POST /v1/generate; one toggle per output kind."""
    script_text: str
    theme: str
    blueprint: bool = True
    suno: bool = True
    image_frames: bool = True

    @model_validator(mode="after")
    def _any_toggle(self) -> "GenerateForm":
        if not (self.blueprint or self.suno or self.image_frames):
            raise ValueError("enable at least one of blueprint, suno, image_frames")
        return self

    def to_request(self) -> GenerationRequest:
        kinds = set()
        if self.blueprint:
            kinds.add(AssetKind.BLUEPRINT)
        if self.suno:
            kinds.add(AssetKind.AUDIO_PROMPT)
        if self.image_frames:
            kinds.add(AssetKind.STORYBOARD)
        return GenerationRequest(script_text=self.script_text, theme=self.theme, enabled_kinds=frozenset(kinds))


class GenerationResult(BaseModel):
    kind: AssetKind
    status: ResultStatus = ResultStatus.PENDING
    payload: Optional[Payload] = None
    error: Optional[str] = None


class SessionSnapshot(BaseModel):
    session_id: str
    is_loading: bool
    error: Optional[str] = None
    results: Dict[AssetKind, GenerationResult] = Field(default_factory=dict)


class GuidanceState(BaseModel):
    status: Optional[ResultStatus] = None
    text: str = ""
    error: Optional[str] = None


class GuidanceForm(BaseModel):
    script_text: str

    @field_validator("script_text")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("script_text is required")
        return value


class GuidanceResponse(BaseModel):
    guidance: str


class FanOutState(BaseModel):
    """Graph state for one fan-out. Each generator node writes only its own field."""
    script_text: str
    theme: str
    kinds: List[AssetKind]
    blueprint: Optional[str] = None
    audio_prompt: Optional[AudioPrompt] = None
    storyboard: Optional[str] = None
