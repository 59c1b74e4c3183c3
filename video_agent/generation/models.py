"""
Data models for the generation pipeline.

Every model is immutable and serialises with camelCase aliases
(``corePain``, ``callToAction``...), the shape callers render.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from video_agent.core.enums import Platform


class PackageModel(BaseModel):
    """Base for all package models: frozen, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Brief(PackageModel):
    """A normalized creative brief. Build it through ``normalize_brief``."""

    theme: str = Field(..., min_length=1, description="Central theme of the video")
    platform: Platform = Field(..., description="Target platform")
    duration: int = Field(..., gt=0, description="Requested duration in seconds")
    style: str = Field("", description="Free-form style label, empty for a neutral tone")
    audience: str = Field(..., min_length=1, description="Direct target audience")
    core_pain: str = Field(..., min_length=1, description="Main pain point or blocker")
    desired_action: str = Field(..., min_length=1, description="What the viewer should do at the end")
    additional_notes: Optional[str] = Field(None, description="Extra notes, None when absent")


class Analysis(PackageModel):
    """Initial reading of the brief."""

    audience: str
    tension: str
    emotional_axis: str
    action: str


class Script(PackageModel):
    """Five-part retention structure."""

    hook: str = Field(..., min_length=1)
    context: str = Field(..., min_length=1)
    development: List[str] = Field(..., min_length=1, description="Ordered development beats")
    climax: str = Field(..., min_length=1)
    call_to_action: str = Field(..., min_length=1)

    def parts(self) -> List[str]:
        """The five parts as strings (development joined with spaces), in order."""
        return [self.hook, self.context, " ".join(self.development), self.climax, self.call_to_action]


class ScriptVersion(PackageModel):
    """A length-adapted cut of the script."""

    label: str
    duration_hint: str
    script: List[str] = Field(..., min_length=1)


class Versions(PackageModel):
    short: ScriptVersion
    long: Optional[ScriptVersion] = None
