"""
Data models for the improvement critique.
"""

from pydantic import Field

from video_agent.generation.models import PackageModel


class AlternativeHook(PackageModel):
    """One alternative opening with its angle and rationale."""

    hook: str = Field(..., min_length=1, description="Alternative opening line")
    angle: str = Field(..., min_length=1, description="Creative angle the alternative explores")
    reason: str = Field(..., min_length=1, description="Why the angle should retain viewers")


class Improvement(PackageModel):
    """Critique of the generated hook."""

    retention_risk: str = Field(..., min_length=1)
    hook_boost: str = Field(..., min_length=1)
    conversation_spark: str = Field(..., min_length=1)
    alternative: AlternativeHook
