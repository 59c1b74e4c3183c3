"""
Soundtrack & framing suggestions from the (style, platform) pair.
"""

from video_agent.generation.models import Brief
from video_agent.generation.registry import get_platform_definition, get_style_definition


def suggest_soundtrack(brief: Brief) -> str:
    """Style mood combined with platform pacing, as one sentence."""
    style = get_style_definition(brief.style)
    platform = get_platform_definition(brief.platform)
    return f"{style.soundtrack_mood}, {platform.soundtrack_pacing}."


def suggest_framing(brief: Brief) -> str:
    """Platform composition combined with style mood, as one sentence."""
    style = get_style_definition(brief.style)
    platform = get_platform_definition(brief.platform)
    return f"{platform.framing}, {style.framing_mood}."
