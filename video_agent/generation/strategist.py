"""
Platform strategy - platform guidance blended with the style's tone.
"""

import logging

from video_agent.core.utils import strip_terminal_punctuation
from video_agent.generation.models import Brief
from video_agent.generation.registry import (
    get_platform_definition,
    get_style_definition,
    resolve_style,
)

logger = logging.getLogger(__name__)


def build_platform_strategy(brief: Brief) -> str:
    """
    Build the platform-specific strategy text.

    The platform template is filled with the requested duration and the tone
    words of the brief's style; unrecognised styles use the neutral tone.
    Additional notes, when present, close the text.
    """
    platform = get_platform_definition(brief.platform)
    style = get_style_definition(brief.style)

    strategy = platform.strategy_template.format(duration=brief.duration, tone=style.tone)
    if brief.additional_notes:
        strategy += f" Observações do briefing consideradas: {strip_terminal_punctuation(brief.additional_notes)}."

    logger.debug(
        "Platform Strategist: platform=%s, style bucket=%s",
        brief.platform.value,
        resolve_style(brief.style).value,
    )
    return strategy
