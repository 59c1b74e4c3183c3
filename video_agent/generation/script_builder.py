"""
Script Builder - five-part retention structure.

Hook -> Context -> Development -> Climax -> Call to action. The number of
development beats is the only place a numeric input controls output size:
it comes from the duration bucket (see ``AgentConfig``).
"""

import logging
import re
from typing import Dict, Optional

from video_agent.core.config import AgentConfig, DEFAULT_CONFIG, classify_duration, development_beat_count
from video_agent.core.utils import clip_words, upper_first, word_count
from video_agent.generation.analyzer import EMOTIONAL_AXIS_LABEL, analyze_brief
from video_agent.generation.models import Analysis, Brief, Script
from video_agent.generation.registry import (
    CONTEXT_TEMPLATE,
    DEVELOPMENT_BEATS,
    get_style_definition,
    template_fields,
)

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{\w+\}")


def _fixed_word_count(template: str) -> int:
    """Words a template contributes on its own, placeholders excluded."""
    return sum(1 for token in _PLACEHOLDER.sub(" ", template).split() if any(c.isalnum() for c in token))


def _hook_fields(template: str, fields: Dict[str, str], word_limit: int) -> Dict[str, str]:
    """
    Clip the theme and the pain point so the filled hook fits ``word_limit``.

    The theme keeps at most a third of the free words; the pain point gets
    the rest. Each keeps at least one word.
    """
    room = max(2, word_limit - _fixed_word_count(template))
    theme = clip_words(fields["theme"], min(word_count(fields["theme"]), max(1, room // 3)))
    core_pain = clip_words(fields["core_pain"], max(1, room - word_count(theme)))
    return {
        **fields,
        "theme": theme,
        "theme_title": upper_first(theme),
        "core_pain": core_pain,
        "core_pain_title": upper_first(core_pain),
    }


def _axis_clause(analysis: Analysis) -> str:
    """The Analyzer's emotional axis without its label or final period."""
    return analysis.emotional_axis.replace(EMOTIONAL_AXIS_LABEL, "", 1).rstrip(".")


def build_script(
    brief: Brief,
    analysis: Optional[Analysis] = None,
    config: AgentConfig = DEFAULT_CONFIG,
) -> Script:
    """
    Build the structured script for a brief.

    Args:
        brief: Normalized brief
        analysis: The brief's analysis; computed from the brief when omitted
        config: Duration bucket thresholds and the hook word limit

    Returns:
        Script with pairwise distinct parts; the call to action quotes the
        desired action
    """
    if analysis is None:
        analysis = analyze_brief(brief)
    fields = template_fields(brief)
    style = get_style_definition(brief.style)

    beats = development_beat_count(brief.duration, config)
    development = [beat.template.format(**fields) for beat in DEVELOPMENT_BEATS[:beats]]

    context = CONTEXT_TEMPLATE.format(**fields) + f" O caminho deste vídeo vai {_axis_clause(analysis)}."
    hook = style.hook_template.format(**_hook_fields(style.hook_template, fields, config.hook_word_limit))

    script = Script(
        hook=hook,
        context=context,
        development=development,
        climax=style.climax_template.format(**fields),
        call_to_action=style.cta_template.format(**fields),
    )
    logger.debug(
        "Script Builder: bucket=%s, development beats=%d, hook words=%d",
        classify_duration(brief.duration, config).value,
        len(development),
        word_count(hook),
    )
    return script
