"""
Brief analysis - restates audience, tension, emotional axis and action.

Each restatement quotes the brief's own wording so the package stays
traceable to its input.
"""

import logging

from video_agent.generation.models import Analysis, Brief
from video_agent.generation.registry import get_style_definition, template_fields

logger = logging.getLogger(__name__)

EMOTIONAL_AXIS_LABEL = "Eixo emocional: "


def analyze_brief(brief: Brief) -> Analysis:
    """
    Derive the initial analysis of a brief.

    Args:
        brief: Normalized brief

    Returns:
        Analysis whose fields contain the audience, pain point and desired action
    """
    fields = template_fields(brief)
    style = get_style_definition(brief.style)

    analysis = Analysis(
        audience=f"Público direto: {fields['audience']}, que precisa se reconhecer já na primeira frase.",
        tension=f"Tensão central: {fields['core_pain']} enquanto tenta avançar em {fields['theme']}.",
        emotional_axis=f"{EMOTIONAL_AXIS_LABEL}{style.emotional_axis}, partindo de {fields['core_pain']}.",
        action=f"Ação esperada ao final: {fields['desired_action']}.",
    )
    logger.debug("Analyzer: emotional axis '%s'", style.emotional_axis)
    return analysis
