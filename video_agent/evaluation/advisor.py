"""
Improvement Advisor - critiques the generated hook.

The only step that reads another step's output (the script hook). It never
modifies the script it inspects.
"""

import logging
from typing import Iterator

from video_agent.core.config import AgentConfig, DEFAULT_CONFIG
from video_agent.core.enums import StyleBucket
from video_agent.core.utils import clip_words, word_count
from video_agent.evaluation.models import AlternativeHook, Improvement
from video_agent.generation.models import Brief, Script
from video_agent.generation.registry import (
    STYLE_REGISTRY,
    get_platform_definition,
    resolve_style,
    template_fields,
)

logger = logging.getLogger(__name__)


def _assess_retention_risk(brief: Brief, hook: str, config: AgentConfig) -> str:
    words = word_count(hook)
    window = get_platform_definition(brief.platform).retention_window
    if words > config.hook_word_limit:
        return (
            f"O gancho tem {words} palavras, acima do limite de {config.hook_word_limit}: "
            f"parte do público sai antes de entender a promessa. Corte para uma frase que caiba {window}."
        )
    pain = clip_words(template_fields(brief)["core_pain"], 8)
    return (
        f"O gancho tem {words} palavras e cabe {window}; o risco está em demorar "
        f"a mostrar {pain} na tela."
    )


def _suggest_hook_boost(brief: Brief, hook: str) -> str:
    pain = template_fields(brief)["core_pain"]
    if "?" in hook:
        return (
            f"Escreva \"{clip_words(pain, 6)}\" na tela junto com a primeira frase "
            "para reforçar a pergunta do gancho."
        )
    return (
        f"Transforme o gancho em uma pergunta direta sobre {pain} "
        "e só revele a resposta depois do contexto."
    )


def _alternative_candidates(brief: Brief) -> Iterator[AlternativeHook]:
    fields = template_fields(brief)
    for bucket in (resolve_style(brief.style), StyleBucket.NEUTRAL):
        angle = STYLE_REGISTRY[bucket].alternative
        yield AlternativeHook(
            hook=angle.hook_template.format(**fields),
            angle=angle.angle,
            reason=angle.reason,
        )
    yield AlternativeHook(
        hook=f"Ninguém fala sobre isso: {fields['core_pain']} em {fields['theme']}.",
        angle="Segredo revelado",
        reason="Prometer algo pouco falado desperta curiosidade logo na primeira frase.",
    )


def _pick_alternative(brief: Brief, hook: str) -> AlternativeHook:
    candidate = None
    for candidate in _alternative_candidates(brief):
        if candidate.hook.casefold() != hook.casefold():
            return candidate
    # A prefix makes it longer than the hook, hence different
    return candidate.model_copy(update={"hook": f"Pergunta sincera: {candidate.hook}"})


def advise_improvement(brief: Brief, script: Script, config: AgentConfig = DEFAULT_CONFIG) -> Improvement:
    """
    Critique the script hook and propose exactly one alternative.

    Args:
        brief: Normalized brief
        script: Generated script (read only)
        config: Provides ``hook_word_limit``

    Returns:
        Improvement with retention risk, hook boost, comment spark and an
        alternative hook different from ``script.hook``
    """
    fields = template_fields(brief)
    improvement = Improvement(
        retention_risk=_assess_retention_risk(brief, script.hook, config),
        hook_boost=_suggest_hook_boost(brief, script.hook),
        conversation_spark=(
            f"Feche pedindo que {fields['audience']} conte nos comentários qual é a maior trava "
            f"com {fields['theme']}, e responda os primeiros comentários em vídeo."
        ),
        alternative=_pick_alternative(brief, script.hook),
    )
    logger.debug("Improvement Advisor: alternative angle '%s'", improvement.alternative.angle)
    return improvement
