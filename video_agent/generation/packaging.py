"""
Packaging generators - on-screen text, titles, description and hashtags.

Each generator is independent and reads only the brief (and the script for
overlays).
"""

import logging
from typing import Dict, List

from video_agent.core.config import AgentConfig, DEFAULT_CONFIG
from video_agent.core.enums import Platform
from video_agent.core.utils import clip_words, dedupe, hashtag_token, keywords, upper_first
from video_agent.generation.models import Brief, Script
from video_agent.generation.registry import (
    DEVELOPMENT_BEATS,
    GENERIC_HASHTAGS,
    get_platform_definition,
    get_style_definition,
    template_fields,
)

logger = logging.getLogger(__name__)

MAX_TITLES = 5
MAX_THEME_TAG_LENGTH = 30

TITLE_TEMPLATES = (
    "{theme_title}: o que ninguém te conta sobre {core_pain}",
    "{core_pain_title}? Assista antes de desistir de {theme}",
    "O passo que muda tudo em {theme}",
    "Para {audience}: como vencer {core_pain}",
)

# Search-style titles added per platform
PLATFORM_TITLE_TEMPLATES: Dict[Platform, str] = {
    Platform.YOUTUBE_LONG: "{theme_title}: guia completo, do bloqueio à ação",
}


def build_text_overlays(brief: Brief, script: Script, config: AgentConfig = DEFAULT_CONFIG) -> List[str]:
    """
    Short on-screen phrases, one per beat: hook, development beats, CTA.

    Development labels are cut so the list never exceeds ``max_overlays``.
    """
    fields = template_fields(brief)
    hook = f"{upper_first(clip_words(fields['core_pain'], 6))}?"
    cta = f"Agora: {clip_words(fields['desired_action'], 4)}"

    room = config.max_overlays - 2
    beats = [beat.overlay for beat in DEVELOPMENT_BEATS[: len(script.development)]][:room]
    return [hook, *beats, cta]


def build_titles(brief: Brief) -> List[str]:
    """Distinct candidate titles, each naming the theme or the pain point."""
    fields = template_fields(brief)
    templates = list(TITLE_TEMPLATES)
    if brief.platform in PLATFORM_TITLE_TEMPLATES:
        templates.append(PLATFORM_TITLE_TEMPLATES[brief.platform])
    titles = dedupe(template.format(**fields) for template in templates)
    return titles[:MAX_TITLES]


def build_description(brief: Brief) -> str:
    """
    Multi-line description: theme, audience, promise, soft CTA, platform close.

    Hashtags are emitted separately, so ``#`` never appears here.
    """
    fields = {key: value.replace("#", "") for key, value in template_fields(brief).items()}
    style = get_style_definition(brief.style)
    platform = get_platform_definition(brief.platform)

    lines = [
        f"{fields['theme_title']}, sem rodeios e com tom {style.tone}.",
        f"Feito para {fields['audience']}.",
        f"Neste vídeo: como lidar com {fields['core_pain']} sem travar o processo.",
        f"Se fizer sentido para você, {fields['desired_action']}.",
        platform.description_closing,
    ]
    return "\n".join(lines)


def build_hashtags(brief: Brief, config: AgentConfig = DEFAULT_CONFIG) -> List[str]:
    """
    Ordered, deduplicated hashtags.

    Order: whole-theme tag, platform tags, style tags, theme keywords, then
    generic tags filling up to ``max_hashtags``. The generic list alone
    covers ``min_hashtags`` for any brief.
    """
    platform = get_platform_definition(brief.platform)
    style = get_style_definition(brief.style)

    candidates = []
    theme_token = hashtag_token(brief.theme)[:MAX_THEME_TAG_LENGTH]
    if theme_token:
        candidates.append(f"#{theme_token}")
    candidates.extend(platform.hashtags)
    candidates.extend(style.hashtags)
    candidates.extend(f"#{word}" for word in keywords(brief.theme))

    hashtags = dedupe(candidates, key=str)[: config.max_hashtags]
    specific = len(hashtags)
    for tag in GENERIC_HASHTAGS:
        if len(hashtags) >= config.max_hashtags:
            break
        if tag not in hashtags:
            hashtags.append(tag)
    if len(hashtags) < config.min_hashtags:
        raise ValueError(f"Only {len(hashtags)} hashtags available, at least {config.min_hashtags} required")
    logger.debug("Hashtags: %d brief-specific, %d generic", specific, len(hashtags) - specific)
    return hashtags
