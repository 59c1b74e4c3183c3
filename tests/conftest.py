"""Shared fixtures: the reference brief and a builder for variations of it."""

import pytest

from video_agent.generation.normalizer import normalize_brief

EXAMPLE_BRIEF = {
    "theme": "ansiedade em lançamentos",
    "platform": "tiktok",
    "duration": 45,
    "style": "emocional",
    "audience": "criadores que revisam roteiros à noite",
    "corePain": "travar ao ligar a câmera",
    "desiredAction": "comentar a maior trava e compartilhar",
}

PLATFORMS = ["tiktok", "youtube_short", "youtube_long", "kwai"]
STYLES = ["emocional", "educativo", "provocativo", "fé", "negócios", "cinematográfico"]


def make_brief(**overrides):
    """Copy of EXAMPLE_BRIEF with camelCase overrides applied."""
    brief = dict(EXAMPLE_BRIEF)
    brief.update(overrides)
    return brief


def make_normalized(**overrides):
    return normalize_brief(make_brief(**overrides))


@pytest.fixture
def example_brief():
    return make_brief()


@pytest.fixture
def normalized_brief():
    return make_normalized()
