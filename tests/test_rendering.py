"""Tests for the plain-text rendering."""

from video_agent import generate, render_text

from tests.conftest import make_brief


def test_every_section_is_rendered(example_brief):
    response = generate(example_brief)
    text = render_text(response)

    for heading in (
        "## Análise inicial",
        "## Estratégia para TikTok",
        "## Roteiro estruturado",
        "## Versões",
        "## Texto na tela",
        "## Títulos sugeridos",
        "## Descrição otimizada",
        "## Hashtags estratégicas",
        "## Trilha & Enquadramento",
        "## Melhoria contínua",
    ):
        assert heading in text
    assert f"Gancho: {response.script.hook}" in text
    assert f"CTA: {response.script.call_to_action}" in text
    assert " ".join(response.hashtags) in text
    assert response.improvement.alternative.hook in text


def test_long_version_rendered_only_when_present(example_brief):
    assert "Versão longa" not in render_text(generate(example_brief))
    long_text = render_text(generate(make_brief(platform="youtube_long", duration=180)))
    assert "Versão longa (~180s):" in long_text
    assert "## Estratégia para YouTube Longo" in long_text
