"""Tests for analysis, platform strategy, script building and version cuts."""

import itertools

import pytest

from video_agent.core.config import AgentConfig
from video_agent.generation.analyzer import analyze_brief
from video_agent.generation.script_builder import build_script
from video_agent.generation.strategist import build_platform_strategy
from video_agent.generation.versions import LONG_LABEL, SHORT_LABEL, adapt_versions, needs_long_version

from tests.conftest import PLATFORMS, STYLES, make_normalized


class TestAnalyzer:
    def test_fields_are_grounded_in_the_brief(self, normalized_brief):
        analysis = analyze_brief(normalized_brief)
        assert normalized_brief.audience.casefold() in analysis.audience.casefold()
        assert normalized_brief.core_pain.casefold() in analysis.tension.casefold()
        assert normalized_brief.core_pain.casefold() in analysis.emotional_axis.casefold()
        assert normalized_brief.desired_action.casefold() in analysis.action.casefold()

    def test_emotional_axis_follows_style(self):
        assert "do medo para a coragem" in analyze_brief(make_normalized(style="emocional")).emotional_axis
        assert "da dúvida para a ação" in analyze_brief(make_normalized(style="qualquer")).emotional_axis


class TestPlatformStrategy:
    def test_tiktok_stresses_first_seconds(self, normalized_brief):
        assert "1 a 3 segundos" in build_platform_strategy(normalized_brief)

    def test_youtube_long_stresses_mid_video_retention(self):
        strategy = build_platform_strategy(make_normalized(platform="youtube_long", duration=180))
        assert "meio do vídeo" in strategy
        assert "capítulos" in strategy
        assert "180s" in strategy

    def test_each_platform_gets_its_own_guidance(self):
        strategies = {build_platform_strategy(make_normalized(platform=p)) for p in PLATFORMS}
        assert len(strategies) == len(PLATFORMS)

    def test_recognised_style_blends_tone(self):
        assert "acolhedor e intenso" in build_platform_strategy(make_normalized(style="emocional"))
        assert "objetivo e estratégico" in build_platform_strategy(make_normalized(style="negócios"))

    def test_unknown_style_falls_back_to_neutral_tone(self):
        assert "direto e humano" in build_platform_strategy(make_normalized(style="cinematográfico"))

    def test_notes_close_the_strategy(self):
        strategy = build_platform_strategy(make_normalized(additionalNotes="gravar em um take só."))
        assert strategy.endswith("Observações do briefing consideradas: gravar em um take só.")


class TestScriptBuilder:
    @pytest.mark.parametrize(
        "duration,beats",
        [(10, 2), (30, 2), (31, 3), (60, 3), (61, 4), (120, 4), (121, 5), (240, 5)],
    )
    def test_development_length_follows_duration_bucket(self, duration, beats):
        assert len(build_script(make_normalized(duration=duration)).development) == beats

    @pytest.mark.parametrize("platform,style", list(itertools.product(PLATFORMS, STYLES)))
    def test_parts_are_pairwise_distinct(self, platform, style):
        script = build_script(make_normalized(platform=platform, style=style))
        parts = script.parts()
        assert all(parts)
        assert len(set(parts)) == len(parts)

    @pytest.mark.parametrize("style", STYLES)
    def test_call_to_action_restates_desired_action(self, style):
        script = build_script(make_normalized(style=style))
        assert "comentar a maior trava e compartilhar" in script.call_to_action

    @pytest.mark.parametrize("style", STYLES)
    def test_hook_uses_pain_and_theme_briefly(self, style):
        hook = build_script(make_normalized(style=style)).hook
        assert "travar ao ligar a câmera" in hook.casefold()
        assert "ansiedade em lançamentos" in hook.casefold()
        assert len(hook.split()) <= 20

    def test_context_references_audience(self, normalized_brief):
        assert normalized_brief.audience in build_script(normalized_brief).context

    @pytest.mark.parametrize("style", STYLES)
    def test_long_pain_and_theme_are_clipped_in_hook(self, style):
        brief = make_normalized(
            style=style,
            theme="como crescer um perfil de receitas veganas do zero sem investir em anúncios",
            corePain=(
                "travar toda vez que penso em gravar porque acho que ninguém vai assistir "
                "e que todo mundo vai julgar cada palavra"
            ),
        )
        script = build_script(brief)
        assert len(script.hook.split()) <= 20
        assert "travar toda vez" in script.hook.casefold()
        assert "como crescer" in script.hook.casefold()

    def test_hook_follows_configured_word_limit(self):
        brief = make_normalized(corePain="travar toda vez que penso em gravar porque acho que ninguém vai assistir")
        assert len(build_script(brief, config=AgentConfig(hook_word_limit=14)).hook.split()) <= 14

    def test_context_closes_with_the_analysis_axis(self, normalized_brief):
        analysis = analyze_brief(normalized_brief).model_copy(
            update={"emotional_axis": "Eixo emocional: da pressa para a calma, partindo do zero."}
        )
        context = build_script(normalized_brief, analysis).context
        assert context.endswith("O caminho deste vídeo vai da pressa para a calma, partindo do zero.")

    def test_custom_beat_count(self):
        config = AgentConfig(medium_bucket_beats=4, extended_bucket_beats=4)
        assert len(build_script(make_normalized(duration=45), config=config).development) == 4


class TestVersionAdapter:
    def test_short_version_keeps_hook_and_ends_with_cta(self, normalized_brief):
        script = build_script(normalized_brief)
        short = adapt_versions(normalized_brief, script).short
        assert short.label == SHORT_LABEL
        assert short.script[0] == script.hook
        assert short.script[-1] == script.call_to_action

    @pytest.mark.parametrize("duration", [10, 45, 90, 240])
    def test_short_version_compresses_development(self, duration):
        brief = make_normalized(duration=duration)
        script = build_script(brief)
        short = adapt_versions(brief, script).short
        assert len(short.script) <= 2 + 2
        assert short.script[1:-1] == script.development[:2]

    @pytest.mark.parametrize("duration,hint", [(10, "~10s"), (45, "~22s"), (240, "~30s")])
    def test_short_duration_hint(self, duration, hint):
        brief = make_normalized(duration=duration)
        assert adapt_versions(brief, build_script(brief)).short.duration_hint == hint

    @pytest.mark.parametrize(
        "platform,duration,expected",
        [
            ("tiktok", 45, False),
            ("tiktok", 60, False),
            ("tiktok", 61, True),
            ("kwai", 240, True),
            ("youtube_short", 30, False),
            ("youtube_long", 30, True),
        ],
    )
    def test_long_version_presence(self, platform, duration, expected):
        brief = make_normalized(platform=platform, duration=duration)
        versions = adapt_versions(brief, build_script(brief))
        assert needs_long_version(brief) is expected
        assert (versions.long is not None) is expected

    def test_long_version_keeps_every_beat_and_climax(self):
        brief = make_normalized(platform="youtube_long", duration=180)
        script = build_script(brief)
        long = adapt_versions(brief, script).long
        assert long.label == LONG_LABEL
        assert long.duration_hint == "~180s"
        assert long.script[0] == script.hook
        assert long.script[-1] == script.call_to_action
        assert script.climax in long.script
        for beat in script.development:
            assert beat in long.script

    def test_long_hint_never_below_threshold(self):
        brief = make_normalized(platform="youtube_long", duration=30)
        assert adapt_versions(brief, build_script(brief)).long.duration_hint == "~60s"

    def test_script_is_not_modified(self, normalized_brief):
        script = build_script(normalized_brief)
        snapshot = script.model_copy(deep=True)
        adapt_versions(normalized_brief, script)
        assert script == snapshot
