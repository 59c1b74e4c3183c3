"""
Plain-text rendering of a VideoResponse, one section per deliverable.
"""

from typing import List

from video_agent.engine import VideoResponse
from video_agent.generation.models import ScriptVersion
from video_agent.generation.registry import get_platform_definition


def _section(title: str, lines: List[str]) -> str:
    return "\n".join([f"## {title}", *lines])


def _version_lines(version: ScriptVersion) -> List[str]:
    return [f"{version.label} ({version.duration_hint}):", *(f"• {line}" for line in version.script)]


def render_text(response: VideoResponse) -> str:
    """Render every field of the package under its section heading."""
    label = get_platform_definition(response.platform).label
    script = response.script
    improvement = response.improvement

    versions = _version_lines(response.versions.short)
    if response.versions.long:
        versions += _version_lines(response.versions.long)

    sections = [
        _section(
            "Análise inicial",
            [
                response.analysis.audience,
                response.analysis.tension,
                response.analysis.emotional_axis,
                response.analysis.action,
            ],
        ),
        _section(f"Estratégia para {label}", [response.platform_strategy]),
        _section(
            "Roteiro estruturado",
            [
                f"Gancho: {script.hook}",
                f"Contexto: {script.context}",
                "Desenvolvimento:",
                *(f"• {line}" for line in script.development),
                f"Clímax: {script.climax}",
                f"CTA: {script.call_to_action}",
            ],
        ),
        _section("Versões", versions),
        _section("Texto na tela", response.text_overlays),
        _section("Títulos sugeridos", response.titles),
        _section("Descrição otimizada", response.description.split("\n")),
        _section("Hashtags estratégicas", [" ".join(response.hashtags)]),
        _section(
            "Trilha & Enquadramento",
            [f"Trilha sonora: {response.soundtrack}", f"Enquadramento: {response.framing}"],
        ),
        _section(
            "Melhoria contínua",
            [
                f"Risco de retenção: {improvement.retention_risk}",
                f"Refino de gancho: {improvement.hook_boost}",
                f"Mais comentários: {improvement.conversation_spark}",
                f"Versão alternativa: {improvement.alternative.hook} - "
                f"{improvement.alternative.angle} ({improvement.alternative.reason})",
            ],
        ),
    ]
    return "\n\n".join(sections) + "\n"
