"""
Content Generation module.

Normalization, analysis, strategy, script, versions and packaging steps.
"""

from video_agent.generation.analyzer import analyze_brief
from video_agent.generation.models import (
    Analysis,
    Brief,
    PackageModel,
    Script,
    ScriptVersion,
    Versions,
)
from video_agent.generation.normalizer import normalize_brief
from video_agent.generation.packaging import (
    build_description,
    build_hashtags,
    build_text_overlays,
    build_titles,
)
from video_agent.generation.registry import (
    PLATFORM_OPTIONS,
    PLATFORM_REGISTRY,
    STYLE_OPTIONS,
    STYLE_REGISTRY,
    PlatformDefinition,
    StyleDefinition,
    get_platform_definition,
    get_style_definition,
    resolve_style,
)
from video_agent.generation.script_builder import build_script
from video_agent.generation.soundtrack import suggest_framing, suggest_soundtrack
from video_agent.generation.strategist import build_platform_strategy
from video_agent.generation.versions import adapt_versions, needs_long_version

__all__ = [
    "analyze_brief",
    "Analysis",
    "Brief",
    "PackageModel",
    "Script",
    "ScriptVersion",
    "Versions",
    "normalize_brief",
    "build_description",
    "build_hashtags",
    "build_text_overlays",
    "build_titles",
    "PLATFORM_OPTIONS",
    "PLATFORM_REGISTRY",
    "STYLE_OPTIONS",
    "STYLE_REGISTRY",
    "PlatformDefinition",
    "StyleDefinition",
    "get_platform_definition",
    "get_style_definition",
    "resolve_style",
    "build_script",
    "suggest_framing",
    "suggest_soundtrack",
    "build_platform_strategy",
    "adapt_versions",
    "needs_long_version",
]
