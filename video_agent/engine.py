"""
Video Agent - Main orchestrator of the brief-to-package pipeline.

Orchestrates the complete pipeline:
- Normalize: trim, default and validate the brief
- Analyze: audience / tension / emotional axis / action
- Plan: platform strategy and the five-part script
- Derive: versions, overlays, titles, description, hashtags,
  soundtrack, framing and the improvement critique
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from video_agent.core.config import AgentConfig, DEFAULT_CONFIG
from video_agent.core.enums import Platform
from video_agent.evaluation.advisor import advise_improvement
from video_agent.evaluation.models import Improvement
from video_agent.generation.analyzer import analyze_brief
from video_agent.generation.models import Analysis, Brief, PackageModel, Script, Versions
from video_agent.generation.normalizer import normalize_brief
from video_agent.generation.packaging import (
    build_description,
    build_hashtags,
    build_text_overlays,
    build_titles,
)
from video_agent.generation.script_builder import build_script
from video_agent.generation.soundtrack import suggest_framing, suggest_soundtrack
from video_agent.generation.strategist import build_platform_strategy
from video_agent.generation.versions import adapt_versions

logger = logging.getLogger(__name__)


class VideoResponse(PackageModel):
    """The complete content package for one brief."""

    platform: Platform
    analysis: Analysis
    platform_strategy: str
    script: Script
    versions: Versions
    text_overlays: List[str]
    titles: List[str]
    description: str
    hashtags: List[str]
    soundtrack: str
    framing: str
    improvement: Improvement

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dict with camelCase keys; an absent long version is ``None``."""
        return self.model_dump(mode="json", by_alias=True)


class VideoAgent:
    """
    Video Agent running the brief-to-package pipeline.

    Pipeline:
    1. Normalize: validate the brief (raises InvalidBriefError)
    2. Analyze: restate the brief
    3. Plan: platform strategy + script
    4. Derive: every other section from the brief and the script
    """

    def __init__(self, config: Optional[AgentConfig] = None):
        """
        Initialize the Video Agent.

        Args:
            config: Thresholds for duration buckets, versions and list sizes.
                    Defaults to DEFAULT_CONFIG.
        """
        self.config = config or DEFAULT_CONFIG

    def generate(self, brief: Union[Mapping[str, Any], Brief]) -> VideoResponse:
        """
        Turn a brief into a complete content package.

        Args:
            brief: Brief fields (snake_case or camelCase keys) or a Brief

        Returns:
            VideoResponse; the same brief always yields the same response

        Raises:
            InvalidBriefError: If a required field is empty or duration is out of range
        """
        normalized = normalize_brief(brief, self.config)
        logger.info(
            "Generating package: platform=%s, duration=%d, style=%s",
            normalized.platform.value,
            normalized.duration,
            normalized.style or "-",
        )

        analysis = analyze_brief(normalized)
        strategy = build_platform_strategy(normalized)
        script = build_script(normalized, analysis, self.config)

        response = VideoResponse(
            platform=normalized.platform,
            analysis=analysis,
            platform_strategy=strategy,
            script=script,
            versions=adapt_versions(normalized, script, self.config),
            text_overlays=build_text_overlays(normalized, script, self.config),
            titles=build_titles(normalized),
            description=build_description(normalized),
            hashtags=build_hashtags(normalized, self.config),
            soundtrack=suggest_soundtrack(normalized),
            framing=suggest_framing(normalized),
            improvement=advise_improvement(normalized, script, self.config),
        )
        logger.debug(
            "Package ready: %d development beats, %d titles, %d hashtags",
            len(script.development),
            len(response.titles),
            len(response.hashtags),
        )
        return response


def generate(
    brief: Union[Mapping[str, Any], Brief],
    config: Optional[AgentConfig] = None,
) -> VideoResponse:
    """Convenience wrapper around ``VideoAgent(config).generate(brief)``."""
    return VideoAgent(config).generate(brief)
