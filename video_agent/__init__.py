"""
Video Agent - turns a short-video creative brief into a complete,
internally consistent content package (script, versions, on-screen text,
titles, description, hashtags, soundtrack, framing and critique).
"""

from video_agent.engine import VideoAgent, VideoResponse, generate
from video_agent.core import (
    AgentConfig,
    DEFAULT_CONFIG,
    InvalidBriefError,
    Platform,
    StyleBucket,
)
from video_agent.generation import (
    Analysis,
    Brief,
    Script,
    ScriptVersion,
    Versions,
    normalize_brief,
    PLATFORM_OPTIONS,
    STYLE_OPTIONS,
)
from video_agent.evaluation import AlternativeHook, Improvement
from video_agent.rendering import render_text

__all__ = [
    # Main entry points
    "VideoAgent",
    "VideoResponse",
    "generate",
    "render_text",
    # Core
    "AgentConfig",
    "DEFAULT_CONFIG",
    "InvalidBriefError",
    "Platform",
    "StyleBucket",
    # Models
    "Analysis",
    "Brief",
    "Script",
    "ScriptVersion",
    "Versions",
    "AlternativeHook",
    "Improvement",
    "normalize_brief",
    "PLATFORM_OPTIONS",
    "STYLE_OPTIONS",
]
