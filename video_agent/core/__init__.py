"""
Core infrastructure for the Video Agent.

Shared enums, configuration, errors and text utilities.
"""

from video_agent.core.config import (
    AgentConfig,
    DEFAULT_CONFIG,
    classify_duration,
    development_beat_count,
)
from video_agent.core.enums import DurationBucket, Platform, StyleBucket
from video_agent.core.errors import InvalidBriefError

__all__ = [
    "AgentConfig",
    "DEFAULT_CONFIG",
    "classify_duration",
    "development_beat_count",
    "DurationBucket",
    "Platform",
    "StyleBucket",
    "InvalidBriefError",
]
