"""
Enumerations used as lookup keys by the Video Agent.
"""

from enum import Enum


class Platform(Enum):
    """Publishing platforms a brief can target."""

    TIKTOK = "tiktok"
    YOUTUBE_SHORT = "youtube_short"
    YOUTUBE_LONG = "youtube_long"
    KWAI = "kwai"


class StyleBucket(Enum):
    """Recognised style families. Free-text styles resolve to one of these."""

    EMOTIONAL = "emotional"
    EDUCATIONAL = "educational"
    PROVOCATIVE = "provocative"
    FAITH = "faith"
    BUSINESS = "business"
    NEUTRAL = "neutral"


class DurationBucket(Enum):
    """Threshold-based classification of the requested duration."""

    SHORT = "short"
    MEDIUM = "medium"
    EXTENDED = "extended"
    LONG = "long"
