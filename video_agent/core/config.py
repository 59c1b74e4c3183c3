"""
Configuration and duration bucketing for the Video Agent.
"""

from dataclasses import dataclass

from video_agent.core.enums import DurationBucket


@dataclass(frozen=True)
class AgentConfig:
    """
    Thresholds that drive every numeric decision of the generation pipeline.

    Defaults:
        - duration accepted in [10, 240] seconds
        - <= 30s is the short bucket, <= 60s medium, <= 120s extended, above is long
        - the long cut is produced above 60s (or always on YouTube Long)
    """

    min_duration: int = 10
    max_duration: int = 240

    # Upper bounds (inclusive) of the duration buckets
    short_bucket_max: int = 30
    medium_bucket_max: int = 60
    extended_bucket_max: int = 120

    # Development beats per bucket
    short_bucket_beats: int = 2
    medium_bucket_beats: int = 3
    extended_bucket_beats: int = 4
    long_bucket_beats: int = 5

    long_version_threshold: int = 60
    short_version_max_beats: int = 2
    short_version_max_seconds: int = 30

    hook_word_limit: int = 20
    max_overlays: int = 6
    min_hashtags: int = 5
    max_hashtags: int = 10

    def __post_init__(self):
        """Validate configuration values."""
        if not 0 < self.min_duration <= self.max_duration:
            raise ValueError("min_duration must be positive and not above max_duration")
        if not self.min_duration <= self.short_bucket_max < self.medium_bucket_max < self.extended_bucket_max:
            raise ValueError("duration bucket bounds must be strictly increasing from min_duration")
        if not 1 <= self.short_bucket_beats <= self.medium_bucket_beats <= self.extended_bucket_beats <= self.long_bucket_beats:
            raise ValueError("development beats must be at least 1 and non-decreasing per bucket")
        if self.long_bucket_beats > 5:
            raise ValueError("long_bucket_beats cannot exceed the 5 available development beats")
        if self.short_version_max_beats < 1:
            raise ValueError("short_version_max_beats must be at least 1")
        if self.short_version_max_seconds < self.min_duration:
            raise ValueError("short_version_max_seconds must be at least min_duration")
        if self.hook_word_limit < 1:
            raise ValueError("hook_word_limit must be at least 1")
        if not 3 <= self.max_overlays <= 6:
            raise ValueError("max_overlays must be between 3 and 6")
        if not 5 <= self.min_hashtags <= self.max_hashtags <= 10:
            raise ValueError("hashtag bounds must satisfy 5 <= min_hashtags <= max_hashtags <= 10")


DEFAULT_CONFIG = AgentConfig()


def classify_duration(duration: int, config: AgentConfig = DEFAULT_CONFIG) -> DurationBucket:
    """
    Map a duration in seconds to its bucket.

    Args:
        duration: Requested duration in seconds (already validated)
        config: Thresholds to apply

    Returns:
        DurationBucket for the duration
    """
    if duration <= config.short_bucket_max:
        return DurationBucket.SHORT
    if duration <= config.medium_bucket_max:
        return DurationBucket.MEDIUM
    if duration <= config.extended_bucket_max:
        return DurationBucket.EXTENDED
    return DurationBucket.LONG


def development_beat_count(duration: int, config: AgentConfig = DEFAULT_CONFIG) -> int:
    """Number of development beats the script gets for a duration."""
    beats = {
        DurationBucket.SHORT: config.short_bucket_beats,
        DurationBucket.MEDIUM: config.medium_bucket_beats,
        DurationBucket.EXTENDED: config.extended_bucket_beats,
        DurationBucket.LONG: config.long_bucket_beats,
    }
    return beats[classify_duration(duration, config)]
