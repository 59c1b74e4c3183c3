"""
Brief normalization - trims, defaults and validates a raw brief.

Runs before any generation step. A brief that passes is guaranteed to be
usable by every downstream step.
"""

import logging
from typing import Any, Mapping, Optional, Union

from pydantic.alias_generators import to_camel

from video_agent.core.config import AgentConfig, DEFAULT_CONFIG
from video_agent.core.enums import Platform
from video_agent.core.errors import InvalidBriefError
from video_agent.core.utils import clean_text
from video_agent.generation.models import Brief

logger = logging.getLogger(__name__)

REQUIRED_TEXT_FIELDS = ("theme", "audience", "core_pain", "desired_action")


def _lookup(raw: Mapping[str, Any], field: str) -> Any:
    """Read a field by its snake_case or camelCase name."""
    if field in raw:
        return raw[field]
    return raw.get(to_camel(field))


def _reject(field: str, reason: str) -> InvalidBriefError:
    logger.warning("Rejected brief: %s %s", to_camel(field), reason)
    return InvalidBriefError(to_camel(field), reason)


def _coerce_platform(value: Any) -> Platform:
    if isinstance(value, Platform):
        return value
    key = clean_text(value).lower()
    if not key:
        raise _reject("platform", "must not be empty")
    try:
        return Platform(key)
    except ValueError:
        options = ", ".join(p.value for p in Platform)
        raise _reject("platform", f"unsupported platform '{key}' (expected one of: {options})") from None


def _coerce_duration(value: Any, config: AgentConfig) -> int:
    if value is None or isinstance(value, bool):
        raise _reject("duration", "must be a whole number of seconds")
    if isinstance(value, int):
        duration = value
    else:
        if isinstance(value, str):
            value = value.strip()
        try:
            number = float(value)
        except (TypeError, ValueError, OverflowError):
            raise _reject("duration", "must be a whole number of seconds") from None
        if not number.is_integer():
            raise _reject("duration", "must be a whole number of seconds")
        duration = int(number)
    if not config.min_duration <= duration <= config.max_duration:
        raise _reject(
            "duration",
            f"must be between {config.min_duration} and {config.max_duration} seconds, got {duration}",
        )
    return duration


def normalize_brief(
    raw: Union[Mapping[str, Any], Brief],
    config: AgentConfig = DEFAULT_CONFIG,
) -> Brief:
    """
    Normalize and validate a raw brief.

    Args:
        raw: Brief fields keyed by snake_case or camelCase names, or a Brief
        config: Duration bounds to enforce

    Returns:
        A Brief with trimmed text, an integer duration and ``None`` for
        absent notes

    Raises:
        InvalidBriefError: If a required field is empty or has no letters or digits,
            or duration is not a whole number within range
    """
    if isinstance(raw, Brief):
        raw = raw.model_dump()

    text = {}
    for field in REQUIRED_TEXT_FIELDS:
        value = clean_text(_lookup(raw, field))
        if not value:
            raise _reject(field, "must not be empty")
        if not any(char.isalnum() for char in value):
            raise _reject(field, "must contain letters or digits")
        text[field] = value

    platform = _coerce_platform(_lookup(raw, "platform"))
    duration = _coerce_duration(_lookup(raw, "duration"), config)

    notes: Optional[str] = clean_text(_lookup(raw, "additional_notes")) or None

    return Brief(
        theme=text["theme"],
        platform=platform,
        duration=duration,
        style=clean_text(_lookup(raw, "style")),
        audience=text["audience"],
        core_pain=text["core_pain"],
        desired_action=text["desired_action"],
        additional_notes=notes,
    )
