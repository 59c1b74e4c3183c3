"""
Version Adapter - short cut and, above a threshold, long cut of a script.
"""

import logging

from video_agent.core.config import AgentConfig, DEFAULT_CONFIG
from video_agent.core.enums import Platform
from video_agent.generation.models import Brief, Script, ScriptVersion, Versions
from video_agent.generation.registry import RETENTION_CHECKPOINT

logger = logging.getLogger(__name__)

SHORT_LABEL = "Versão curta"
LONG_LABEL = "Versão longa"


def needs_long_version(brief: Brief, config: AgentConfig = DEFAULT_CONFIG) -> bool:
    """A long cut is produced for YouTube Long or above ``long_version_threshold`` seconds."""
    return brief.platform is Platform.YOUTUBE_LONG or brief.duration > config.long_version_threshold


def _short_version(brief: Brief, script: Script, config: AgentConfig) -> ScriptVersion:
    seconds = max(config.min_duration, min(config.short_version_max_seconds, brief.duration // 2))
    lines = [script.hook, *script.development[: config.short_version_max_beats], script.call_to_action]
    return ScriptVersion(label=SHORT_LABEL, duration_hint=f"~{seconds}s", script=lines)


def _long_version(brief: Brief, script: Script, config: AgentConfig) -> ScriptVersion:
    seconds = max(brief.duration, config.long_version_threshold)
    lines = [
        script.hook,
        script.context,
        *script.development,
        RETENTION_CHECKPOINT,
        script.climax,
        script.call_to_action,
    ]
    return ScriptVersion(label=LONG_LABEL, duration_hint=f"~{seconds}s", script=lines)


def adapt_versions(brief: Brief, script: Script, config: AgentConfig = DEFAULT_CONFIG) -> Versions:
    """
    Derive the length-adapted cuts of a script.

    Both cuts open with the hook and end with the call to action. The short
    cut keeps at most ``short_version_max_beats`` development beats; the long
    cut keeps every beat plus a retention checkpoint and the climax.
    """
    long = _long_version(brief, script, config) if needs_long_version(brief, config) else None
    logger.debug("Version Adapter: long version %s", "included" if long else "skipped")
    return Versions(short=_short_version(brief, script, config), long=long)
