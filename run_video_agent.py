"""
Standard entry point for running the Video Agent.

Usage:
    python run_video_agent.py --theme "ansiedade em lançamentos" --audience "criadores" \
        --pain "travar ao ligar a câmera" --action "comentar a maior trava"
    python run_video_agent.py --brief brief.json --format json
    python run_video_agent.py --brief brief.json --platform youtube_long --duration 180
"""
import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from pydantic.alias_generators import to_camel

from video_agent import InvalidBriefError, Platform, VideoAgent, render_text
from video_agent.generation.registry import DEFAULT_DURATION, DEFAULT_PLATFORM, DEFAULT_STYLE

logger = logging.getLogger("video_agent_cli")

# CLI flag -> brief field
FLAG_FIELDS = {
    "theme": "theme",
    "platform": "platform",
    "duration": "duration",
    "style": "style",
    "audience": "audience",
    "pain": "core_pain",
    "action": "desired_action",
    "notes": "additional_notes",
}


def load_brief_file(path: str) -> Dict[str, Any]:
    """Read a JSON brief (camelCase or snake_case keys)."""
    with open(path, "r", encoding="utf-8") as f:
        payload = json.load(f)
    if not isinstance(payload, dict):
        raise ValueError(f"Brief file {path} must contain a JSON object")
    return payload


def build_brief(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Merge the brief file (if any) with the flags; flags win.
    """
    brief: Dict[str, Any] = {
        "platform": DEFAULT_PLATFORM.value,
        "duration": DEFAULT_DURATION,
        "style": DEFAULT_STYLE,
    }
    if args.brief:
        brief.update(load_brief_file(args.brief))
    for flag, field in FLAG_FIELDS.items():
        value = getattr(args, flag)
        if value is not None:
            # Drop the other spelling so the flag value is the one read
            brief.pop(field, None)
            brief.pop(to_camel(field), None)
            brief[field] = value
    return brief


def run(brief: Dict[str, Any], output_format: str = "text") -> str:
    """
    Run the agent on a brief and return the rendered output.
    """
    agent = VideoAgent()
    result = agent.generate(brief)
    logger.info("Generation complete: %d titles, %d hashtags", len(result.titles), len(result.hashtags))
    if output_format == "json":
        return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
    return render_text(result)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Video Agent")
    parser.add_argument("--brief", help="Path to a JSON brief file")
    parser.add_argument("--theme", help="Central theme")
    parser.add_argument("--platform", choices=[p.value for p in Platform], help="Target platform (default: tiktok)")
    parser.add_argument("--duration", type=int, help="Duration in seconds, 10-240 (default: 45)")
    parser.add_argument("--style", help="Style: emocional, educativo, provocativo, fé, negócios (default: emocional)")
    parser.add_argument("--audience", help="Direct target audience")
    parser.add_argument("--pain", help="Main pain point or blocker")
    parser.add_argument("--action", help="Desired action at the end of the video")
    parser.add_argument("--notes", help="Optional extra notes")
    parser.add_argument("--format", choices=["text", "json"], default="text", help="Output format")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    try:
        brief = build_brief(args)
    except (OSError, ValueError) as e:
        logger.error(f"Could not read brief: {e}")
        return 1

    try:
        output = run(brief, output_format=args.format)
    except InvalidBriefError as e:
        logger.error(f"Invalid brief: {e}")
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
