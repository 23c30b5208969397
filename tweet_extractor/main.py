from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Sequence

from tweet_extractor.config import Settings, load_settings
from tweet_extractor.extractor import create
from tweet_extractor.patterns.scanner import TokenMatch


logging.basicConfig(
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)


def _read_text(parts: list[str]) -> str:
    if parts:
        return " ".join(parts)
    return sys.stdin.read()


def _entity_row(match: TokenMatch) -> dict[str, Any]:
    return {
        "kind": match.kind,
        "text": match.token_text,
        "symbol": match.trigger_symbol,
        "start": match.start_offset,
        "end": match.end_offset,
    }


def _emit(payload: Any, lines: list[str], output_format: str) -> None:
    if output_format == "json":
        print(json.dumps(payload, ensure_ascii=False))
        return
    for line in lines:
        print(line)


def run_extract(settings: Settings, command: str, text: str) -> None:
    extractor = create(text)
    if command == "hashtags":
        tags = extractor.extract_hashtags()
        _emit(tags, tags, settings.output_format)
    elif command == "mentions":
        names = extractor.extract_mentioned_usernames()
        _emit(names, names, settings.output_format)
    else:
        entities = extractor.extract_entities_with_indices()
        rows = [_entity_row(m) for m in entities]
        lines = [f"{m.kind}\t{m.start_offset}\t{m.end_offset}\t{m.token_text}" for m in entities]
        _emit(rows, lines, settings.output_format)
    logger.debug("extracted command=%s text_len=%s", command, len(text))


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Extract hashtags and mentions from tweet text")
    sub = parser.add_subparsers(dest="command", required=True)
    for name, help_text in (
        ("hashtags", "Print hashtags, one per line"),
        ("mentions", "Print mentioned usernames, one per line"),
        ("entities", "Print every entity with its offsets"),
    ):
        extract_parser = sub.add_parser(name, help=help_text)
        extract_parser.add_argument("text", nargs="*", help="Text to scan (stdin when omitted)")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        settings = load_settings()
        logging.getLogger().setLevel(settings.log_level)
        run_extract(settings, args.command, _read_text(args.text))
    except (ValueError, OSError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
