from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from tweet_extractor.patterns.builder import TokenPattern


@dataclass(frozen=True, slots=True)
class TokenMatch:
    kind: str
    boundary_text: str
    trigger_symbol: str
    token_text: str
    start_offset: int
    end_offset: int


def iter_matches(pattern: TokenPattern, text: str) -> Iterator[TokenMatch]:
    # The boundary character is consumed by the match; scanning resumes after the body.
    for match in pattern.regex.finditer(text):
        yield TokenMatch(
            kind=pattern.kind,
            boundary_text=match.group("boundary"),
            trigger_symbol=match.group("symbol"),
            token_text=match.group("body"),
            start_offset=match.start("symbol"),
            end_offset=match.end("body"),
        )


def scan(pattern: TokenPattern, text: str) -> list[TokenMatch]:
    if not text:
        return []
    return list(iter_matches(pattern, text))
