from __future__ import annotations

import re
from dataclasses import dataclass

from tweet_extractor.charclass.ranges import AT_SIGNS, HASH_SIGNS
from tweet_extractor.charclass.registry import CharacterClassRegistry, default_registry


HASHTAG = "hashtag"
MENTION = "mention"


@dataclass(frozen=True, slots=True)
class TokenPattern:
    kind: str
    symbols: str
    regex: re.Pattern[str]


@dataclass(frozen=True, slots=True)
class PatternTable:
    hashtag: TokenPattern
    mention: TokenPattern

    def for_kind(self, kind: str) -> TokenPattern:
        if kind == HASHTAG:
            return self.hashtag
        if kind == MENTION:
            return self.mention
        raise KeyError(f"unknown token kind: {kind}")


def build_token_pattern(kind: str, symbols: str, registry: CharacterClassRegistry) -> TokenPattern:
    """Compile ``boundary, symbol, body`` for one token kind.

    The body is ``alnum* alpha alnum*`` so that it always holds at least one
    non-digit character.
    """
    registry.initialize()
    alpha = registry.get("tag_alpha").as_set()
    alnum = registry.get("tag_alphanumeric").as_set()
    symbol_set = "".join(re.escape(symbol) for symbol in symbols)
    source = (
        f"(?P<boundary>{registry.tag_boundary_expression()})"
        f"(?P<symbol>[{symbol_set}])"
        f"(?P<body>{alnum}*{alpha}{alnum}*)"
    )
    return TokenPattern(kind=kind, symbols=symbols, regex=re.compile(source, re.IGNORECASE))


def build_pattern_table(registry: CharacterClassRegistry) -> PatternTable:
    return PatternTable(
        hashtag=build_token_pattern(HASHTAG, HASH_SIGNS, registry),
        mention=build_token_pattern(MENTION, AT_SIGNS, registry),
    )


_DEFAULT_TABLE = build_pattern_table(default_registry())


def default_pattern_table() -> PatternTable:
    return _DEFAULT_TABLE
