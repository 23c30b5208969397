from __future__ import annotations

from dataclasses import dataclass, field

from tweet_extractor.patterns.builder import PatternTable, default_pattern_table
from tweet_extractor.patterns.scanner import TokenMatch, scan


@dataclass(frozen=True, slots=True)
class Extractor:
    """Extracts hashtags and mentioned usernames from one tweet.

    ``tweet`` must already be decoded text. The pattern table is shared,
    read-only state; building an extractor compiles nothing.
    """

    tweet: str
    patterns: PatternTable = field(default_factory=default_pattern_table)

    def __post_init__(self) -> None:
        if not isinstance(self.tweet, str):
            raise TypeError(f"tweet must be str, got {type(self.tweet).__name__}")

    @classmethod
    def create(cls, tweet: str, patterns: PatternTable | None = None) -> Extractor:
        if patterns is None:
            return cls(tweet)
        return cls(tweet, patterns)

    def extract_hashtags(self) -> list[str]:
        return [m.token_text for m in self.extract_hashtags_with_indices()]

    def extract_mentioned_usernames(self) -> list[str]:
        return [m.token_text for m in self.extract_mentioned_usernames_with_indices()]

    def extract_hashtags_with_indices(self) -> list[TokenMatch]:
        return scan(self.patterns.hashtag, self.tweet)

    def extract_mentioned_usernames_with_indices(self) -> list[TokenMatch]:
        return scan(self.patterns.mention, self.tweet)

    def extract_entities_with_indices(self) -> list[TokenMatch]:
        entities = self.extract_hashtags_with_indices() + self.extract_mentioned_usernames_with_indices()
        return sorted(entities, key=lambda m: m.start_offset)


def create(tweet: str, patterns: PatternTable | None = None) -> Extractor:
    return Extractor.create(tweet, patterns)
