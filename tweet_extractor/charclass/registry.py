from __future__ import annotations

import logging
import re
import threading
from dataclasses import dataclass, field
from typing import Iterable

from tweet_extractor.charclass import ranges
from tweet_extractor.charclass.ranges import CharacterRange


logger = logging.getLogger(__name__)


def _escape(code_point: int) -> str:
    if code_point < 0x80:
        return re.escape(chr(code_point))
    if code_point <= 0xFFFF:
        return f"\\u{code_point:04x}"
    return f"\\U{code_point:08x}"


@dataclass(slots=True)
class CharacterClass:
    """Named, ordered set of code point ranges rendered as a regex set body."""

    name: str
    ranges: list[CharacterRange] | tuple[CharacterRange, ...] = field(default_factory=list)
    frozen: bool = False

    def add_range(self, item: CharacterRange) -> None:
        if self.frozen or isinstance(self.ranges, tuple):
            raise RuntimeError(f"character class {self.name!r} is frozen")
        self.ranges.append(item)

    def add_ranges(self, items: Iterable[CharacterRange]) -> None:
        for item in items:
            self.add_range(item)

    def extend(self, other: CharacterClass) -> None:
        self.add_ranges(other.ranges)

    def freeze(self) -> None:
        self.ranges = tuple(self.ranges)
        self.frozen = True

    def contains(self, char: str) -> bool:
        code_point = ord(char)
        return any(item.contains(code_point) for item in self.ranges)

    def render(self) -> str:
        parts: list[str] = []
        for item in self.ranges:
            if item.low == item.high:
                parts.append(_escape(item.low))
            else:
                parts.append(f"{_escape(item.low)}-{_escape(item.high)}")
        return "".join(parts)

    def as_set(self) -> str:
        return f"[{self.render()}]"


@dataclass(slots=True)
class CharacterClassRegistry:
    classes: dict[str, CharacterClass] = field(default_factory=dict)
    initialized: bool = False
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def initialize(self) -> None:
        if self.initialized:
            return
        with self._lock:
            if self.initialized:
                return
            self._populate()
            for item in self.classes.values():
                item.freeze()
            self.initialized = True
        logger.debug(
            "character classes initialized classes=%s ranges=%s",
            len(self.classes),
            sum(len(item.ranges) for item in self.classes.values()),
        )

    def get(self, name: str) -> CharacterClass:
        if not self.initialized:
            raise RuntimeError("character class registry is not initialized")
        try:
            return self.classes[name]
        except KeyError:
            raise KeyError(f"unknown character class: {name}") from None

    def tag_boundary_expression(self) -> str:
        excluded = self.get("tag_boundary_excluded")
        return rf"(?:\A|\Z|[^{excluded.render()}])"

    def _define(self, name: str, *parts: Iterable[CharacterRange]) -> CharacterClass:
        item = CharacterClass(name)
        for part in parts:
            item.add_ranges(part)
        self.classes[name] = item
        return item

    def _populate(self) -> None:
        latin = self._define("latin_accents", ranges.LATIN_ACCENTS)
        non_latin = self._define("non_latin", ranges.NON_LATIN)
        cj = self._define("cj_characters", ranges.CJ_CHARACTERS)

        alpha = self._define("tag_alpha", ranges.ASCII_ALPHA)
        for script in (latin, non_latin, cj):
            alpha.extend(script)

        alnum = self._define("tag_alphanumeric", ranges.ASCII_ALPHA, ranges.ASCII_DIGITS)
        for script in (latin, non_latin, cj):
            alnum.extend(script)

        excluded = self._define("tag_boundary_excluded", ranges.AMPERSAND)
        excluded.extend(alnum)


_DEFAULT_REGISTRY = CharacterClassRegistry()
_DEFAULT_REGISTRY.initialize()


def default_registry() -> CharacterClassRegistry:
    return _DEFAULT_REGISTRY
