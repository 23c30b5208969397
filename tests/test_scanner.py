import pytest

from tweet_extractor.charclass.registry import CharacterClassRegistry
from tweet_extractor.patterns.builder import HASHTAG, MENTION, build_pattern_table, default_pattern_table
from tweet_extractor.patterns.scanner import iter_matches, scan


def test_match_carries_boundary_symbol_and_offsets() -> None:
    text = "hi #tag!"
    (match,) = scan(default_pattern_table().hashtag, text)
    assert match.kind == HASHTAG
    assert match.boundary_text == " "
    assert match.trigger_symbol == "#"
    assert match.token_text == "tag"
    assert (match.start_offset, match.end_offset) == (3, 7)
    assert text[match.start_offset : match.end_offset] == "#tag"


def test_start_of_text_has_empty_boundary() -> None:
    (match,) = scan(default_pattern_table().mention, "＠jack hello")
    assert match.kind == MENTION
    assert match.boundary_text == ""
    assert match.trigger_symbol == "＠"
    assert match.token_text == "jack"
    assert match.start_offset == 0


def test_scan_resumes_after_body() -> None:
    matches = list(iter_matches(default_pattern_table().hashtag, "#one,#two #three"))
    assert [m.token_text for m in matches] == ["one", "two", "three"]
    assert [m.boundary_text for m in matches] == ["", ",", " "]


def test_empty_text_yields_nothing() -> None:
    table = default_pattern_table()
    assert scan(table.hashtag, "") == []
    assert scan(table.mention, "") == []


def test_fresh_registry_builds_equivalent_patterns() -> None:
    table = build_pattern_table(CharacterClassRegistry())
    default = default_pattern_table()
    assert table.hashtag.regex.pattern == default.hashtag.regex.pattern
    assert table.mention.regex.pattern == default.mention.regex.pattern
    assert table.for_kind(MENTION) is table.mention
    with pytest.raises(KeyError):
        table.for_kind("url")


def test_trigger_sets_are_disjoint() -> None:
    table = default_pattern_table()
    assert scan(table.mention, "#tag") == []
    assert scan(table.hashtag, "@user") == []
