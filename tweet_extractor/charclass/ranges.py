from __future__ import annotations

from dataclasses import dataclass


MAX_CODE_POINT = 0x10FFFF


@dataclass(frozen=True, slots=True)
class CharacterRange:
    """Inclusive range of Unicode code points."""

    low: int
    high: int

    def __post_init__(self) -> None:
        for value in (self.low, self.high):
            if value < 0 or value > MAX_CODE_POINT:
                raise ValueError(f"code point out of range: {value:#x}")
            if 0xD800 <= value <= 0xDFFF:
                raise ValueError(f"surrogate code point: {value:#x}")
        if self.low > self.high:
            raise ValueError(f"malformed range {self.low:#x}-{self.high:#x}")

    @classmethod
    def single(cls, code_point: int) -> CharacterRange:
        return cls(code_point, code_point)

    def contains(self, code_point: int) -> bool:
        return self.low <= code_point <= self.high


def _r(low: int, high: int | None = None) -> CharacterRange:
    return CharacterRange(low, low if high is None else high)


AT_SIGNS = "@＠"
HASH_SIGNS = "#＃"

ASCII_ALPHA = (_r(ord("a"), ord("z")), _r(ord("_")))
ASCII_DIGITS = (_r(ord("0"), ord("9")),)
AMPERSAND = (_r(ord("&")),)

# 0x00D7 (multiplication sign) and 0x00F7 (division sign) are left out.
LATIN_ACCENTS = (
    _r(0x00C0, 0x00D6),
    _r(0x00D8, 0x00F6),
    _r(0x00F8, 0x00FF),
    _r(0x0100, 0x024F),
    _r(0x0253, 0x0254),
    _r(0x0256, 0x0257),
    _r(0x0259),
    _r(0x025B),
    _r(0x0263),
    _r(0x0268),
    _r(0x026F),
    _r(0x0272),
    _r(0x0289),
    _r(0x028B),
    _r(0x02BB),
    _r(0x0300, 0x036F),
    _r(0x1E00, 0x1EFF),
)

CYRILLIC = (
    _r(0x0400, 0x04FF),  # Cyrillic
    _r(0x0500, 0x0527),  # Cyrillic Supplement
    _r(0x2DE0, 0x2DFF),  # Cyrillic Extended A
    _r(0xA640, 0xA69F),  # Cyrillic Extended B
)

HEBREW = (
    _r(0x0591, 0x05BF),
    _r(0x05C1, 0x05C2),
    _r(0x05C4, 0x05C5),
    _r(0x05C7),
    _r(0x05D0, 0x05EA),
    _r(0x05F0, 0x05F4),
    # presentation forms
    _r(0xFB12, 0xFB28),
    _r(0xFB2A, 0xFB36),
    _r(0xFB38, 0xFB3C),
    _r(0xFB3E),
    _r(0xFB40, 0xFB41),
    _r(0xFB43, 0xFB44),
    _r(0xFB46, 0xFB4F),
)

ARABIC = (
    _r(0x0610, 0x061A),
    _r(0x0620, 0x065F),
    _r(0x066E, 0x06D3),
    _r(0x06D5, 0x06DC),
    _r(0x06DE, 0x06E8),
    _r(0x06EA, 0x06EF),
    _r(0x06FA, 0x06FC),
    _r(0x06FF),
    _r(0x0750, 0x077F),  # Arabic Supplement
    _r(0x08A0),  # Arabic Extended A
    _r(0x08A2, 0x08AC),
    _r(0x08E4, 0x08FE),
    _r(0xFB50, 0xFBB1),  # Arabic Presentation Forms A
    _r(0xFBD3, 0xFD3D),
    _r(0xFD50, 0xFD8F),
    _r(0xFD92, 0xFDC7),
    _r(0xFDF0, 0xFDFB),
    _r(0xFE70, 0xFE74),  # Arabic Presentation Forms B
    _r(0xFE76, 0xFEFC),
)

MISC_NON_LATIN = (
    _r(0x200C),  # zero-width non-joiner
    _r(0x0E01, 0x0E3A),  # Thai
)

# 0x0E40-0x0E4E is Thai, historically grouped with the Hangul block.
HANGUL = (
    _r(0x0E40, 0x0E4E),
    _r(0x1100, 0x11FF),  # Hangul Jamo
    _r(0x3130, 0x3185),  # Compatibility Jamo
    _r(0xA960, 0xA97F),  # Jamo Extended A
    _r(0xAC00, 0xD7AF),  # Syllables
    _r(0xD7B0, 0xD7FF),  # Jamo Extended B
    _r(0xFFA1, 0xFFDC),  # half-width
)

NON_LATIN = CYRILLIC + HEBREW + ARABIC + MISC_NON_LATIN + HANGUL

CJ_CHARACTERS = (
    _r(0x30A1, 0x30FA),  # Katakana (full-width)
    _r(0x30FC, 0x30FE),
    _r(0xFF66, 0xFF9F),  # Katakana (half-width)
    _r(0xFF10, 0xFF19),  # Latin (full-width)
    _r(0xFF21, 0xFF3A),
    _r(0xFF41, 0xFF5A),
    _r(0x3041, 0x3096),  # Hiragana
    _r(0x3099, 0x309E),
    _r(0x3400, 0x4DBF),  # CJK Extension A
    _r(0x4E00, 0x9FFF),  # CJK Unified
    _r(0x3003),
    _r(0x3005),
    _r(0x303B),
    _r(0x20000, 0x2A6DF),  # CJK Extension B
    _r(0x2A700, 0x2B73F),  # CJK Extension C
    _r(0x2B740, 0x2B81F),  # CJK Extension D
    _r(0x2F800, 0x2FA1F),  # CJK compatibility supplement
)
