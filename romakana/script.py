"""Script classification utilities (hiragana, katakana, kanji, romaji, punctuation)."""

import re
from typing import Any, Optional, Pattern, Union

PROLONGED_SOUND_MARK = 0x30FC
KANA_SLASH_DOT = 0x30FB
HIRAGANA_START = 0x3041
HIRAGANA_END = 0x3096
KATAKANA_START = 0x30A1
KATAKANA_END = 0x30FC
KANJI_START = 0x4E00
KANJI_END = 0x9FAF
LATIN_LOWERCASE_START = 0x61
LATIN_LOWERCASE_END = 0x7A
LATIN_UPPERCASE_START = 0x41
LATIN_UPPERCASE_END = 0x5A

MODERN_ENGLISH = (0x0000, 0x007F)
HEPBURN_MACRON_RANGES = (
    (0x0100, 0x0101),  # Ā ā
    (0x0112, 0x0113),  # Ē ē
    (0x012A, 0x012B),  # Ī ī
    (0x014C, 0x014D),  # Ō ō
    (0x016A, 0x016B),  # Ū ū
)
ROMAJI_RANGES = (MODERN_ENGLISH,) + HEPBURN_MACRON_RANGES

SMART_QUOTE_RANGES = (
    (0x2018, 0x2019),  # ‘ ’
    (0x201C, 0x201D),  # “ ”
)
EN_PUNCTUATION_RANGES = (
    (0x20, 0x2F),
    (0x3A, 0x3F),
    (0x5B, 0x60),
    (0x7B, 0x7E),
) + SMART_QUOTE_RANGES


def is_empty(text: Any) -> bool:
    """True for non-string input and for the empty string."""
    if not isinstance(text, str):
        return True
    return len(text) == 0


def is_char_in_range(char: Any, start: int, end: int) -> bool:
    if is_empty(char):
        return False
    return start <= ord(char[0]) <= end


def _is_char_in_ranges(char: Any, ranges) -> bool:
    return any(is_char_in_range(char, start, end) for start, end in ranges)


def is_char_long_dash(char: Any) -> bool:
    """Returns True if char is 'ー'."""
    return is_char_in_range(char, PROLONGED_SOUND_MARK, PROLONGED_SOUND_MARK)


def is_char_slash_dot(char: Any) -> bool:
    """Returns True if char is '・'."""
    return is_char_in_range(char, KANA_SLASH_DOT, KANA_SLASH_DOT)


def is_char_hiragana(char: Any) -> bool:
    """Hiragana block test. The prolonged sound mark 'ー' counts as hiragana too."""
    if is_char_long_dash(char):
        return True
    return is_char_in_range(char, HIRAGANA_START, HIRAGANA_END)


def is_char_katakana(char: Any) -> bool:
    return is_char_in_range(char, KATAKANA_START, KATAKANA_END)


def is_char_kanji(char: Any) -> bool:
    return is_char_in_range(char, KANJI_START, KANJI_END)


def is_char_romaji(char: Any) -> bool:
    """Basic Latin plus the Hepburn macron vowels."""
    return _is_char_in_ranges(char, ROMAJI_RANGES)


def is_char_upper_case(char: Any) -> bool:
    return is_char_in_range(char, LATIN_UPPERCASE_START, LATIN_UPPERCASE_END)


def is_char_english_punctuation(char: Any) -> bool:
    return _is_char_in_ranges(char, EN_PUNCTUATION_RANGES)


def is_hiragana(text: Any) -> bool:
    """Test if every character of `text` is hiragana.

    >>> is_hiragana('げーむ')
    True
    >>> is_hiragana('A')
    False
    """
    if is_empty(text):
        return False
    return all(is_char_hiragana(ch) for ch in text)


def is_katakana(text: Any) -> bool:
    """Test if every character of `text` is katakana.

    >>> is_katakana('ゲーム')
    True
    """
    if is_empty(text):
        return False
    return all(is_char_katakana(ch) for ch in text)


def is_kanji(text: Any) -> bool:
    """Test if every character of `text` is a CJK ideograph.

    >>> is_kanji('切腹')
    True
    >>> is_kanji('勢い')
    False
    >>> is_kanji('🐸')
    False
    """
    if is_empty(text):
        return False
    return all(is_char_kanji(ch) for ch in text)


def is_romaji(text: Any, allowed: Optional[Union[str, Pattern]] = None) -> bool:
    """Test if every character of `text` is romaji.

    `allowed` is an optional regex (compiled or as a string); characters
    matching it are accepted even when they fall outside the romaji ranges.

    >>> is_romaji('Tōkyō and Ōsaka')
    True
    >>> is_romaji('a！b&cーd')
    False
    >>> is_romaji('a！b&cーd', allowed=r'[！ー]')
    True
    """
    if is_empty(text):
        return False
    if isinstance(allowed, str):
        allowed = re.compile(allowed)
    if allowed is None:
        return all(is_char_romaji(ch) for ch in text)
    return all(is_char_romaji(ch) or allowed.search(ch) is not None for ch in text)


def is_mixed(text: Any, pass_kanji: bool = True) -> bool:
    """Test if `text` contains a mix of romaji *and* kana.

    Kanji are ignored by default; with ``pass_kanji=False`` any kanji makes
    the text count as not mixed.

    >>> is_mixed('Abあア')
    True
    >>> is_mixed('お腹A')
    True
    >>> is_mixed('お腹A', pass_kanji=False)
    False
    >>> is_mixed('ab')
    False
    """
    if is_empty(text):
        return False
    has_kanji = False
    if not pass_kanji:
        has_kanji = any(is_char_kanji(ch) for ch in text)
    has_kana = any(is_char_hiragana(ch) or is_char_katakana(ch) for ch in text)
    has_romaji = any(is_char_romaji(ch) for ch in text)
    return has_kana and has_romaji and not has_kanji


def is_english_punctuation(text: Any) -> bool:
    if is_empty(text):
        return False
    return all(is_char_english_punctuation(ch) for ch in text)
