"""Hepburn romaji → hiragana base table.

The table is flat (``{"kya": "きゃ", ...}``) and is generated from a handful
of small syllable tables plus the rewriting rules below.
"""

from functools import lru_cache
from typing import Dict

BASIC_KUNREI = {
    "a": "あ", "i": "い", "u": "う", "e": "え", "o": "お",
    "k": {"a": "か", "i": "き", "u": "く", "e": "け", "o": "こ"},
    "s": {"a": "さ", "i": "し", "u": "す", "e": "せ", "o": "そ"},
    "t": {"a": "た", "i": "ち", "u": "つ", "e": "て", "o": "と"},
    "n": {"a": "な", "i": "に", "u": "ぬ", "e": "ね", "o": "の"},
    "h": {"a": "は", "i": "ひ", "u": "ふ", "e": "へ", "o": "ほ"},
    "m": {"a": "ま", "i": "み", "u": "む", "e": "め", "o": "も"},
    "y": {"a": "や", "u": "ゆ", "o": "よ"},
    "r": {"a": "ら", "i": "り", "u": "る", "e": "れ", "o": "ろ"},
    "w": {"a": "わ", "i": "うぃ", "e": "うぇ", "o": "を"},
    "g": {"a": "が", "i": "ぎ", "u": "ぐ", "e": "げ", "o": "ご"},
    "z": {"a": "ざ", "i": "じ", "u": "ず", "e": "ぜ", "o": "ぞ"},
    "d": {"a": "だ", "i": "ぢ", "u": "づ", "e": "で", "o": "ど"},
    "b": {"a": "ば", "i": "び", "u": "ぶ", "e": "べ", "o": "ぼ"},
    "p": {"a": "ぱ", "i": "ぴ", "u": "ぷ", "e": "ぺ", "o": "ぽ"},
    "v": {"a": "ゔぁ", "i": "ゔぃ", "u": "ゔ", "e": "ゔぇ", "o": "ゔぉ"},
}

SPECIAL_SYMBOLS = {
    ".": "。", ",": "、", ":": "：", "/": "・", "!": "！", "?": "？",
    "~": "〜", "-": "ー",
    "‘": "「", "’": "」", "“": "『", "”": "』",
    "[": "［", "]": "］", "(": "（", ")": "）", "{": "｛", "}": "｝",
}

# consonant → the i-row kana that combines with a small ya/yu/yo
CONSONANTS = {
    "k": "き", "s": "し", "t": "ち", "n": "に", "h": "ひ", "m": "み", "r": "り",
    "g": "ぎ", "z": "じ", "d": "ぢ", "b": "び", "p": "ぴ", "v": "ゔ", "q": "く",
    "f": "ふ",
}
SMALL_Y = {"ya": "ゃ", "yi": "ぃ", "yu": "ゅ", "ye": "ぇ", "yo": "ょ"}
SMALL_VOWELS = {"a": "ぁ", "i": "ぃ", "u": "ぅ", "e": "ぇ", "o": "ぉ"}

# typing the first sequence is the same as typing the second
ALIASES = {
    "sh": "sy",
    "ch": "ty",
    "cy": "ty",
    "chy": "ty",
    "shy": "sy",
    "j": "zy",
    "jy": "zy",
    # exceptions to the above
    "shi": "si",
    "chi": "ti",
    "tsu": "tu",
    "ji": "zi",
    "fu": "hu",
}

# reachable with an x or l prefix: xtu / ltsu -> っ
SMALL_LETTERS = {"tu": "っ", "wa": "ゎ", "ka": "ヵ", "ke": "ヶ"}
SMALL_LETTERS.update(SMALL_VOWELS)
SMALL_LETTERS.update(SMALL_Y)

SPECIAL_CASES = {
    "yi": "い", "wu": "う", "ye": "いぇ", "wi": "うぃ", "we": "うぇ",
    "kwa": "くぁ", "whu": "う",
    # tha is てゃ, not てぁ
    "tha": "てゃ", "thu": "てゅ", "tho": "てょ",
    "dha": "でゃ", "dhu": "でゅ", "dho": "でょ",
}

AIUEO_CONSTRUCTIONS = {
    "wh": "う", "kw": "く", "qw": "く", "q": "く", "gw": "ぐ", "sw": "す",
    "ts": "つ", "th": "て", "tw": "と", "dh": "で", "dw": "ど", "fw": "ふ",
    "f": "ふ",
}

N_VARIANTS = ("n", "n'", "xn")

# consonants whose doubling produces a small tsu (kka -> っか)
SOKUON_CONSONANTS = tuple(CONSONANTS) + ("c", "y", "w", "j")


def _with_prefix(table: Dict[str, str], prefix: str) -> Dict[str, str]:
    return {seq: kana for seq, kana in table.items() if seq.startswith(prefix)}


def _replace_subtree(table: Dict[str, str], path: str, source: str) -> None:
    """Make everything under `path` a copy of everything under `source`."""
    copied = {path + seq[len(source):]: kana for seq, kana in _with_prefix(table, source).items()}
    for seq in list(_with_prefix(table, path)):
        del table[seq]
    table.update(copied)


def _alternatives(roma: str):
    pairs = list(ALIASES.items()) + [("c", "k")]
    return [roma.replace(kunrei, alt, 1) for alt, kunrei in pairs if roma.startswith(kunrei)]


@lru_cache(maxsize=1)
def hepburn_table() -> Dict[str, str]:
    """Return the flat Hepburn romaji→hiragana table.

    The returned dict is shared between callers and must not be mutated;
    copy it first if you need a variant.
    """
    table: Dict[str, str] = {}

    for head, row in BASIC_KUNREI.items():
        if isinstance(row, str):
            table[head] = row
            continue
        for vowel, kana in row.items():
            table[head + vowel] = kana

    # kya, sha, ...
    for consonant, y_kana in CONSONANTS.items():
        for roma, small in SMALL_Y.items():
            table[consonant + roma] = y_kana + small

    table.update(SPECIAL_SYMBOLS)

    # うぃ, くぁ, ふぉ, ...
    for consonant, kana in AIUEO_CONSTRUCTIONS.items():
        for vowel, small in SMALL_VOWELS.items():
            table[consonant + vowel] = kana + small

    for variant in N_VARIANTS:
        table[variant] = "ん"

    # c behaves like k, except where an alias below says otherwise
    for seq, kana in _with_prefix(table, "k").items():
        table["c" + seq[1:]] = kana

    for alias, source in ALIASES.items():
        _replace_subtree(table, alias, source)

    for kunrei, kana in SMALL_LETTERS.items():
        table["x" + kunrei] = kana
        table["l" + kunrei] = kana
        for alt in _alternatives(kunrei):
            table["x" + alt] = kana
            table["l" + alt] = kana

    table.update(SPECIAL_CASES)

    # kka, tta, ...
    for consonant in SOKUON_CONSONANTS:
        for seq, kana in _with_prefix(table, consonant).items():
            table[consonant + seq] = "っ" + kana

    # nn is ん, never っん
    for seq in list(_with_prefix(table, "nn")):
        del table[seq]

    return table
