"""Romaji → kana conversion."""

from typing import Any, List, Mapping, Optional, Union

import jaconv

from romakana.config import (
    TO_KANA_METHODS_HIRAGANA,
    TO_KANA_METHODS_KATAKANA,
    KanaConfiguration,
    KanaOptions,
    get_configuration,
)
from romakana.script import (
    is_char_upper_case,
    is_english_punctuation,
    is_mixed,
    is_romaji,
)
from romakana.tokenizer import Span

Options = Union[KanaOptions, Mapping[str, Any], None]


def hiragana_to_katakana(text: str) -> str:
    """Shift hiragana to katakana; everything else passes through.

    >>> hiragana_to_katakana('ひらがな is a type of kana')
    'ヒラガナ is a type of kana'
    """
    if not text:
        return text
    # ー and ・ are shared by both syllabaries; ゝゞ lie outside the hiragana range
    return jaconv.hira2kata(text, ignore="ー・ゝゞ")


def _resolve(options: Options, configuration: Optional[KanaConfiguration]) -> KanaConfiguration:
    if configuration is not None:
        return configuration
    return get_configuration(options)


def split_into_converted_kana(text: str, options: Options = None,
                              configuration: Optional[KanaConfiguration] = None) -> List[Span]:
    """Tokenize *text* into spans of converted hiragana.

    >>> split_into_converted_kana('buttsuuji')
    [Span(start=0, end=2, value='ぶ'), Span(start=2, end=6, value='っつ'), Span(start=6, end=7, value='う'), Span(start=7, end=9, value='じ')]
    """
    config = _resolve(options, configuration)
    return config.tokenizer.tokenize(text)


def _render_span(text: str, span: Span, options: KanaOptions) -> str:
    start, end, kana = span
    if kana is None:
        # still typing: leave the unresolved tail as it was entered
        return text[start:end]
    enforce_hiragana = options.ime_mode == TO_KANA_METHODS_HIRAGANA
    enforce_katakana = options.ime_mode == TO_KANA_METHODS_KATAKANA or (
        not options.ignore_case and all(is_char_upper_case(ch) for ch in text[start:end])
    )
    if enforce_hiragana or not enforce_katakana:
        return kana
    return hiragana_to_katakana(kana)


def to_kana(text: str, options: Options = None,
            configuration: Optional[KanaConfiguration] = None) -> str:
    """Convert romaji to kana. Uppercase romaji becomes katakana.

    Characters with no romaji entry pass through unchanged. In IME mode
    trailing input that might still extend (``"n"``, ``"ky"``) is left as
    typed.

    >>> to_kana('onaji BUTTSUUJI')
    'おなじ ブッツウジ'
    >>> to_kana('wanakana', {'customKanaMapping': {'na': 'に', 'ka': 'Bana'}})
    'わにBanaに'
    """
    if not text:
        return ""
    config = _resolve(options, configuration)
    return "".join(
        _render_span(text, span, config.options)
        for span in split_into_converted_kana(text, configuration=config)
    )


def to_katakana(text: str, options: Options = None,
                configuration: Optional[KanaConfiguration] = None) -> str:
    """Convert input to katakana.

    Romaji (and romaji mixed with kana) is converted to kana first;
    anything else is assumed to be kana already and shifted directly. With
    ``passRomaji`` romaji is left alone and only hiragana is shifted.

    >>> to_katakana('hiragana')
    'ヒラガナ'
    >>> to_katakana('げーむ')
    'ゲーム'
    """
    if not text:
        return ""
    config = _resolve(options, configuration)
    if config.options.pass_romaji:
        return hiragana_to_katakana(text)
    if is_mixed(text) or is_romaji(text) or is_english_punctuation(text):
        hiragana = to_kana(text.lower(), configuration=config)
        return hiragana_to_katakana(hiragana)
    return hiragana_to_katakana(text)
