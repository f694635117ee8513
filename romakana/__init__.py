"""romakana: romaji → kana conversion and Japanese script detection.

Typical use::

    from romakana import to_kana, is_hiragana
    to_kana("konnichiha")       # "こんにちは"
    to_kana("KATAKANA")         # "カタカナ"
"""

from .base import BaseTokenizer, ConfigurationError, MappingConfigError
from .config import (
    MAX_CACHED_TREES,
    KanaConfiguration,
    KanaOptions,
    Romanization,
    TO_KANA_METHODS_HIRAGANA,
    TO_KANA_METHODS_KATAKANA,
    cached_tree_count,
    clear_configuration_cache,
    default_configuration,
    get_configuration,
)
from .converter import hiragana_to_katakana, split_into_converted_kana, to_kana, to_katakana
from .hepburn import hepburn_table
from .logger import disable_console_logging, enable_console_logging
from .mapping import MappingTree, TrieNode, build_mapping_tree
from .script import (
    is_char_english_punctuation,
    is_char_hiragana,
    is_char_in_range,
    is_char_kanji,
    is_char_katakana,
    is_char_long_dash,
    is_char_romaji,
    is_char_slash_dot,
    is_char_upper_case,
    is_empty,
    is_english_punctuation,
    is_hiragana,
    is_kanji,
    is_katakana,
    is_mixed,
    is_romaji,
)
from .tokenizer import RomajiTokenizer, Span, tokenize

__version__ = "0.1.0"

__all__ = [
    'BaseTokenizer',
    'ConfigurationError',
    'MappingConfigError',
    'MAX_CACHED_TREES',
    'KanaConfiguration',
    'KanaOptions',
    'Romanization',
    'TO_KANA_METHODS_HIRAGANA',
    'TO_KANA_METHODS_KATAKANA',
    'cached_tree_count',
    'clear_configuration_cache',
    'default_configuration',
    'get_configuration',
    'hiragana_to_katakana',
    'split_into_converted_kana',
    'to_kana',
    'to_katakana',
    'hepburn_table',
    'disable_console_logging',
    'enable_console_logging',
    'MappingTree',
    'TrieNode',
    'build_mapping_tree',
    'is_char_english_punctuation',
    'is_char_hiragana',
    'is_char_in_range',
    'is_char_kanji',
    'is_char_katakana',
    'is_char_long_dash',
    'is_char_romaji',
    'is_char_slash_dot',
    'is_char_upper_case',
    'is_empty',
    'is_english_punctuation',
    'is_hiragana',
    'is_kanji',
    'is_katakana',
    'is_mixed',
    'is_romaji',
    'RomajiTokenizer',
    'Span',
    'tokenize',
]
