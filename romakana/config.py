"""Conversion options and the configurations built from them."""

import os
import threading
from collections import OrderedDict
from enum import Enum
from typing import Any, Callable, Dict, Hashable, Literal, Mapping, Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from romakana.base import ConfigurationError
from romakana.hepburn import hepburn_table
from romakana.logger import logger
from romakana.mapping import MappingTree, build_mapping_tree
from romakana.tokenizer import RomajiTokenizer

TO_KANA_METHODS_HIRAGANA = "toHiragana"
TO_KANA_METHODS_KATAKANA = "toKatakana"

ENV_PREFIX = "ROMAKANA_"

# trees kept by get_configuration, least recently used dropped first
MAX_CACHED_TREES = 16


class Romanization(str, Enum):
    hepburn = "hepburn"


class KanaOptions(BaseModel):
    """Options accepted by the converters.

    Field names are snake_case; the camelCase names (``IMEMode``,
    ``useObsoleteKana``, ...) are accepted as aliases. Unknown keys are
    rejected. ``upcase_katakana`` only matters for kana→romaji output and is
    accepted for compatibility.
    """
    use_obsolete_kana: bool = Field(False, alias="useObsoleteKana")
    pass_romaji: bool = Field(False, alias="passRomaji")
    upcase_katakana: bool = Field(False, alias="upcaseKatakana")
    ignore_case: bool = Field(False, alias="ignoreCase")
    ime_mode: Union[bool, Literal["toHiragana", "toKatakana"]] = Field(False, alias="IMEMode")
    romanization: Romanization = Romanization.hepburn
    custom_kana_mapping: Optional[Union[Dict[str, str], Callable[..., Any]]] = Field(
        None, alias="customKanaMapping"
    )
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    @classmethod
    def load(cls, options: Union["KanaOptions", Mapping[str, Any], None] = None) -> "KanaOptions":
        """Validate a plain dict of options, raising ConfigurationError."""
        if isinstance(options, KanaOptions):
            return options
        try:
            return cls.model_validate(dict(options or {}))
        except ValidationError as e:
            first = e.errors()[0]
            option = str(first["loc"][0]) if first["loc"] else "options"
            logger.error(f"Invalid kana options {options!r}: {e}")
            raise ConfigurationError(option, first["msg"]) from e

    @classmethod
    def from_env(cls, **overrides) -> "KanaOptions":
        """Build options from ROMAKANA_* environment variables (and .env)."""
        load_dotenv()
        values: Dict[str, Any] = {}
        ime_mode = os.getenv(f"{ENV_PREFIX}IME_MODE")
        if ime_mode:
            values["ime_mode"] = ime_mode
        for field in ("use_obsolete_kana", "ignore_case", "pass_romaji"):
            raw = os.getenv(f"{ENV_PREFIX}{field.upper()}")
            if raw:
                values[field] = raw
        values.update(overrides)
        return cls.load(values)

    @property
    def force_resolve_trailing(self) -> bool:
        """One-shot conversions resolve trailing input; IME mode leaves it pending."""
        return not self.ime_mode

    def fingerprint(self) -> Hashable:
        """Hashable key identifying the tree these options produce."""
        custom = self.custom_kana_mapping
        if isinstance(custom, dict):
            custom = tuple(sorted(custom.items()))
        return (bool(self.ime_mode), self.use_obsolete_kana, self.romanization, custom)


class KanaConfiguration:
    """Validated options together with the mapping tree built for them.

    Build one per distinct set of options and reuse it; the tree is frozen
    and safe to share between threads.
    """

    def __init__(self, options: Union[KanaOptions, Mapping[str, Any], None] = None,
                 tree: Optional[MappingTree] = None):
        self.options = KanaOptions.load(options)
        if tree is None:
            tree = build_mapping_tree(
                hepburn_table(),
                ime_mode=bool(self.options.ime_mode),
                use_obsolete_kana=self.options.use_obsolete_kana,
                custom_kana_mapping=self.options.custom_kana_mapping,
            )
        self.tree = tree

    @property
    def tokenizer(self) -> RomajiTokenizer:
        return RomajiTokenizer(self.tree, self.options.force_resolve_trailing)

    def with_options(self, **changes) -> "KanaConfiguration":
        """Same tree, different rendering options (casing, IME target)."""
        merged = self.options.model_dump()
        merged.update(changes)
        options = KanaOptions.load(merged)
        if options.fingerprint() != self.options.fingerprint():
            return get_configuration(options)
        return KanaConfiguration(options, tree=self.tree)

    def __repr__(self) -> str:
        return f"KanaConfiguration(options={self.options!r}, entries={len(self.tree)})"


_lock = threading.Lock()
_trees: "OrderedDict[Hashable, MappingTree]" = OrderedDict()
_default: Optional[KanaConfiguration] = None


def get_configuration(options: Union[KanaOptions, Mapping[str, Any], None] = None) -> KanaConfiguration:
    """Return a configuration for *options*, reusing an already built tree.

    Trees are cached by the options that shape them (IME mode, obsolete
    kana, romanization, dict custom mapping), keeping at most
    MAX_CACHED_TREES of them. A callable custom mapping is never cached:
    build a KanaConfiguration once and pass it to the converters instead.
    """
    options = KanaOptions.load(options)
    if callable(options.custom_kana_mapping):
        return KanaConfiguration(options)

    key = options.fingerprint()
    with _lock:
        tree = _trees.get(key)
        if tree is None:
            tree = KanaConfiguration(options).tree
            _trees[key] = tree
            if len(_trees) > MAX_CACHED_TREES:
                _trees.popitem(last=False)
        else:
            _trees.move_to_end(key)
            logger.debug(f"Reusing cached mapping tree for {key!r}")
    return KanaConfiguration(options, tree=tree)


def cached_tree_count() -> int:
    with _lock:
        return len(_trees)


def default_configuration() -> KanaConfiguration:
    """Lazily built configuration for the ROMAKANA_* environment defaults.

    Opt-in: the converters never call this. Applications that want their
    defaults from the environment (or a .env file) pass the result as
    ``configuration=``.
    """
    global _default
    if _default is None:
        with _lock:
            if _default is None:
                _default = KanaConfiguration(KanaOptions.from_env())
    return _default


def clear_configuration_cache() -> None:
    global _default
    with _lock:
        _trees.clear()
        _default = None
