"""Romaji → kana mapping trees.

A tree has one node per romaji character. A node's ``value`` is the kana
emitted when matching stops there; ``children`` continue the sequence.
A node may carry both (``n`` is ``ん`` but also starts ``na``).
"""

import copy
from typing import Callable, Dict, Iterator, Mapping, Optional, Tuple, Union

from romakana.base import MappingConfigError
from romakana.logger import logger

IME_MODE_ENTRIES = {"nn": "ん", "n ": "ん"}
OBSOLETE_KANA_ENTRIES = {"wi": "ゐ", "we": "ゑ"}


class TrieNode:
    __slots__ = ("value", "children")

    def __init__(self, value: Optional[str] = None):
        self.value = value
        self.children: Dict[str, "TrieNode"] = {}

    def child(self, char: str) -> Optional["TrieNode"]:
        return self.children.get(char)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def __repr__(self) -> str:
        return f"TrieNode(value={self.value!r}, children={sorted(self.children)!r})"


class MappingTree:
    """A romaji prefix tree. Frozen trees reject any further change."""

    def __init__(self, root: Optional[TrieNode] = None):
        self.root = root if root is not None else TrieNode()
        self._frozen = False

    @classmethod
    def from_table(cls, table: Mapping[str, str], option: str = "base table") -> "MappingTree":
        tree = cls()
        tree.update(table, option=option)
        return tree

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "MappingTree":
        self._frozen = True
        return self

    def _check_entry(self, sequence, value, option: str) -> None:
        if self._frozen:
            raise MappingConfigError(sequence, "cannot be added to a frozen mapping tree", option)
        if not isinstance(sequence, str) or not sequence:
            logger.error(f"Rejected mapping entry {sequence!r}: sequence must be a non-empty string")
            raise MappingConfigError(sequence, "must have a non-empty string sequence", option)
        if not isinstance(value, str):
            logger.error(f"Rejected mapping entry {sequence!r}: value {value!r} is not a string")
            raise MappingConfigError(sequence, f"has non-string value {value!r}", option)

    def _walk_create(self, sequence: str) -> Tuple[TrieNode, str]:
        """Create the path up to the last char; return (parent, last_char)."""
        node = self.root
        for char in sequence[:-1]:
            node = node.children.setdefault(char, TrieNode())
        return node, sequence[-1]

    def insert(self, sequence: str, value: str, option: str = "customKanaMapping") -> None:
        """Set the value at `sequence`, keeping any longer sequences below it."""
        self._check_entry(sequence, value, option)
        parent, last = self._walk_create(sequence)
        parent.children.setdefault(last, TrieNode()).value = value

    def set_leaf(self, sequence: str, value: str, option: str = "IMEMode") -> None:
        """Set the value at `sequence` and drop everything below it."""
        self._check_entry(sequence, value, option)
        parent, last = self._walk_create(sequence)
        parent.children[last] = TrieNode(value)

    def update(self, table: Mapping[str, str], option: str = "customKanaMapping") -> None:
        for sequence, value in table.items():
            self.insert(sequence, value, option=option)

    def find(self, sequence: str) -> Optional[TrieNode]:
        node = self.root
        for char in sequence:
            node = node.child(char)
            if node is None:
                return None
        return node

    def lookup(self, sequence: str) -> Optional[str]:
        """Return the kana stored for `sequence`, or None."""
        node = self.find(sequence)
        return node.value if node is not None else None

    def entries(self) -> Iterator[Tuple[str, str]]:
        """Yield every (sequence, value) pair, depth first."""
        stack = [("", self.root)]
        while stack:
            prefix, node = stack.pop()
            if prefix and node.value is not None:
                yield prefix, node.value
            for char, child in node.children.items():
                stack.append((prefix + char, child))

    def copy(self) -> "MappingTree":
        """Deep, unfrozen copy."""
        return MappingTree(copy.deepcopy(self.root))

    def __len__(self) -> int:
        return sum(1 for _ in self.entries())

    def __contains__(self, sequence: str) -> bool:
        return self.lookup(sequence) is not None


CustomMapping = Union[Mapping[str, str], Callable[[MappingTree], MappingTree]]


def apply_custom_mapping(tree: MappingTree, custom_mapping: CustomMapping) -> MappingTree:
    """Overlay a custom mapping on a copy of `tree`.

    A mapping is inserted entry by entry and overwrites overlapping values.
    A callable receives a mutable copy of the tree and must return a tree.
    """
    working = tree.copy()
    if callable(custom_mapping):
        result = custom_mapping(working)
        if not isinstance(result, MappingTree):
            logger.error(f"customKanaMapping transform returned {type(result).__name__}")
            raise MappingConfigError(
                getattr(custom_mapping, "__name__", repr(custom_mapping)),
                f"returned {type(result).__name__}, expected MappingTree",
            )
        return result
    if not isinstance(custom_mapping, Mapping):
        raise MappingConfigError(custom_mapping, "is neither a mapping nor a callable")
    working.update(custom_mapping)
    return working


def build_mapping_tree(
    base_table: Mapping[str, str],
    ime_mode: bool = False,
    use_obsolete_kana: bool = False,
    custom_kana_mapping: Optional[CustomMapping] = None,
) -> MappingTree:
    """Build a frozen tree from a base table and the optional overlays.

    Overlays are applied in order: IME mode, obsolete kana, custom mapping.
    """
    tree = MappingTree.from_table(base_table)

    if ime_mode:
        # a lone "n" must be able to finish as ん while typing
        for sequence, value in IME_MODE_ENTRIES.items():
            tree.set_leaf(sequence, value)
    if use_obsolete_kana:
        tree.update(OBSOLETE_KANA_ENTRIES, option="useObsoleteKana")
    if custom_kana_mapping:
        tree = apply_custom_mapping(tree, custom_kana_mapping)

    logger.debug(
        f"Built mapping tree: {len(base_table)} base entries, ime_mode={bool(ime_mode)}, "
        f"obsolete_kana={use_obsolete_kana}, custom={custom_kana_mapping is not None}"
    )
    return tree.freeze()
