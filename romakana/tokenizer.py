"""Greedy longest-match romaji tokenizer over a MappingTree."""

from typing import List, NamedTuple, Optional

from romakana.base import BaseTokenizer
from romakana.mapping import MappingTree


class Span(NamedTuple):
    """A converted slice ``text[start:end]``.

    ``value`` is None only for the last span of an incremental scan, when the
    trailing input could still grow into a longer sequence.
    """
    start: int
    end: int
    value: Optional[str]


def tokenize(text: str, tree: MappingTree, force_resolve_trailing: bool = True) -> List[Span]:
    """Split *text* into contiguous spans by maximal munch through *tree*.

    Each chunk descends one character at a time for as long as a child
    matches, and is committed when the node is a leaf or the next character
    does not extend it. The character that failed to extend starts the next
    chunk. Lookups are case-insensitive; offsets index the original text.

    A node without a value of its own resolves to the value carried so far
    plus the characters consumed after it, so ``"ky"`` resolves to ``"ky"``
    and ``"ny"`` to ``"んy"``. A character with no entry at the root becomes
    a one-character span holding itself.

    When *force_resolve_trailing* is False and the input ends on a node that
    still has children, the last span is returned with ``value=None``.
    """
    spans: List[Span] = []
    root = tree.root
    length = len(text)
    cursor = 0

    while cursor < length:
        chunk_start = cursor
        node = root.child(text[cursor].lower())
        cursor += 1
        if node is None:
            spans.append(Span(chunk_start, cursor, text[chunk_start]))
            continue

        value = node.value if node.value is not None else text[chunk_start]
        while node.children and cursor < length:
            child = node.child(text[cursor].lower())
            if child is None:
                break
            node = child
            value = node.value if node.value is not None else value + text[cursor]
            cursor += 1

        if cursor == length and node.children and not force_resolve_trailing:
            spans.append(Span(chunk_start, cursor, None))
        else:
            spans.append(Span(chunk_start, cursor, value))

    return spans


class RomajiTokenizer(BaseTokenizer):
    """Tokenizer bound to one mapping tree and trailing-input policy."""

    def __init__(self, tree: MappingTree, force_resolve_trailing: bool = True):
        self.tree = tree
        self.force_resolve_trailing = force_resolve_trailing

    def tokenize(self, text: str) -> List[Span]:
        return tokenize(text, self.tree, self.force_resolve_trailing)
