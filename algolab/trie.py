"""A prefix tree over lower-case words."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    end: bool = False


def _check_word(word: str) -> None:
    if any(not ("a" <= ch <= "z") for ch in word):
        raise ValueError("words may only contain the letters a to z")


class Trie:
    """A set of lower-case words stored as a prefix tree."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add a word made of the letters a to z."""
        _check_word(word)
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.end = True

    def search(self, word: str) -> bool:
        """Tell whether the word itself was inserted."""
        _check_word(word)
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return False
            node = child
        return node.end