"""Prefix tree over state and crop names."""

from __future__ import annotations

import os
from typing import Iterator, Optional, Union

PathLike = Union[str, "os.PathLike[str]"]

ALPHABET = "abcdefghijklmnopqrstuvwxyz "
MAX_FIELDS = 10
MAX_WORD = 99


def _fold(char: str) -> str:
    if "A" <= char <= "Z":
        return chr(ord(char) + 32)
    return char


def _letters(text: str) -> Iterator[str]:
    """The characters of text the tree stores: ASCII letters lowered, and spaces."""
    for char in text:
        char = _fold(char)
        if char in ALPHABET:
            yield char


class _Node:
    __slots__ = ("children", "is_word")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.is_word = False


class Trie:
    """Case-insensitive tree of words over a-z and space; other characters are skipped."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        node = self._root
        for letter in _letters(word):
            node = node.children.setdefault(letter, _Node())
        node.is_word = True

    def _walk(self, text: str) -> Optional[_Node]:
        node = self._root
        for letter in _letters(text):
            child = node.children.get(letter)
            if child is None:
                return None
            node = child
        return node

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self._walk(word)
        return node is not None and node.is_word

    @staticmethod
    def _collect(node: _Node, prefix: str) -> Iterator[str]:
        if node.is_word:
            yield prefix
        for letter in ALPHABET:
            child = node.children.get(letter)
            if child is not None:
                yield from Trie._collect(child, prefix + letter)

    def words(self) -> list[str]:
        """All stored words, in alphabet order with space after z."""
        return list(self._collect(self._root, ""))

    def words_with_prefix(self, prefix: str) -> list[str]:
        """Stored words starting with prefix, each spelled with prefix as given."""
        node = self._walk(prefix)
        if node is None:
            return []
        return list(self._collect(node, prefix))


def load_trie(path: PathLike, column: int) -> Trie:
    """Build a tree from one column of a dataset file, skipping its header."""
    trie = Trie()
    with open(path, encoding="utf-8") as handle:
        next(handle, None)
        for line in handle:
            fields = [field for field in line.split(";") if field][:MAX_FIELDS]
            if 0 <= column < len(fields):
                trie.insert(fields[column][:MAX_WORD])
    return trie