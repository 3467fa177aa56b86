"""Prefix trie mapping words to their meanings."""

from __future__ import annotations


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "meaning", "is_terminal")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.meaning: str = ""
        self.is_terminal: bool = False


class Trie:
    """Prefix trie for exact word -> meaning lookups."""

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    def insert(self, word: str, meaning: str) -> None:
        """Store ``meaning`` under ``word``, replacing any earlier meaning."""
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_terminal:
            self._size += 1
        node.is_terminal = True
        node.meaning = meaning

    def lookup(self, word: str) -> str | None:
        """Return the meaning stored for ``word``, or None.

        A word that only exists as a prefix of longer words is not a match.
        """
        node = self._walk(word)
        if node is None or not node.is_terminal:
            return None
        return node.meaning

    def is_prefix(self, prefix: str) -> bool:
        """True if some stored word starts with ``prefix``, itself included."""
        return self._walk(prefix) is not None

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def __contains__(self, word: str) -> bool:
        return self.lookup(word) is not None

    def __len__(self) -> int:
        return self._size
