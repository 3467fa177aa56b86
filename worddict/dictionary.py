"""Word dictionary backed by a persistent log and an in-memory trie."""

from __future__ import annotations

import logging
import os

from worddict.constants import DICTIONARY_FILE
from worddict.trie import Trie
from worddict.wordlog import WordLog

log = logging.getLogger("worddict")


class Dictionary:
    """Words and meanings, durable in a WordLog and queried through a Trie."""

    def __init__(self, wordlog: WordLog):
        self.wordlog = wordlog
        self.trie = Trie()

    @classmethod
    def load(cls, path: str | os.PathLike = DICTIONARY_FILE) -> Dictionary:
        """Open the log at ``path`` and replay it into a fresh index."""
        wordlog = WordLog(path)
        existed = wordlog.path.exists()
        wordlog.open()
        if not existed:
            log.info("Dictionary file not found. A new one was created at %s.", path)

        dictionary = cls(wordlog)
        try:
            records = wordlog.replay()
        except (OSError, ValueError):
            wordlog.close()
            raise
        for word, meaning in records:
            dictionary.trie.insert(word, meaning)
        log.info("Loaded %s words from %s", f"{len(dictionary.trie):,}", path)
        return dictionary

    def add_word(self, word: str, meaning: str) -> None:
        # The log is written first so the index never holds a word the log lacks.
        self.wordlog.append(word, meaning)
        self.trie.insert(word, meaning)
        log.debug("Added %r", word)

    def query_word(self, word: str) -> str | None:
        return self.trie.lookup(word)

    def close(self) -> None:
        self.wordlog.close()

    def __enter__(self) -> Dictionary:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __contains__(self, word: str) -> bool:
        return word in self.trie

    def __len__(self) -> int:
        return len(self.trie)
