"""Word dictionary -- personal word/meaning lookup."""

from worddict.constants import DELIMITER, DICTIONARY_FILE, NOT_FOUND_MESSAGE
from worddict.trie import Trie, TrieNode
from worddict.wordlog import WordLog, replay
from worddict.dictionary import Dictionary

__all__ = [
    "DELIMITER",
    "DICTIONARY_FILE",
    "NOT_FOUND_MESSAGE",
    "Dictionary",
    "Trie",
    "TrieNode",
    "WordLog",
    "replay",
]
