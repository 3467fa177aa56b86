"""Shared constants for the word dictionary."""

DICTIONARY_FILE = "word_dictionary.txt"

# Record layout is <word><DELIMITER><meaning>\n, split on the first delimiter.
DELIMITER = ":"

NOT_FOUND_MESSAGE = "Word not found in the dictionary."
