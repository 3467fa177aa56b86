#!/usr/bin/env python3
"""
Word Dictionary

Keeps a personal list of words and their meanings in a plain text file
(one word:meaning per line) and answers lookups from an in-memory trie
rebuilt from that file on start-up.
"""

from __future__ import annotations

import argparse
import logging
import sys

from worddict.cli import run_cli
from worddict.constants import DICTIONARY_FILE
from worddict.dictionary import Dictionary

# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("worddict")


# Entry point

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Word Dictionary -- add words and look up their meanings",
    )
    parser.add_argument("--dict", type=str, default=DICTIONARY_FILE,
                        help=f"Path to dictionary file (default: {DICTIONARY_FILE})")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        dictionary = Dictionary.load(args.dict)
    except (OSError, ValueError) as exc:
        log.error("Error opening dictionary file: %s", exc)
        return 1

    status = 0
    try:
        run_cli(dictionary)
    finally:
        try:
            dictionary.close()
        except OSError as exc:
            log.error("Error closing dictionary file: %s", exc)
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
