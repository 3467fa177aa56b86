"""Append-only text log of word:meaning records.

The log is the durable source of truth for the dictionary; the in-memory
trie is rebuilt from it on every start.  One record per line::

    <word>:<meaning>

Lines are split on the first ``:`` only, so a meaning may contain colons but
a word may not.  Records are not escaped.  Words containing the delimiter are
rejected on append instead, since the first-colon split would truncate them
on reload.
"""

from __future__ import annotations

import errno
import logging
import os
from pathlib import Path
from typing import BinaryIO, Iterable

from worddict.constants import DELIMITER

log = logging.getLogger("worddict.wordlog")

# Bytes that are not valid UTF-8 are carried through as lone surrogates.
ENCODING = "utf-8"
ERRORS = "surrogateescape"

Record = tuple[str, str]


def format_record(word: str, meaning: str) -> str:
    """Render one record as a log line, rejecting ones that would not parse back."""
    if DELIMITER in word:
        raise ValueError(f"word may not contain {DELIMITER!r}: {word!r}")
    for field in (word, meaning):
        if "\n" in field or "\r" in field:
            raise ValueError(f"line breaks are not allowed in records: {field!r}")
    return f"{word}{DELIMITER}{meaning}\n"


def parse_record(line: str) -> Record | None:
    """Split a log line into ``(word, meaning)``; None for blank or malformed lines."""
    line = line.rstrip("\n")
    if line.endswith("\r"):
        line = line[:-1]
    if not line:
        return None
    word, sep, meaning = line.partition(DELIMITER)
    if not sep:
        return None
    return word, meaning


def _parse_lines(lines: Iterable[str]) -> list[Record]:
    records: list[Record] = []
    for lineno, line in enumerate(lines, 1):
        record = parse_record(line)
        if record is None:
            if line.strip():
                log.debug("Skipping malformed line %d: %r", lineno, line)
            continue
        records.append(record)
    return records


def replay(path: str | os.PathLike) -> list[Record]:
    """Read every record from the log at ``path``, oldest first.

    A log that does not exist yet is empty.
    """
    try:
        with open(path, "r", encoding=ENCODING, errors=ERRORS, newline="\n") as f:
            return _parse_lines(f)
    except FileNotFoundError:
        return []


class WordLog:
    """Open handle on the dictionary log, kept for the life of the process.

    The handle is unbuffered, so an append either reaches the file or is
    cut back off it before the error propagates.
    """

    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)
        self._fp: BinaryIO | None = None

    @property
    def is_open(self) -> bool:
        return self._fp is not None

    def open(self) -> WordLog:
        """Open for reading and appending, creating the file if needed."""
        if self._fp is None:
            self._fp = open(self.path, "a+b", buffering=0)
            log.debug("Opened word log %s", self.path)
        return self

    def append(self, word: str, meaning: str) -> None:
        data = format_record(word, meaning).encode(ENCODING, ERRORS)
        fp = self._require_open()
        end = fp.seek(0, os.SEEK_END)
        try:
            written = 0
            while written < len(data):
                written += fp.write(data[written:])
        except OSError:
            self._discard_from(fp, end)
            raise

    def replay(self) -> list[Record]:
        """Read all records from the start of the open log."""
        fp = self._require_open()
        fp.seek(0)
        text = fp.read().decode(ENCODING, ERRORS)
        return _parse_lines(text.split("\n"))

    def close(self) -> None:
        fp, self._fp = self._fp, None
        if fp is not None:
            fp.close()

    def _discard_from(self, fp: BinaryIO, end: int) -> None:
        try:
            fp.truncate(end)
        except OSError as exc:
            log.warning("Could not remove partial record from %s: %s", self.path, exc)

    def _require_open(self) -> BinaryIO:
        if self._fp is None:
            raise OSError(errno.EBADF, "word log is not open", str(self.path))
        return self._fp

    def __enter__(self) -> WordLog:
        return self.open()

    def __exit__(self, *exc_info) -> None:
        self.close()
