"""A dictionary of unique keys kept in ascending order, each with a list of meanings."""

from __future__ import annotations

import io
import sys
from bisect import bisect_left
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, TextIO

SEPARATOR_LINE = "**************************************"


@dataclass
class Entry:
    """A key and the information associated with it, in insertion order."""

    key: Any
    info: list[Any] = field(default_factory=list)


def _next_count(stream: TextIO) -> int:
    while True:
        line = stream.readline()
        if not line:
            raise EOFError("no more input")
        text = line.strip()
        if text:
            break
    try:
        count = int(text)
    except ValueError as error:
        raise ValueError(f"not a count: {text!r}") from error
    if count < 0:
        raise ValueError(f"negative count {count}")
    return count


def _next_line(stream: TextIO) -> str:
    line = stream.readline()
    if not line:
        raise ValueError("truncated dictionary")
    return line.rstrip("\r\n")


class Dictionary:
    """Entries sorted by key; a key appears at most once."""

    __hash__ = None  # mutable through insert() and add_meaning()

    def __init__(self) -> None:
        self._entries: list[Entry] = []

    def _locate(self, key: Any) -> tuple[int, bool]:
        position = bisect_left(self._entries, key, key=lambda entry: entry.key)
        found = position < len(self._entries) and self._entries[position].key == key
        return position, found

    def __contains__(self, key: object) -> bool:
        try:
            return self._locate(key)[1]
        except TypeError:
            return False

    def insert(self, key: Any, info: Iterable[Any]) -> None:
        """Add a key with its information, or append the information to an existing key."""
        position, found = self._locate(key)
        if found:
            self._entries[position].info.extend(info)
        else:
            self._entries.insert(position, Entry(key, list(info)))

    def add_meaning(self, key: Any, meaning: Any) -> None:
        """Append one piece of information to a key, adding the key if it is missing."""
        position, found = self._locate(key)
        if not found:
            self._entries.insert(position, Entry(key))
        self._entries[position].info.append(meaning)

    def get_info(self, key: Any) -> list[Any]:
        """A copy of the information of a key; empty if the key is missing."""
        position, found = self._locate(key)
        return list(self._entries[position].info) if found else []

    def copy(self) -> Dictionary:
        """An independent dictionary with the same contents."""
        duplicate = Dictionary()
        duplicate._entries = [Entry(entry.key, list(entry.info)) for entry in self._entries]
        return duplicate

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dictionary):
            return NotImplemented
        return self._entries == other._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __str__(self) -> str:
        parts = []
        for entry in self._entries:
            meanings = "".join(f"\n{meaning}" for meaning in entry.info)
            parts.append(
                f"\nPalabra: {entry.key}\nInformación asociada:{meanings}{SEPARATOR_LINE}"
            )
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Dictionary({self._entries!r})"

    @classmethod
    def parse(cls, text: str) -> Dictionary:
        """Read a whole dictionary from a string."""
        stream = io.StringIO(text)
        try:
            dictionary = cls.read(stream)
        except EOFError as error:
            raise ValueError("empty input") from error
        if stream.read().strip():
            raise ValueError("unexpected text after the dictionary")
        return dictionary

    @classmethod
    def read(cls, stream: TextIO) -> Dictionary:
        """Read one dictionary from a text stream.

        The format is the number of keys on a line, then for each key a line
        with the key, a line with the number of meanings and one line per
        meaning. Raises EOFError when the stream holds nothing.
        """
        count = _next_count(stream)
        dictionary = cls()
        for _ in range(count):
            key = _next_line(stream)
            try:
                meanings = _next_count(stream)
            except EOFError as error:
                raise ValueError("truncated dictionary") from error
            dictionary.insert(key, [_next_line(stream) for _ in range(meanings)])
        return dictionary


def main(argv: list[str] | None = None) -> int:
    """Read a dictionary and then a word from stdin and print the word's meanings."""
    stream = io.StringIO(sys.stdin.read())
    try:
        dictionary = Dictionary.read(stream)
    except (ValueError, EOFError) as error:
        print(error, file=sys.stderr)
        return 1
    print(dictionary, end="")

    print("Introduce una palabra")
    words = stream.read().split()
    meanings = dictionary.get_info(words[0]) if words else []
    if meanings:
        for meaning in meanings:
            print(meaning)
    else:
        print("\nPalabra no encontrada.")
    return 0


if __name__ == "__main__":
    sys.exit(main())