"""A year together with the distinct historic events that happened in it."""

from __future__ import annotations

import io
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

MIN_YEAR = -9999
MAX_YEAR = 9999
SEPARATOR = "#"


def _check_year(year: int) -> None:
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ValueError(f"year {year} outside [{MIN_YEAR}, {MAX_YEAR}]")


class _Reader:
    """Character reader that skips whitespace the way formatted stream input does."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def _char(self) -> str:
        if self._pending:
            char, self._pending = self._pending, ""
            return char
        return self._stream.read(1)

    def nonspace(self) -> str:
        while True:
            char = self._char()
            if not char or not char.isspace():
                return char

    def integer(self) -> int:
        char = self.nonspace()
        if not char:
            raise EOFError("no more input")
        digits = ""
        if char in "+-":
            digits = char
            char = self._char()
        while char.isdigit():
            digits += char
            char = self._char()
        self._pending = char
        if not digits.lstrip("+-"):
            raise ValueError("expected an integer")
        return int(digits)

    def separator(self) -> None:
        char = self.nonspace()
        if char != SEPARATOR:
            raise ValueError(f"expected {SEPARATOR!r}, found {char!r}")


class HistoricDate:
    """A year and its events, with duplicates dropped in order of first appearance."""

    __hash__ = None  # mutable through add_event()

    def __init__(self, year: int = 0, events: Iterable[str] = ()) -> None:
        _check_year(year)
        self.year = year
        self._events: list[str] = []
        for event in events:
            self.add_event(event)

    @property
    def events(self) -> tuple[str, ...]:
        """The events of this year, in order."""
        return tuple(self._events)

    def add_event(self, event: str) -> None:
        """Append an event unless the same text is already recorded."""
        if event not in self._events:
            self._events.append(event)

    def search(self, key: str) -> HistoricDate:
        """The events of this year whose text contains the key; empty if none match."""
        return HistoricDate(self.year, (event for event in self._events if key in event))

    def __add__(self, other: HistoricDate) -> HistoricDate:
        if not isinstance(other, HistoricDate):
            return NotImplemented
        if self.year != other.year:
            raise ValueError(f"cannot join years {self.year} and {other.year}")
        return HistoricDate(self.year, [*self._events, *other._events])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HistoricDate):
            return NotImplemented
        return self.year == other.year and self._events == other._events

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[str]:
        return iter(self._events)

    def __str__(self) -> str:
        parts = [str(self.year), str(len(self._events)), *self._events]
        return SEPARATOR.join(parts) + SEPARATOR

    def __repr__(self) -> str:
        return f"HistoricDate({self.year}, {self._events!r})"

    @classmethod
    def parse(cls, text: str) -> HistoricDate:
        """Read one date written as year#count#event1#...#eventN# from a string."""
        stream = io.StringIO(text)
        try:
            date = cls.read(stream)
        except EOFError as error:
            raise ValueError("empty input") from error
        if stream.read().strip():
            raise ValueError("unexpected text after the date")
        return date

    @classmethod
    def read(cls, stream: TextIO) -> HistoricDate:
        """Read one date from a text stream, consuming exactly its characters.

        Whitespace between and inside fields is skipped, so it is not kept in
        event texts. Raises EOFError when the stream holds no further date.
        """
        reader = _Reader(stream)
        year = reader.integer()
        try:
            reader.separator()
            count = reader.integer()
            reader.separator()
        except EOFError as error:
            raise ValueError("truncated date") from error
        if count < 0:
            raise ValueError(f"negative event count {count}")
        date = cls(year)
        for _ in range(count):
            text = ""
            char = reader.nonspace()
            while char != SEPARATOR:
                if not char:
                    raise ValueError("truncated event")
                text += char
                char = reader.nonspace()
            date.add_event(text)
        return date


def _report(date: HistoricDate, key: str, label: str) -> None:
    matches = date.search(key)
    if matches:
        print(f"Se ha encontrado la clave '{key}' en fh5: ")
    else:
        print(f"No se ha encontrado la clave '{key}' en fh5: ")
    print(f"{label} = {matches}")


def main(argv: list[str] | None = None) -> int:
    """Read three dates from files, join two of them and search the result."""
    paths = sys.argv[1:] if argv is None else list(argv)
    if len(paths) != 3:
        print("Dime el nombre de dos ficheros con cronologías.", file=sys.stderr)
        return 0

    texts = []
    for path in paths:
        try:
            with open(path, encoding="utf-8") as handle:
                texts.append(handle.read())
        except OSError:
            print(f"No puedo abrir el fichero {path}", file=sys.stderr)
            return 0

    try:
        fh1, fh3, fh4 = (HistoricDate.read(io.StringIO(text)) for text in texts)
        print(f"fh1 = {fh1}")
        fh2 = HistoricDate(fh1.year, fh1)
        print(f"fh2 = {fh2}")
        print(f"fh3 = {fh3}")
        print(f"fh4 = {fh4}")
        fh5 = fh3 + fh4
    except (ValueError, EOFError) as error:
        print(error, file=sys.stderr)
        return 1
    print(f"fh3 + fh4 = fh5 = {fh5}")

    _report(fh5, "EV", "fh6")
    _report(fh5, "YA", "fh7")
    _report(fh5, "ANTONIO", "fh8")
    return 0


if __name__ == "__main__":
    sys.exit(main())