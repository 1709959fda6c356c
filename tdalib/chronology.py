"""A chronology: historic dates ordered by year, one entry per year."""

from __future__ import annotations

import io
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from tdalib.historic_date import HistoricDate


def _copy(date: HistoricDate) -> HistoricDate:
    return HistoricDate(date.year, date)


class Chronology:
    """Historic dates kept sorted by year; dates sharing a year are merged."""

    __hash__ = None  # mutable through add_date()

    def __init__(self, dates: Iterable[HistoricDate] = ()) -> None:
        self._dates: list[HistoricDate] = []
        for date in dates:
            self.add_date(date)

    @property
    def dates(self) -> tuple[HistoricDate, ...]:
        """The dates of the chronology, in ascending year order."""
        return tuple(self._dates)

    def _position(self, year: int) -> int | None:
        return next(
            (index for index, date in enumerate(self._dates) if date.year == year),
            None,
        )

    def add_date(self, date: HistoricDate) -> None:
        """Add a copy of the date, merging its events into an existing year."""
        position = self._position(date.year)
        if position is not None:
            self._dates[position] = self._dates[position] + date
            return
        self._dates.append(_copy(date))
        self._dates.sort(key=lambda entry: entry.year)

    def find_year(self, year: int) -> HistoricDate | None:
        """A copy of the date recorded for the year, or None if there is none."""
        position = self._position(year)
        return None if position is None else _copy(self._dates[position])

    def search(self, key: str) -> Chronology:
        """The events containing the key, grouped by year; empty if none match."""
        found = Chronology()
        for date in self._dates:
            matches = date.search(key)
            if matches:
                found.add_date(matches)
        return found

    def __add__(self, other: Chronology) -> Chronology:
        if not isinstance(other, Chronology):
            return NotImplemented
        return Chronology([*self._dates, *other._dates])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chronology):
            return NotImplemented
        return self._dates == other._dates

    def __len__(self) -> int:
        return len(self._dates)

    def __iter__(self) -> Iterator[HistoricDate]:
        return iter(self._dates)

    def __str__(self) -> str:
        return f"{len(self._dates)}\n" + "".join(f"{date}\n" for date in self._dates)

    def __repr__(self) -> str:
        return f"Chronology({self._dates!r})"

    @classmethod
    def parse(cls, text: str) -> Chronology:
        """Read a chronology written as a count line followed by that many dates."""
        stream = io.StringIO(text)
        try:
            chronology = cls.read(stream)
        except EOFError as error:
            raise ValueError("empty input") from error
        if stream.read().strip():
            raise ValueError("unexpected text after the chronology")
        return chronology

    @classmethod
    def read(cls, stream: TextIO) -> Chronology:
        """Read one chronology from a text stream.

        The first line holds the number of dates; the dates follow in the
        year#count#event1#...#eventN# format. Raises EOFError on an empty stream.
        """
        line = stream.readline()
        if not line:
            raise EOFError("no more input")
        try:
            count = int(line.strip())
        except ValueError as error:
            raise ValueError(f"not a date count: {line.strip()!r}") from error
        if count < 0:
            raise ValueError(f"negative date count {count}")
        chronology = cls()
        for _ in range(count):
            try:
                chronology.add_date(HistoricDate.read(stream))
            except EOFError as error:
                raise ValueError("fewer dates than announced") from error
        return chronology


def _report_year(chronology: Chronology, year: int) -> None:
    date = chronology.find_year(year)
    if date is not None:
        print(f"Encontrada fecha histórica en el año {year}: {date}")
    else:
        print(f"Fecha histórica no encontrada en el año {year}")


def _report_key(chronology: Chronology, key: str) -> None:
    matches = chronology.search(key)
    if matches:
        print(f"Encontrada la clave '{key}' en c1:\n{matches}")
    else:
        print(f"Clave '{key}' no encontrada en c1.")


def main(argv: list[str] | None = None) -> int:
    """Read two chronologies from files, search them and join them."""
    paths = sys.argv[1:] if argv is None else list(argv)
    if len(paths) != 2:
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
        c1 = Chronology.read(io.StringIO(texts[0]))
        print(f"c1:\n{c1}")
        print("Copiando c1 en c2...")
        c2 = Chronology(c1)
        print(f"c2:\n{c2}")
        print("Modificando c2...")
        c2 = Chronology.read(io.StringIO(texts[1]))
    except (ValueError, EOFError) as error:
        print(error, file=sys.stderr)
        return 1
    print(f"c2:\n{c2}")

    year = 19
    _report_year(c1, year)
    _report_year(c2, year)

    _report_key(c1, "SEGUN")
    _report_key(c1, "ANTONIO")

    c4 = c1 + c2
    print(f"c1 + c2 = c4 = \n{c4}")
    return 0


if __name__ == "__main__":
    sys.exit(main())