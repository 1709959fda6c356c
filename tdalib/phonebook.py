"""A phone book: unique names kept in ascending order, each with one phone."""

from __future__ import annotations

import io
import sys
from collections.abc import Iterable, Iterator, Mapping
from typing import TextIO


class PhoneBook:
    """Names mapped to phones; a name appears at most once and the first insertion wins."""

    __hash__ = None  # mutable through insert(), remove() and item assignment

    def __init__(self, entries: Iterable[tuple[str, str]] | Mapping[str, str] = ()) -> None:
        self._phones: dict[str, str] = {}
        pairs = entries.items() if isinstance(entries, Mapping) else entries
        for name, phone in pairs:
            self.insert(name, phone)

    def __getitem__(self, name: str) -> str:
        """The phone of a name; a missing name is added with an empty phone."""
        return self._phones.setdefault(name, "")

    def __setitem__(self, name: str, phone: str) -> None:
        self._phones[name] = phone

    def get_phone(self, name: str) -> str:
        """The phone of a name, or an empty string if the name is missing."""
        return self._phones.get(name, "")

    def insert(self, name: str, phone: str) -> bool:
        """Add a name with its phone; False, and nothing changed, if the name exists."""
        if name in self._phones:
            return False
        self._phones[name] = phone
        return True

    def remove(self, name: str, phone: str | None = None) -> bool:
        """Remove a name; with a phone, only if the recorded phone matches.

        Returns whether an entry was removed.
        """
        if name not in self._phones:
            return False
        if phone is not None and self._phones[name] != phone:
            return False
        del self._phones[name]
        return True

    def count(self, name: str) -> int:
        """How many phones the name has: 0 or 1."""
        return 1 if name in self._phones else 0

    def clear(self) -> None:
        """Remove every entry."""
        self._phones.clear()

    def __add__(self, other: PhoneBook) -> PhoneBook:
        if not isinstance(other, PhoneBook):
            return NotImplemented
        union = PhoneBook(self)
        for name, phone in other:
            union.insert(name, phone)
        return union

    def __sub__(self, other: PhoneBook) -> PhoneBook:
        if not isinstance(other, PhoneBook):
            return NotImplemented
        difference = PhoneBook(self)
        for name, phone in other:
            difference.remove(name, phone)
        return difference

    def previous(self, name: str, phone: str = "") -> PhoneBook:
        """The entries whose names sort before the given name.

        Entries are ordered by name alone, so the phone does not affect the result.
        """
        return PhoneBook((entry, number) for entry, number in self if entry < name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PhoneBook):
            return NotImplemented
        return self._phones == other._phones

    def __contains__(self, name: object) -> bool:
        return name in self._phones

    def __len__(self) -> int:
        return len(self._phones)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        """The (name, phone) pairs in ascending name order."""
        return iter(sorted(self._phones.items()))

    def __str__(self) -> str:
        return "".join(f"{name}\t{phone}\n" for name, phone in self)

    def __repr__(self) -> str:
        return f"PhoneBook({list(self)!r})"

    @classmethod
    def parse(cls, text: str) -> PhoneBook:
        """Read a phone book from a string of name<TAB>phone lines."""
        return cls.read(io.StringIO(text))

    @classmethod
    def read(cls, stream: TextIO) -> PhoneBook:
        """Read name<TAB>phone lines until the end of the stream.

        Blank lines are skipped; a line without a tab raises ValueError.
        """
        book = cls()
        for line in iter(stream.readline, ""):
            text = line.rstrip("\r\n")
            if not text.strip():
                continue
            name, tab, phone = text.partition("\t")
            if not tab:
                raise ValueError(f"missing tab between name and phone: {text!r}")
            book.insert(name, phone)
        return book


def _lines(stream: TextIO) -> Iterator[str]:
    for line in iter(stream.readline, ""):
        yield line.rstrip("\r\n")


def _next_word(stream: TextIO) -> str:
    for line in _lines(stream):
        words = line.split()
        if words:
            return words[0]
    return ""


def main(argv: list[str] | None = None) -> int:
    """Load a phone book from a file and query, edit and combine it from stdin."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Dime el nombre del fichero con la guia")
        return 0
    path = args[0]
    try:
        with open(path, encoding="utf-8") as handle:
            book = PhoneBook.read(handle)
    except OSError:
        print(f"No puedo abrir el fichero {path}")
        return 0
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    print(f"La guia insertada {book}")
    print("Dime un nombre sobre el que quieres obtener el telefono")
    for name in _lines(sys.stdin):
        print(f"Buscando {name}....")
        phone = book.get_phone(name)
        if phone == "":
            print("No existe ese nombre en la guia")
        else:
            print(f"El telefono es {phone}")
        print(
            "[Pulse CTRL+D para finalizar] "
            "Dime un nombre sobre el que quieres obtener el telefono"
        )

    print("Dime el nombre que quieres borrar")
    for name in _lines(sys.stdin):
        book.remove(name)
        print("Dime el nombre que quieres borrar")

    print("Dime el nombre que quieres borrar")
    for name in _lines(sys.stdin):
        book.remove(name)
        print("Ahora la guia es:")
        print(book)
        print("[Pulse CTRL+D para finalizar] Dime el nombre que quieres borrar")

    print("Introduce otra guia ([Pulse CTRL+D para finalizar])")
    try:
        other = PhoneBook.read(sys.stdin)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    union = book + other
    difference = book - other
    print(f"\nLa union de las dos guias: {union}")
    print(f"\nLa diferencia de las dos guias:{difference}")

    print("\nDime un nombre para establecer los previos")
    name = _next_word(sys.stdin)
    phone = book.get_phone(name)
    print(f"\nLos nombre previos: {book.previous(name, phone)}")

    print("Listando la guia con iteradores:")
    for entry, number in book:
        print(f"{entry}\t{number}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())