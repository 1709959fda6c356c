"""An ordered set of real numbers kept in a growing and shrinking array."""

from __future__ import annotations

import sys
from bisect import bisect_left
from collections.abc import Iterable, Iterator


class RealSet:
    """Sorted distinct floats with doubling growth and shrinking at a quarter full."""

    def __init__(self, values: Iterable[float] = ()) -> None:
        self._items: list[float] = []
        self._capacity = 0
        for value in values:
            self.insert(value)

    def _locate(self, value: float) -> tuple[int, bool]:
        position = bisect_left(self._items, value)
        found = position < len(self._items) and self._items[position] == value
        return position, found

    def insert(self, value: float) -> bool:
        """Add a value; False if it was already present."""
        value = float(value)
        position, found = self._locate(value)
        if found:
            return False
        if self._capacity == len(self._items):
            self._capacity = 2 * self._capacity if self._capacity else 1
        self._items.insert(position, value)
        return True

    def remove(self, value: float) -> bool:
        """Take a value out; False if it was not present."""
        position, found = self._locate(float(value))
        if not found:
            return False
        del self._items[position]
        if len(self._items) < self._capacity // 4:
            self._capacity //= 2
        return True

    def __contains__(self, value: object) -> bool:
        try:
            number = float(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False
        return self._locate(number)[1]

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> float:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")
        return self._items[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self._items)

    def capacity(self) -> int:
        """The number of slots currently reserved."""
        return self._capacity

    def __repr__(self) -> str:
        return f"RealSet({self._items!r})"


def _listing(values: RealSet) -> str:
    lines = [f"Conjunto de {len(values)} elementos:"]
    lines.extend(f"  Elemento: {value:g}" for value in values)
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Build two sets, print them and their intersection."""
    c = RealSet(range(10))
    for value in range(0, 10, 2):
        c.remove(value)
    print(_listing(c))

    d = RealSet(range(10))
    for value in range(0, 10, 3):
        d.remove(value)
    print(_listing(d))

    intersection = RealSet(value for value in c if value in d)
    print(_listing(intersection))
    return 0


if __name__ == "__main__":
    sys.exit(main())