"""A stack that records, with every element, the maximum of it and all below it."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Pair:
    """An element of the stack and the maximum up to and including it."""

    element: Any = 0
    maximum: Any = 0

    def __str__(self) -> str:
        return f"Elemento: {self.element} Máximo: {self.maximum}"


class MaxStack:
    """A last-in first-out stack whose top always knows the maximum of the stack."""

    def __init__(self) -> None:
        self._pairs: list[Pair] = []

    def push(self, value: Any) -> None:
        """Put a value on top, pairing it with the maximum of the resulting stack."""
        if self._pairs:
            below = self._pairs[-1].maximum
            maximum = value if value > below else below
        else:
            maximum = value
        self._pairs.append(Pair(value, maximum))

    def pop(self) -> Pair | None:
        """Remove and return the top pair; an empty stack is left as it is."""
        if not self._pairs:
            return None
        return self._pairs.pop()

    def top(self) -> Pair:
        """The pair on top of the stack."""
        if not self._pairs:
            raise IndexError("top of an empty stack")
        return self._pairs[-1]

    def copy(self) -> MaxStack:
        """An independent stack with the same contents."""
        duplicate = MaxStack()
        duplicate._pairs = list(self._pairs)
        return duplicate

    def __len__(self) -> int:
        return len(self._pairs)

    def __bool__(self) -> bool:
        return bool(self._pairs)

    def __iter__(self) -> Iterator[Pair]:
        """The pairs from the top of the stack down to the bottom."""
        return reversed(self._pairs)

    def __str__(self) -> str:
        return "".join(f"{pair}\n" for pair in self)

    def __repr__(self) -> str:
        return f"MaxStack({[pair.element for pair in self._pairs]!r})"


def _emptiness(stack: MaxStack, name: str) -> str:
    return f"La {name} NO está vacía" if stack else f"La {name} está vacía"


def _demo(
    first: str,
    second: str,
    values: Iterable[Any],
    replacement: Any,
    extra: Any,
) -> None:
    stack = MaxStack()
    print(_emptiness(stack, first))
    for value in values:
        stack.push(value)
    print(_emptiness(stack, first))
    print(f"{first}:\n{stack}", end="")

    other = stack.copy()
    print(f"{second}:\n{other}", end="")

    other.pop()
    other.push(replacement)
    print(f"{second}:\n{other}", end="")

    print(f"Tope de {second}: {other.top()}")

    other.push(extra)
    print(f"{second}:\n{other}", end="")


def main(argv: list[str] | None = None) -> int:
    """Show the stack at work with integers and with characters."""
    _demo("pila1", "pila2", (1, 2, 3), 5, 2)
    print("\n\nAHORA TRABAJAREMOS CON PILAS DE CHAR")
    _demo("pila3", "pila4", "abc", "e", "b")
    return 0


if __name__ == "__main__":
    sys.exit(main())