"""Rational numbers kept as a numerator/denominator pair."""

from __future__ import annotations

import math
import re
import sys
from collections.abc import Iterator

_RATIONAL = r"\s*(\S)\s*([+-]?\d+)\s*(\S)\s*([+-]?\d+)\s*(\S)"
_TOKEN = re.compile(_RATIONAL)
_WHOLE = re.compile(_RATIONAL + r"\s*")


def _check_denominator(denominator: int) -> None:
    if denominator == 0:
        raise ZeroDivisionError("the denominator cannot be zero")


class Rational:
    """A fraction that keeps the exact numerator and denominator it was given."""

    __hash__ = None  # mutable through assign() and +=

    def __init__(self, numerator: int = 0, denominator: int = 1) -> None:
        _check_denominator(denominator)
        self.numerator = numerator
        self.denominator = denominator

    def assign(self, numerator: int, denominator: int) -> None:
        """Replace both parts of the fraction."""
        _check_denominator(denominator)
        self.numerator = numerator
        self.denominator = denominator

    def compare(self, other: Rational) -> bool:
        """Whether both fractions stand for the same value."""
        return self.numerator * other.denominator == self.denominator * other.numerator

    def simplified(self) -> Rational:
        """The fraction in lowest terms; zero keeps its denominator."""
        if self.numerator == 0:
            return Rational(0, self.denominator)
        divisor = math.gcd(self.numerator, self.denominator)
        return Rational(self.numerator // divisor, self.denominator // divisor)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.compare(other)

    def __add__(self, other: Rational) -> Rational:
        if not isinstance(other, Rational):
            return NotImplemented
        return Rational(
            self.numerator * other.denominator + self.denominator * other.numerator,
            self.denominator * other.denominator,
        ).simplified()

    def __sub__(self, other: Rational) -> Rational:
        if not isinstance(other, Rational):
            return NotImplemented
        return Rational(
            self.numerator * other.denominator - self.denominator * other.numerator,
            self.denominator * other.denominator,
        ).simplified()

    def __mul__(self, other: Rational) -> Rational:
        if not isinstance(other, Rational):
            return NotImplemented
        return Rational(
            self.numerator * other.numerator, self.denominator * other.denominator
        ).simplified()

    def __truediv__(self, other: Rational) -> Rational:
        if not isinstance(other, Rational):
            return NotImplemented
        return Rational(
            self.numerator * other.denominator, self.denominator * other.numerator
        ).simplified()

    def __iadd__(self, other: Rational) -> Rational:
        """Add in place without reducing the result."""
        if not isinstance(other, Rational):
            return NotImplemented
        self.numerator = self.numerator * other.denominator + self.denominator * other.numerator
        self.denominator = self.denominator * other.denominator
        return self

    def __str__(self) -> str:
        return f"({self.numerator},{self.denominator})"

    def __repr__(self) -> str:
        return f"Rational({self.numerator}, {self.denominator})"

    def to_slash(self) -> str:
        """The fraction written as (n/d)."""
        return f"({self.numerator}/{self.denominator})"

    @classmethod
    def parse(cls, text: str) -> Rational:
        """Read a fraction written as a delimiter, numerator, separator, denominator, delimiter."""
        match = _WHOLE.fullmatch(text)
        if match is None:
            raise ValueError(f"not a rational: {text!r}")
        return cls(int(match.group(2)), int(match.group(4)))


def _scan(text: str) -> Iterator[Rational]:
    position = 0
    while (match := _TOKEN.match(text, position)) is not None:
        yield Rational(int(match.group(2)), int(match.group(4)))
        position = match.end()


def main(argv: list[str] | None = None) -> int:
    """Show the rational type at work and combine two fractions read from stdin."""
    try:
        a = Rational()
        d = Rational(2, 4)
        print(f"{a.to_slash()} Racional a")
        print(f"{d.to_slash()} Racional d")

        a = Rational(d.numerator, d.denominator)
        print(f"{a.to_slash()} Racional a tras asignarle el racional d")

        a.assign(6, 4)
        d.assign(5, 7)
        print(f"{d} Racional d 5/7 ")
        print(f"{a.to_slash()} Racional a 6/4 ")

        c = a + d
        print(f"{c.to_slash()} Racional c=a+d")
        c = c.simplified()
        print(f"Racional c=a+d irreducible {c}")

        c += a
        print(f"{c.to_slash()} Racional c=c+a")
        c = c.simplified()
        print(f"Racional c=c+a irreducible {c}")

        e = Rational(6, 4)
        f = Rational(3, 2)
        g = Rational(3, 5)
        print(f"{e} Racional e 6/4")
        print(f"{f.to_slash()} Racional f 3/2")
        print(f"{g.to_slash()} Racional g 3/5")

        print("f y e son iguales" if f.compare(e) else "f y e no son iguales")
        print("f y g son iguales" if f == g else "f y g no son iguales")

        print("Introduzca el primer racional usando formato (r/i):")
        print("Introduzca el segundo racional usando formato (r/i):")
        values = list(_scan(sys.stdin.read()))
        if len(values) < 2:
            print("Se necesitan dos racionales.", file=sys.stderr)
            return 1
        w, z = values[:2]
        print(f"La suma es {w + z}")
        print(f"La resta es {w - z}")
        print(f"La multiplicación es {w * z}")
        print(f"La división es {w / z}")
    except ZeroDivisionError:
        print("No se puede anular el denominador.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())