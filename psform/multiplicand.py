"""Multiplicands: the constant and variable factors that make up an addend."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum


class MultiplicandType(Enum):
    """Kind of a multiplicand."""

    CONSTANT = "constant"
    VARIABLE = "variable"


@dataclass(frozen=True)
class Multiplicand:
    """A single factor: an integer constant or a one-letter variable."""

    kind: MultiplicandType
    value: int | str

    @property
    def is_constant(self) -> bool:
        return self.kind is MultiplicandType.CONSTANT

    @property
    def is_variable(self) -> bool:
        return self.kind is MultiplicandType.VARIABLE

    def __str__(self) -> str:
        return str(self.value)


def variable(name: str) -> Multiplicand:
    """Create a variable multiplicand named by a single character."""
    if not isinstance(name, str) or len(name) != 1:
        raise ValueError(f"variable name must be a single character, got {name!r}")
    return Multiplicand(MultiplicandType.VARIABLE, name)


def constant(value: int) -> Multiplicand:
    """Create a constant multiplicand."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"constant value must be an integer, got {value!r}")
    return Multiplicand(MultiplicandType.CONSTANT, value)


def compare_multiplicands(a: Iterable[Multiplicand], b: Iterable[Multiplicand]) -> bool:
    """Return True if both sequences hold the same multiplicands in any order."""
    return Counter(a) == Counter(b)


def format_multiplicands(items: Iterable[Multiplicand]) -> str:
    """Render multiplicands joined by '*', e.g. ``2*x*y``."""
    return "*".join(str(item) for item in items)


def _split_constant(items: Sequence[Multiplicand]) -> tuple[int, list[Multiplicand]]:
    """Separate a leading constant (default 1) from the rest of the factors."""
    if items and items[0].is_constant:
        return int(items[0].value), list(items[1:])
    return 1, list(items)


def divide_multiplicands(
    dividend: Sequence[Multiplicand], divisor: Sequence[Multiplicand]
) -> list[Multiplicand] | None:
    """Divide one product of factors by another.

    Returns None when the constants do not divide evenly or when the divisor
    holds a variable that the dividend lacks. A quotient constant of 1 is
    dropped as soon as a variable follows it. Raises ZeroDivisionError when
    the divisor's constant is zero.
    """
    dividend_constant, dividend_rest = _split_constant(dividend)
    divisor_constant, pending = _split_constant(divisor)

    if divisor_constant == 0:
        raise ZeroDivisionError("division by a zero constant")
    if dividend_constant % divisor_constant != 0:
        return None

    quotient = abs(dividend_constant) // abs(divisor_constant)
    if (dividend_constant < 0) != (divisor_constant < 0):
        quotient = -quotient

    result: list[Multiplicand] = [constant(quotient)]
    for item in dividend_rest:
        if item in pending:
            pending.remove(item)
            continue
        result.append(item)
        if result[0].is_constant and result[0].value == 1:
            del result[0]

    if pending:
        return None
    return result


def multiply_multiplicands(
    items: Sequence[Multiplicand], factors: Sequence[Multiplicand]
) -> list[Multiplicand]:
    """Multiply two products of variables, keeping equal variables adjacent.

    Each factor equal to an item is placed right after that item, so that
    ``x*y`` times ``x`` gives ``x*x*y``; unmatched factors go at the end.
    Both arguments are expected to hold variables only.
    """
    used = [False] * len(factors)
    result: list[Multiplicand] = []
    for item in items:
        result.append(item)
        for position, factor in enumerate(factors):
            if not used[position] and factor.value == item.value:
                result.append(factor)
                used[position] = True
    result.extend(factor for factor, taken in zip(factors, used) if not taken)
    return result