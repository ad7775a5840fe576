"""Addends: signed products of multiplicands, and operations on lists of them."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from psform.multiplicand import (
    Multiplicand,
    compare_multiplicands,
    constant,
    format_multiplicands,
    multiply_multiplicands,
)


class Sign(Enum):
    """Sign of an addend."""

    POSITIVE = "+"
    NEGATIVE = "-"


@dataclass
class Addend:
    """A signed product of multiplicands, such as ``-2*x*y``."""

    sign: Sign = Sign.POSITIVE
    elements: list[Multiplicand] = field(default_factory=list)

    @property
    def size(self) -> int:
        """Number of multiplicands in the product."""
        return len(self.elements)

    def copy(self) -> Addend:
        """Return an independent copy of this addend."""
        return Addend(self.sign, list(self.elements))

    def __str__(self) -> str:
        return format_multiplicands(self.elements)


def _signed_constant(addend: Addend) -> tuple[int, list[Multiplicand]]:
    """Split off the leading constant (default 1) with the addend's sign applied."""
    elements = addend.elements
    if elements and elements[0].is_constant:
        value, rest = int(elements[0].value), list(elements[1:])
    else:
        value, rest = 1, list(elements)
    if addend.sign is Sign.NEGATIVE:
        value = -value
    return value, rest


def _unsigned_constant(addend: Addend) -> tuple[int, list[Multiplicand]]:
    """Split off the leading constant (default 1), ignoring the sign."""
    elements = addend.elements
    if elements and elements[0].is_constant:
        return int(elements[0].value), list(elements[1:])
    return 1, list(elements)


def compare_addends(a: Sequence[Addend], b: Sequence[Addend]) -> bool:
    """Return True if both lists hold the same addends in any order."""
    if len(a) != len(b):
        return False
    remaining = list(b)
    for addend in a:
        match = next(
            (
                candidate
                for candidate in remaining
                if candidate.sign is addend.sign
                and compare_multiplicands(candidate.elements, addend.elements)
            ),
            None,
        )
        if match is None:
            return False
        remaining.remove(match)
    return True


def format_addends(addends: Sequence[Addend]) -> str:
    """Render addends as text, e.g. ``-x*y + 2*z - w``; empty input gives ''."""
    if not addends:
        return ""
    parts = ["-" if addends[0].sign is Sign.NEGATIVE else ""]
    for position, addend in enumerate(addends):
        if position:
            parts.append(" - " if addend.sign is Sign.NEGATIVE else " + ")
        parts.append(format_multiplicands(addend.elements))
    return "".join(parts)


def sum_addends(a: Sequence[Addend], b: Sequence[Addend]) -> list[Addend]:
    """Add two lists of addends, combining like terms.

    Each addend of ``a`` is combined with the first addend of ``b`` whose
    variables match; a combined term always carries an explicit constant and
    vanishes when it sums to zero. Unmatched addends of ``a`` keep their place,
    and unmatched addends of ``b`` follow at the end.
    """
    used = [False] * len(b)
    b_split = [_signed_constant(addend) for addend in b]
    result: list[Addend] = []

    for addend in a:
        value, variables = _signed_constant(addend)
        for position, (other_value, other_variables) in enumerate(b_split):
            if len(variables) == len(other_variables) and compare_multiplicands(
                variables, other_variables
            ):
                total = value + other_value
                if total != 0:
                    sign = Sign.NEGATIVE if total < 0 else Sign.POSITIVE
                    result.append(Addend(sign, [constant(abs(total)), *variables]))
                used[position] = True
                break
        else:
            result.append(addend.copy())

    result.extend(addend.copy() for addend, taken in zip(b, used) if not taken)
    return result


def multiply_addends(addends: Sequence[Addend], factor: Addend) -> list[Addend]:
    """Multiply every addend in a list by a single addend.

    Products with a zero constant are dropped; a constant of 1 is omitted
    unless it is the only multiplicand left.
    """
    factor_value, factor_variables = _unsigned_constant(factor)
    result: list[Addend] = []
    for addend in addends:
        value, variables = _unsigned_constant(addend)
        product = value * factor_value
        if product == 0:
            continue
        elements = multiply_multiplicands(variables, factor_variables)
        if product != 1 or not elements:
            elements.insert(0, constant(product))
        sign = Sign.NEGATIVE if addend.sign is not factor.sign else Sign.POSITIVE
        result.append(Addend(sign, elements))
    return result