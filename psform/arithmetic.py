"""PS forms (sums of products) and the arithmetic performed on them."""

from __future__ import annotations

from dataclasses import dataclass, field

from psform.addend import (
    Addend,
    Sign,
    compare_addends,
    format_addends,
    multiply_addends,
    sum_addends,
)
from psform.multiplicand import divide_multiplicands


class PSFormDivisionError(ArithmeticError):
    """Raised when one PS form cannot be divided by another."""


@dataclass
class PSForm:
    """A polynomial in sum-of-products form: a list of addends."""

    elements: list[Addend] = field(default_factory=list)

    @property
    def size(self) -> int:
        """Number of addends in the form."""
        return len(self.elements)

    def append(self, addend: Addend) -> None:
        """Add an addend, dropping a leading constant 1 when other factors follow."""
        head = addend.elements[0] if addend.elements else None
        if addend.size > 1 and head is not None and head.is_constant and head.value == 1:
            addend = Addend(addend.sign, addend.elements[1:])
        self.elements.append(addend)

    def __str__(self) -> str:
        return format_psform(self)


def _negated(addend: Addend) -> Addend:
    sign = Sign.POSITIVE if addend.sign is Sign.NEGATIVE else Sign.NEGATIVE
    return Addend(sign, list(addend.elements))


def psform_add(a: PSForm, b: PSForm) -> PSForm:
    """Return the sum of two forms, with like terms combined."""
    return PSForm(sum_addends(a.elements, b.elements))


def psform_subtract(a: PSForm, b: PSForm) -> PSForm:
    """Return ``a - b``; ``b`` is left unchanged."""
    return psform_add(a, PSForm([_negated(addend) for addend in b.elements]))


def psform_multiply(a: PSForm, b: PSForm) -> PSForm:
    """Multiply every addend of ``a`` by each addend of ``b`` and sum the products."""
    result: list[Addend] = []
    for factor in b.elements:
        product = multiply_addends(a.elements, factor)
        result = sum_addends(result, product) if result else product
    return PSForm(result)


def psform_divide(a: PSForm, b: PSForm) -> PSForm:
    """Divide ``a`` by a single-addend form ``b``.

    Raises PSFormDivisionError when the divisor has more than one addend, is
    zero, or does not divide some addend of ``a`` exactly. Zero addends of
    ``a`` are skipped.
    """
    if b.size > 1:
        raise PSFormDivisionError("divisor must consist of a single addend")
    if not b.elements:
        raise PSFormDivisionError("division by zero")
    divisor = b.elements[0]
    if divisor.elements and divisor.elements[0].is_constant and divisor.elements[0].value == 0:
        raise PSFormDivisionError("division by zero")

    result = PSForm()
    for addend in a.elements:
        head = addend.elements[0] if addend.elements else None
        if head is not None and head.is_constant and head.value == 0:
            continue
        quotient = divide_multiplicands(addend.elements, divisor.elements)
        if quotient is None:
            raise PSFormDivisionError(f"{addend} is not divisible by {divisor}")
        sign = Sign.NEGATIVE if addend.sign is not divisor.sign else Sign.POSITIVE
        result.append(Addend(sign, quotient))
    return result


def psform_compare(a: PSForm, b: PSForm) -> bool:
    """Return True if both forms hold the same addends in any order."""
    return compare_addends(a.elements, b.elements)


def format_psform(form: PSForm | None) -> str:
    """Render a form as text; an empty or missing form renders as ``0``."""
    if form is None or form.size == 0:
        return "0"
    return format_addends(form.elements)