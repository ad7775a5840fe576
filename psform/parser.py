"""Parsing of operations and PS forms from text lines."""

from __future__ import annotations

import string
from enum import Enum

from psform.addend import Addend, Sign
from psform.arithmetic import PSForm
from psform.multiplicand import constant, variable

_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)


class ParseError(ValueError):
    """Raised when an input line cannot be parsed."""


class Operation(Enum):
    """Operations that can be performed on two PS forms."""

    ADDITION = "+"
    SUBTRACTION = "-"
    MULTIPLICATION = "*"
    DIVISION = "/"
    COMPARISON = "="


def parse_operation(line: str) -> Operation:
    """Return the operation named by the first character of ``line``."""
    if not line:
        raise ParseError("The entered operation is not supported")
    try:
        return Operation(line[0])
    except ValueError:
        raise ParseError("The entered operation is not supported") from None


class _FormBuilder:
    """Accumulates addends and number digits while scanning a line."""

    def __init__(self) -> None:
        self.form = PSForm()
        self.addend = Addend()
        self.digits = ""

    def flush_number(self) -> None:
        if self.digits:
            self.addend.elements.append(constant(int(self.digits)))
            self.digits = ""

    def start_addend(self, sign: Sign) -> None:
        if not self.addend.elements:
            raise ParseError("Wrong PS form")
        self.form.append(self.addend)
        self.addend = Addend(sign)

    def finish(self) -> PSForm:
        self.flush_number()
        if self.addend.elements:
            self.form.append(self.addend)
        return self.form


def parse_psform(line: str) -> PSForm:
    """Parse a line such as ``2*x*y - z + 3`` into a PS form.

    A number ends at a space, newline, ``*``, ``+``, ``-`` or the end of the
    line; other characters met inside a number are ignored. Raises ParseError
    for an empty line or an empty term.
    """
    if not line:
        raise ParseError("Wrong PS form")

    builder = _FormBuilder()
    for char in line:
        if builder.digits:
            if char in _DIGITS:
                builder.digits += char
            elif char in " \n*":
                builder.flush_number()
            elif char == "+":
                builder.flush_number()
                builder.start_addend(Sign.POSITIVE)
            elif char == "-":
                builder.flush_number()
                builder.start_addend(Sign.NEGATIVE)
            continue

        if char in _DIGITS:
            builder.digits = char
        elif char in _LETTERS:
            builder.addend.elements.append(variable(char))
        elif char == "+":
            builder.start_addend(Sign.POSITIVE)
        elif char == "-":
            if not builder.form.elements and not builder.addend.elements:
                builder.addend.sign = Sign.NEGATIVE
            else:
                builder.start_addend(Sign.NEGATIVE)
    return builder.finish()