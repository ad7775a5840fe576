"""Command line entry point: read an operation and two PS forms, print the result."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

from psform.arithmetic import (
    PSFormDivisionError,
    format_psform,
    psform_add,
    psform_compare,
    psform_divide,
    psform_multiply,
    psform_subtract,
)
from psform.parser import Operation, ParseError, parse_operation, parse_psform


def run(lines: Iterable[str]) -> str:
    """Read an operation line and two form lines and return the result text.

    Raises ParseError when the operation or a form cannot be parsed.
    """
    stream = iter(lines)
    operation = parse_operation(next(stream, ""))
    a = parse_psform(next(stream, ""))
    b = parse_psform(next(stream, ""))

    if operation is Operation.ADDITION:
        return format_psform(psform_add(a, b))
    if operation is Operation.SUBTRACTION:
        return format_psform(psform_subtract(a, b))
    if operation is Operation.MULTIPLICATION:
        return format_psform(psform_multiply(a, b))
    if operation is Operation.DIVISION:
        try:
            return format_psform(psform_divide(a, b))
        except PSFormDivisionError:
            return "error"
    return "equal" if psform_compare(a, b) else "not equal"


def main(argv: list[str] | None = None) -> int:
    """Run the calculator on standard input and write the result to standard output."""
    parser = argparse.ArgumentParser(
        prog="psform",
        description=(
            "Read an operation (+, -, *, /, =) and two polynomials in "
            "sum-of-products form from standard input, one per line."
        ),
    )
    parser.parse_args(argv)
    try:
        output = run(sys.stdin)
    except ParseError as error:
        print(error)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())