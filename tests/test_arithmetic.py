import pytest

from psform.addend import Addend, Sign
from psform.arithmetic import (
    PSForm,
    PSFormDivisionError,
    format_psform,
    psform_add,
    psform_compare,
    psform_divide,
    psform_multiply,
    psform_subtract,
)
from psform.multiplicand import constant, variable
from psform.parser import parse_psform


def form(text):
    return parse_psform(text + "\n")


def test_empty_form_formats_as_zero():
    assert format_psform(PSForm()) == "0"
    assert format_psform(None) == "0"


def test_append_drops_leading_one():
    result = PSForm()
    result.append(Addend(elements=[constant(1), variable("x")]))
    assert result.elements[0].elements == [variable("x")]


def test_append_keeps_lone_one():
    result = PSForm()
    result.append(Addend(elements=[constant(1)]))
    assert result.elements[0].elements == [constant(1)]
    assert result.size == 1


def test_add_is_commutative():
    a, b = form("2*x*y - z"), form("x*y + 3*w")
    assert psform_compare(psform_add(a, b), psform_add(b, a))


def test_subtract_self_is_zero():
    a = form("2*x*y - z + 5")
    assert format_psform(psform_subtract(a, a)) == "0"


def test_subtract_undoes_add_of_distinct_terms():
    a, b = form("2*x"), form("3*y")
    assert psform_compare(psform_subtract(psform_add(a, b), b), a)


def test_subtract_leaves_operand_unchanged():
    a, b = form("2*x"), form("3*y")
    psform_subtract(a, b)
    assert format_psform(b) == "3*y"


def test_multiply_by_one_is_identity():
    a = form("2*x + y")
    assert psform_compare(psform_multiply(a, form("1")), a)


def test_multiply_then_divide_round_trip():
    a, z = form("x + y"), form("z")
    assert psform_compare(psform_divide(psform_multiply(a, z), z), a)


def test_multiply_difference_of_squares():
    product = psform_multiply(form("x + y"), form("x - y"))
    assert psform_compare(product, form("x*x - y*y"))


def test_multiply_is_commutative_under_compare():
    a, b = form("x + 2*y"), form("3*z - x")
    assert psform_compare(psform_multiply(a, b), psform_multiply(b, a))


def test_divide_skips_zero_addends():
    assert format_psform(psform_divide(form("0 + 4*x"), form("2"))) == "2*x"


def test_divide_sign_follows_operands():
    result = psform_divide(form("x*y"), form("-y"))
    assert result.elements[0].sign is Sign.NEGATIVE
    assert result.elements[0].elements == [variable("x")]


@pytest.mark.parametrize(
    "dividend, divisor",
    [
        ("x", "x + y"),
        ("x", "0"),
        ("3*x", "2"),
        ("x", "y"),
    ],
)
def test_divide_errors(dividend, divisor):
    with pytest.raises(PSFormDivisionError):
        psform_divide(form(dividend), form(divisor))


def test_divide_by_empty_form():
    with pytest.raises(PSFormDivisionError):
        psform_divide(form("x"), PSForm())


def test_compare_ignores_order():
    assert psform_compare(form("x*y + 2*z"), form("2*z + y*x"))


def test_compare_detects_differences():
    assert not psform_compare(form("x + y"), form("x - y"))
    assert not psform_compare(form("x + y"), form("x"))