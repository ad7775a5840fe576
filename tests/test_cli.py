import io

import pytest

from psform.cli import main, run
from psform.parser import ParseError


def test_comparison_equal():
    assert run(["=\n", "x + y\n", "y + x\n"]) == "equal"


def test_comparison_not_equal():
    assert run(["=\n", "x + y\n", "x - y\n"]) == "not equal"


def test_addition():
    assert run(["+\n", "x\n", "y\n"]) == "x + y"


def test_subtraction_to_zero():
    assert run(["-\n", "2*x*y + z\n", "2*x*y + z\n"]) == "0"


def test_division_error():
    assert run(["/\n", "x + y\n", "x + z\n"]) == "error"


def test_division_by_zero_is_error():
    assert run(["/\n", "x\n", "0\n"]) == "error"


def test_multiplication_by_one():
    assert run(["*\n", "3*x - y\n", "1\n"]) == "3*x - y"


def test_unsupported_operation():
    with pytest.raises(ParseError, match="The entered operation is not supported"):
        run(["?\n", "x\n", "y\n"])


def test_missing_form_line():
    with pytest.raises(ParseError, match="Wrong PS form"):
        run(["+\n", "x\n"])


def test_main_prints_result(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("=\nx*y\ny*x\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "equal"


def test_main_reports_unsupported_operation(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("%\nx\ny\n"))
    assert main([]) == 1
    assert capsys.readouterr().out == "The entered operation is not supported\n"


def test_main_reports_wrong_form(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("+\nx + + y\ny\n"))
    assert main([]) == 1
    assert capsys.readouterr().out == "Wrong PS form\n"