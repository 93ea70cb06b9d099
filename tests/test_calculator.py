import io
import math

import pytest

from tinygames.calculator import (
    CalculatorError,
    apply_function,
    arithmetic,
    evaluate_expression,
    main,
)


@pytest.mark.parametrize("a,b", [(7, 2), (-7, 2), (7, -2), (-7, -2), (9, 3)])
def test_integer_division_identity(a, b):
    q = arithmetic(a, b, "/")
    r = arithmetic(a, b, "%")
    assert q * b + r == a
    assert abs(r) < abs(b)
    assert r == 0 or (r < 0) == (a < 0)


def test_division_truncates_toward_zero():
    assert arithmetic(-7, 2, "/") == -arithmetic(7, 2, "/")


def test_subtraction_antisymmetric():
    assert arithmetic(5, 12, "-") == -arithmetic(12, 5, "-")


def test_x_is_multiplication():
    assert arithmetic(6, 7, "x") == arithmetic(6, 7, "*")


@pytest.mark.parametrize("op", ["/", "%"])
def test_zero_divisor(op):
    with pytest.raises(CalculatorError, match="Invalid divisor"):
        arithmetic(4, 0, op)


def test_invalid_operator():
    with pytest.raises(CalculatorError, match="Invalid operator"):
        arithmetic(1, 2, "^")


def test_functions():
    assert apply_function("sin", 0.0) == 0.0
    assert apply_function("cos", 0.0) == 1.0
    assert apply_function("sqrt", 16.0) == 4.0
    assert math.isnan(apply_function("sqrt", -1.0))


def test_invalid_function():
    with pytest.raises(CalculatorError, match="Invalid function"):
        apply_function("tan", 1.0)


def test_evaluate_expression():
    assert evaluate_expression("10/3") == 3
    assert evaluate_expression(" 4 - -4 ") == arithmetic(4, -4, "-")


def test_evaluate_malformed():
    with pytest.raises(CalculatorError):
        evaluate_expression("abc")


def test_main_binary(capsys):
    assert main(["3", "+", "4"]) == 0
    assert capsys.readouterr().out == "7\n"


def test_main_function(capsys):
    assert main(["cos", "0"]) == 0
    assert capsys.readouterr().out == "1\n"


def test_main_zero_divisor(capsys):
    assert main(["1", "/", "0"]) == 1
    assert capsys.readouterr().out == "Invalid divisor\n"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("8 % 0\n"))
    assert main([]) == 1
    assert "Invalid divisor" in capsys.readouterr().out