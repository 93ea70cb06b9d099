"""A small command-line calculator for binary operators and a few functions."""

from __future__ import annotations

import math
import re
import sys
from collections.abc import Callable, Sequence

Number = int | float

_NUMBER_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_EXPRESSION = re.compile(r"^\s*([+-]?\d+)\s*(\S)\s*([+-]?\d+)\s*$")

_FUNCTIONS: dict[str, Callable[[float], float]] = {
    "sin": math.sin,
    "cos": math.cos,
    "sqrt": lambda x: math.sqrt(x) if x >= 0 else math.nan,
}


class CalculatorError(ValueError):
    """Raised for an unknown operator or function, or a zero divisor."""


def _truncating_divmod(num1: int, num2: int) -> tuple[int, int]:
    quotient = abs(num1) // abs(num2)
    if (num1 < 0) != (num2 < 0):
        quotient = -quotient
    return quotient, num1 - num2 * quotient


def arithmetic(num1: Number, num2: Number, op: str) -> Number:
    """Apply the binary operator ``op`` to two numbers.

    Integer division and remainder truncate toward zero. ``x`` is accepted
    as a synonym for ``*``.
    """
    if op == "+":
        return num1 + num2
    if op == "-":
        return num1 - num2
    if op in ("*", "x"):
        return num1 * num2
    if op in ("/", "%"):
        if num2 == 0:
            raise CalculatorError("Invalid divisor")
        if isinstance(num1, int) and isinstance(num2, int):
            quotient, remainder = _truncating_divmod(num1, num2)
            return quotient if op == "/" else remainder
        return num1 / num2 if op == "/" else math.fmod(num1, num2)
    raise CalculatorError("Invalid operator")


def apply_function(name: str, num: float) -> float:
    """Apply one of ``sin``, ``cos`` or ``sqrt`` to ``num``."""
    try:
        func = _FUNCTIONS[name]
    except KeyError:
        raise CalculatorError("Invalid function") from None
    return func(num)


def evaluate_expression(text: str) -> int:
    """Evaluate an integer expression of the form ``<int> <op> <int>``."""
    match = _EXPRESSION.match(text)
    if match is None:
        raise CalculatorError(f"Malformed expression: {text!r}")
    left, op, right = match.groups()
    return arithmetic(int(left), int(right), op)


def _atof(text: str) -> float:
    match = _NUMBER_PREFIX.match(text)
    return float(match.group()) if match else 0.0


def _format(value: Number) -> str:
    if isinstance(value, int):
        return str(value)
    return f"{value:g}"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the calculator: ``a op b``, ``func x``, one expression, or stdin."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if len(args) == 3:
            result: Number = arithmetic(_atof(args[0]), _atof(args[2]), args[1][:1])
        elif len(args) == 2:
            result = apply_function(args[0], _atof(args[1]))
        elif len(args) == 1:
            result = evaluate_expression(args[0])
        else:
            result = evaluate_expression(sys.stdin.readline())
    except CalculatorError as exc:
        print(exc)
        return 1
    print(_format(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())