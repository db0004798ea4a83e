"""Arithmetic primitive for JavaScript-style expressions.

Two call shapes are supported: ``calculate(op, a, b)`` for a single operation and
``calculate(expression)`` for a full expression made of integers, ``+ - * / %``,
parentheses and ``Math.floor``. Any other identifier or character is rejected
before anything is evaluated.
"""

from __future__ import annotations

import re
import ast
import math
from collections.abc import Callable

from src.errors import CalculationError

Number = int | float

_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_.]*")
_DISALLOWED_CHAR_RE = re.compile(r"[^0-9+\-*/%().,\sA-Za-z]")
_ALLOWED_IDENTIFIER = "Math.floor"


def _divide(a: Number, b: Number) -> Number:
    if b == 0:
        raise CalculationError(reason="Cannot divide by zero")
    return a / b


def _remainder(a: Number, b: Number) -> Number:
    if b == 0:
        raise CalculationError(reason="Cannot take remainder by zero")
    # JavaScript '%' keeps the sign of the dividend.
    result = math.fmod(a, b)
    if isinstance(a, int) and isinstance(b, int):
        return int(result)
    return result


_OPERATIONS: dict[str, Callable[[Number, Number], Number]] = {
    "add": lambda a, b: a + b,
    "subtract": lambda a, b: a - b,
    "multiply": lambda a, b: a * b,
    "divide": _divide,
    "modulo": _remainder,
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _divide,
    "%": _remainder,
}

_BINARY_OPS: dict[type[ast.operator], str] = {
    ast.Add: "+",
    ast.Sub: "-",
    ast.Mult: "*",
    ast.Div: "/",
    ast.Mod: "%",
}


def _is_math_floor(node: ast.expr) -> bool:
    return (
        isinstance(node, ast.Attribute)
        and node.attr == "floor"
        and isinstance(node.value, ast.Name)
        and node.value.id == "Math"
    )


class _Evaluator:
    def __init__(self, expression: str) -> None:
        self._expression = expression

    def _fail(self, reason: str) -> CalculationError:
        return CalculationError(reason=reason, expression=self._expression)

    def visit(self, node: ast.AST) -> Number:
        if isinstance(node, ast.Expression):
            return self.visit(node.body)
        if isinstance(node, ast.Constant):
            if isinstance(node.value, bool) or not isinstance(node.value, (int, float)):
                raise self._fail("Only numeric constants are allowed")
            return node.value
        if isinstance(node, ast.BinOp):
            symbol = _BINARY_OPS.get(type(node.op))
            if symbol is None:
                raise self._fail(f"Operator not allowed: {type(node.op).__name__}")
            return _OPERATIONS[symbol](self.visit(node.left), self.visit(node.right))
        if isinstance(node, ast.UnaryOp):
            value = self.visit(node.operand)
            if isinstance(node.op, ast.USub):
                return -value
            if isinstance(node.op, ast.UAdd):
                return +value
            raise self._fail(f"Unary operator not allowed: {type(node.op).__name__}")
        if isinstance(node, ast.Call):
            if not _is_math_floor(node.func) or len(node.args) != 1 or node.keywords:
                raise self._fail("Only Math.floor(x) calls are allowed")
            value = self.visit(node.args[0])
            if not math.isfinite(value):
                raise self._fail("Expression did not produce a valid number")
            return math.floor(value)
        raise self._fail(f"Expression element not allowed: {type(node).__name__}")


def calculate_operation(operation: str, a: Number, b: Number) -> Number:
    fn = _OPERATIONS.get(str(operation).strip().lower())
    if fn is None:
        raise CalculationError(reason="Invalid operation", expression=str(operation))
    try:
        value = fn(a, b)
    except OverflowError as exc:
        raise CalculationError(reason="Operands are too large", expression=str(operation)) from exc
    if isinstance(value, float) and not math.isfinite(value):
        return _check_finite(value, f"{a} {operation} {b}")
    return value


def evaluate_expression(expression: str) -> Number:
    expr = str(expression or "").strip()
    if not expr:
        raise CalculationError(reason="Expression is empty")

    identifiers = _IDENTIFIER_RE.findall(expr)
    if any(identifier != _ALLOWED_IDENTIFIER for identifier in identifiers):
        raise CalculationError(reason="Expression contains unsupported identifiers", expression=expr)
    if _DISALLOWED_CHAR_RE.search(expr):
        raise CalculationError(reason="Expression contains unsupported characters", expression=expr)

    try:
        tree = ast.parse(expr, mode="eval")
    except SyntaxError as exc:
        raise CalculationError(reason="Expression is not valid arithmetic", expression=expr) from exc
    try:
        value = _Evaluator(expr).visit(tree)
    except OverflowError as exc:
        raise CalculationError(reason="Expression overflowed", expression=expr) from exc
    return _check_finite(value, expr)


def calculate(operation_or_expression: str, a: Number | None = None, b: Number | None = None) -> Number:
    if _is_number(a) and _is_number(b):
        return calculate_operation(operation_or_expression, a, b)  # type: ignore[arg-type]
    return evaluate_expression(operation_or_expression)


def format_number(value: Number) -> str:
    """Render a result the way it is typed on the keypad (``4`` not ``4.0``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    try:
        return str(value)
    except ValueError as exc:
        raise CalculationError(reason="Result has too many digits to enter") from exc


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_finite(value: Number, expression: str) -> Number:
    if isinstance(value, float) and not math.isfinite(value):
        raise CalculationError(reason="Expression did not produce a valid number", expression=expression)
    return value


__all__ = ["calculate", "calculate_operation", "evaluate_expression", "format_number"]
