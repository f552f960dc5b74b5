"""Infix to postfix conversion and postfix evaluation of single-character tokens."""

from __future__ import annotations

from collections.abc import Callable


class ExpressionError(ValueError):
    """Raised for malformed expressions."""


_PRIORITY = {"*": 1, "/": 1, "%": 1, "+": 0, "-": 0}


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of letters, digits and ``+-*/%()`` to postfix."""
    stack: list[str] = []
    output: list[str] = []
    for char in expression:
        if char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ExpressionError("incorrect expression: unbalanced ')'")
            stack.pop()
        elif char.isascii() and char.isalnum():
            output.append(char)
        elif char in _PRIORITY:
            while stack and stack[-1] != "(" and _PRIORITY[stack[-1]] >= _PRIORITY[char]:
                output.append(stack.pop())
            stack.append(char)
        else:
            raise ExpressionError(f"incorrect element in expression: {char!r}")
    while stack:
        operator = stack.pop()
        if operator == "(":
            raise ExpressionError("incorrect expression: unbalanced '('")
        output.append(operator)
    return "".join(output)


def _truncated_division(left: int, right: int) -> int:
    if right == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _truncated_remainder(left: int, right: int) -> int:
    return left - right * _truncated_division(left, right)


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncated_division,
    "%": _truncated_remainder,
}


def evaluate_postfix(expression: str) -> float:
    """Evaluate a postfix expression of single digits using integer arithmetic.

    Division and remainder truncate toward zero.
    """
    stack: list[int] = []
    for char in expression:
        if char.isascii() and char.isdigit():
            stack.append(int(char))
            continue
        operation = _OPERATIONS.get(char)
        if operation is None:
            raise ExpressionError(f"unknown operator {char!r}")
        if len(stack) < 2:
            raise ExpressionError("stack underflow: missing operand")
        right = stack.pop()
        left = stack.pop()
        stack.append(operation(left, right))
    if len(stack) != 1:
        raise ExpressionError("expression does not reduce to a single value")
    return float(stack[0])