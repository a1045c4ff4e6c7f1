"""Evaluation of integer expressions with + - * / and spaces."""

from __future__ import annotations

_OPERATORS = "+-*/"
_DIGITS = "0123456789"


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def calculate(expression: str) -> int:
    """Evaluate non-negative integers joined by + - * /, honouring precedence.

    Division truncates toward zero. An empty expression evaluates to 0.
    Raises ValueError for other characters or a leading * or /.
    """
    stack: list[int] = []
    number = 0
    op = "+"
    last = len(expression) - 1
    for position, char in enumerate(expression):
        if char in _DIGITS:
            number = number * 10 + int(char)
        elif char not in _OPERATORS and char != " ":
            raise ValueError(f"unexpected character {char!r} in expression")
        if char in _OPERATORS or position == last:
            if op == "+":
                stack.append(number)
            elif op == "-":
                stack.append(-number)
            elif op in "*/":
                if not stack:
                    raise ValueError(f"operator {op!r} has no left operand")
                left = stack.pop()
                stack.append(left * number if op == "*" else _truncating_div(left, number))
            op = char
            number = 0
    return sum(stack)