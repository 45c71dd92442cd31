"""Problems solved with a stack: spans, bracket sequences, postfix, reversal."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def stock_span(prices: Sequence[int]) -> list[int]:
    """Return each day's span.

    The span counts today and the days right before it whose price was
    strictly lower than today's, stopping at the first one that was not.
    """
    stack: list[tuple[int, int]] = []
    spans = []
    for price in prices:
        span = 1
        while stack and stack[-1][0] < price:
            span += stack.pop()[1]
        stack.append((price, span))
        spans.append(span)
    return spans


def bracket_sequences(n: int) -> list[str]:
    """Return ``n`` distinct balanced bracket sequences of length ``2 * n``.

    The i-th sequence (1-based) is ``n - i`` nested pairs followed by ``i``
    nested pairs.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    sequences = []
    for i in range(1, n + 1):
        stack: list[str] = []
        stack.extend(")" * i)
        stack.extend("(" * i)
        stack.extend(")" * (n - i))
        stack.extend("(" * (n - i))
        sequences.append("".join(reversed(stack)))
    return sequences


def precedence(op: str) -> int:
    """Return the binding strength of an operator, or -1 for anything else."""
    if op == "^":
        return 3
    if op in "*/" and op:
        return 2
    if op in "+-" and op:
        return 1
    return -1


def _is_operand(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Operators of equal precedence, ``^`` included, group to the left.
    """
    output: list[str] = []
    stack: list[str] = []
    for ch in expression:
        if _is_operand(ch):
            output.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
        else:
            while stack and precedence(ch) <= precedence(stack[-1]):
                output.append(stack.pop())
            stack.append(ch)
    output.extend(reversed(stack))
    return "".join(output)


def _insert_bottom(stack: list[Any], value: Any) -> None:
    if not stack:
        stack.append(value)
        return
    top = stack.pop()
    _insert_bottom(stack, value)
    stack.append(top)


def _reverse_in_place(stack: list[Any]) -> None:
    if not stack:
        return
    top = stack.pop()
    _reverse_in_place(stack)
    _insert_bottom(stack, top)


def reverse_stack(items: Iterable[Any]) -> list[Any]:
    """Return the stack (bottom first) reversed using only push and pop."""
    stack = list(items)
    _reverse_in_place(stack)
    return stack