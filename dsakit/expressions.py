"""Operator precedence and infix-to-postfix conversion."""

from __future__ import annotations

_OPERATORS = frozenset("+-*/")


def precedence(ch: str) -> int:
    """Binding strength of an operator character; 0 for anything else."""
    if ch in ("*", "/"):
        return 3
    if ch in ("+", "-"):
        return 2
    return 0


def is_operator(ch: str) -> bool:
    """Whether ``ch`` is one of the four arithmetic operators."""
    return ch in _OPERATORS


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Every character that is not an operator is copied through unchanged.
    """
    stack: list[str] = []
    output: list[str] = []
    for ch in infix:
        if not is_operator(ch):
            output.append(ch)
            continue
        while stack and precedence(ch) <= precedence(stack[-1]):
            output.append(stack.pop())
        stack.append(ch)
    output.extend(reversed(stack))
    return "".join(output)