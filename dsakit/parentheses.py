"""Checking that curly braces in an expression are balanced."""

from __future__ import annotations


class UnbalancedError(ValueError):
    """Raised when braces do not balance; ``position`` marks a stray ``}``."""

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


def check_braces(expression: str, capacity: int = 20) -> int:
    """Validate braces with a nesting limit; return the number of matched pairs.

    Raises OverflowError when nesting exceeds ``capacity`` and
    UnbalancedError for a stray ``}`` or an unclosed ``{``.
    """
    depth = 0
    pairs = 0
    for position, ch in enumerate(expression):
        if ch == "{":
            if depth == capacity:
                raise OverflowError("stack overflow")
            depth += 1
        elif ch == "}":
            if depth == 0:
                raise UnbalancedError(
                    f"unbalanced expression: extra '}}' at position {position}",
                    position,
                )
            depth -= 1
            pairs += 1
    if depth:
        raise UnbalancedError("expression is unbalanced")
    return pairs


def is_balanced(expression: str) -> bool:
    """Whether every ``{`` is closed and no ``}`` appears without an opener."""
    depth = 0
    valid = True
    for ch in expression:
        if ch == "{":
            depth += 1
        elif ch == "}":
            if depth == 0:
                valid = False
            else:
                depth -= 1
    return valid and depth == 0