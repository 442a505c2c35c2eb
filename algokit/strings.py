"""Algorithms over strings."""

from __future__ import annotations

__all__ = ["is_palindrome", "is_valid_parentheses"]

_OPENER_FOR = {")": "(", "]": "[", "}": "{"}


def is_palindrome(s: str) -> bool:
    """Return True if the ASCII letters and digits of ``s`` read the same both ways, ignoring case."""
    cleaned = [c.lower() for c in s if c.isascii() and c.isalnum()]
    return cleaned == cleaned[::-1]


def is_valid_parentheses(s: str) -> bool:
    """Return True if every closing bracket matches the most recent unclosed opener.

    Any character that is not a closing bracket is treated as an opener, so
    the string is valid only if nothing is left open at the end.
    """
    stack: list[str] = []
    for c in s:
        opener = _OPENER_FOR.get(c)
        if opener is None:
            stack.append(c)
        elif stack and stack[-1] == opener:
            stack.pop()
        else:
            return False
    return not stack