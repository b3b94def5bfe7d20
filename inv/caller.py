"""Call-site attribution for invariant failures."""

from __future__ import annotations

import sys

from .config import UNKNOWN_CALLER


def caller_location(depth: int = 1) -> str:
    """
    Return `file:line` of a frame above the caller of this function.

    depth=1 is the function that called the function calling
    caller_location, which is what a public entry point wants to attribute
    failures to. Falls back to `<unknown>:0` when the stack is too shallow.
    """
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return UNKNOWN_CALLER

    return f"{frame.f_code.co_filename}:{frame.f_lineno}"
