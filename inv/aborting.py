"""
Entry points that raise instead of returning.

`require` is for invariants the caller cannot recover from: it evaluates
exactly like `check` and raises the resulting InvariantError.

`debug` does the same, but only in debug builds. Whether this is a debug
build is decided once at import from the INV_DEBUG environment variable.
Outside a debug build `debug` is a no-op that never touches its arguments,
so predicate callables are not invoked at all.

The debug build flag and the debug-tier switch in `inv.mode` are separate
controls. The flag decides whether `debug` checks can run at all; the
switch decides whether "_ "-prefixed invariants are filtered out of any
check that does run.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from .caller import caller_location
from .engine import evaluate
from .config import resolve_debug_build
from .mode import DebugMode


def require(
    group: str,
    *pairs: Any,
    mode: Optional[DebugMode] = None,
    caller: Optional[str] = None,
) -> None:
    """
    Check a set of invariants and raise if any of them fail.

    Raises:
        InvariantError: If one or more invariants do not hold
        PairingError: If the invariants are not passed as pairs
        InvalidPredicateError: If a predicate has an unsupported type
    """
    if caller is None:
        caller = caller_location(1)
    err = evaluate(group, pairs, mode, caller)
    if err is not None:
        raise err


def make_debug(active: bool) -> Callable[..., None]:
    """Build the `debug` entry point for a debug or a production build."""
    if not active:
        def debug(
            group: str,
            *pairs: Any,
            mode: Optional[DebugMode] = None,
            caller: Optional[str] = None,
        ) -> None:
            """Check invariants in debug builds. Disabled in this build."""

        return debug

    def debug(
        group: str,
        *pairs: Any,
        mode: Optional[DebugMode] = None,
        caller: Optional[str] = None,
    ) -> None:
        """
        Check a set of invariants and raise if any of them fail.

        Only evaluated in debug builds (INV_DEBUG set at import).

        Raises:
            InvariantError: If one or more invariants do not hold
        """
        if caller is None:
            caller = caller_location(1)
        err = evaluate(group, pairs, mode, caller)
        if err is not None:
            raise err

    return debug


DEBUG_BUILD = resolve_debug_build()

debug = make_debug(DEBUG_BUILD)
