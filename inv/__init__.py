# inv — Invariant checking
# Check, require and debug-only assertions over named conditions

"""
Check batches of named invariants and get back every broken one at once.

    from inv import check, require, debug

    err = check("io", "non-empty", len(buf) > 0, "flushed", writer.flush)
    require("config", "has-root", cfg.root is not None)
    debug("cache", "_ consistent", cache.verify)
"""

from .aborting import DEBUG_BUILD, debug, make_debug, require
from .engine import check
from .errors import (
    CheckError,
    InvalidPredicateError,
    InvariantError,
    PairingError,
    find_cause,
    has_cause,
    iter_causes,
)
from .mode import DEFAULT_MODE, DebugMode, debug_enabled, disable_debug

__all__ = [
    "CheckError",
    "DEBUG_BUILD",
    "DEFAULT_MODE",
    "DebugMode",
    "InvalidPredicateError",
    "InvariantError",
    "PairingError",
    "check",
    "debug",
    "debug_enabled",
    "disable_debug",
    "find_cause",
    "has_cause",
    "iter_causes",
    "make_debug",
    "require",
]
