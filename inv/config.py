"""
Configuration values for invariant checking.

These are the strings that end up in failure messages and the switches
that decide which checks can run at all. Changing the message constants
changes the public error format, so treat them as part of the API.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional


# =============================================================================
# NAMING
# =============================================================================

# An invariant whose name starts with this marker is debug-tier. The marker
# is stripped before the name is recorded.
DEBUG_PREFIX = "_ "


# =============================================================================
# MESSAGES
# =============================================================================

TITLE = "invariant mismatch"
DEBUG_TITLE = "(debug) invariant mismatch"

# Reported when the calling frame cannot be inspected.
UNKNOWN_CALLER = "<unknown>:0"


# =============================================================================
# DEBUG BUILD
# =============================================================================

# Environment variable that turns `inv.debug` into a real check. It is read
# once, when the package is imported.
DEBUG_ENV_VAR = "INV_DEBUG"

TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})


def resolve_debug_build(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Return True if the debug entry point should evaluate invariants."""
    if environ is None:
        environ = os.environ
    return environ.get(DEBUG_ENV_VAR, "").strip().lower() in TRUTHY_VALUES
