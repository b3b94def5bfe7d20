"""
Invariant evaluation.

Invariants are passed as a flat sequence alternating a name and a
predicate:

    err = check("io", "non-empty", len(buf) > 0, "open", lambda: f.closed is False)

A predicate may be:
    None        — nothing to check, always satisfied
    bool        — satisfied if True
    exception   — never satisfied; the exception becomes the cause
    callable    — called with no arguments; its result is read as one of
                  None, bool or exception as above

Every pair is evaluated, even after an earlier one fails, so a single call
reports all broken invariants at once.

Names starting with "_ " are debug-tier. The marker is stripped from the
reported name, and while debug mode is disabled those pairs are skipped
without evaluating their predicate.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Optional

from . import mode as _mode
from .caller import caller_location
from .config import DEBUG_PREFIX
from .errors import CheckError, InvalidPredicateError, InvariantError, PairingError
from .mode import DebugMode

logger = logging.getLogger(__name__)


def _outcome(invariant: str, predicate: Any) -> tuple[bool, Optional[BaseException]]:
    """Return (satisfied, cause) for a single predicate."""
    if predicate is None:
        return True, None
    if isinstance(predicate, bool):
        return predicate, None
    if isinstance(predicate, BaseException):
        return False, predicate

    # Classes are callable but constructing one is never a check.
    if callable(predicate) and not isinstance(predicate, type):
        result = predicate()
        if result is None:
            return True, None
        if isinstance(result, bool):
            return result, None
        if isinstance(result, BaseException):
            return False, result
        if inspect.iscoroutine(result):
            result.close()
        raise InvalidPredicateError(invariant, result)

    raise InvalidPredicateError(invariant, predicate)


def evaluate(
    group: str,
    pairs: tuple[Any, ...],
    mode: Optional[DebugMode],
    caller: str,
) -> Optional[InvariantError]:
    """
    Evaluate name/predicate pairs and collect the failures.

    `caller` is attached to every failure. Entry points capture it before
    calling in so that it points at their caller, not at this module.

    Raises:
        PairingError: If pairs has odd length or a name is not a non-empty str
        InvalidPredicateError: If a predicate has an unsupported type
    """
    if len(pairs) % 2 != 0:
        raise PairingError("invariants must be passed as pairs")

    if mode is None:
        mode = _mode.DEFAULT_MODE

    failures: list[CheckError] = []

    for i in range(0, len(pairs), 2):
        name, predicate = pairs[i], pairs[i + 1]

        if not isinstance(name, str):
            raise PairingError(
                f"invariant name must be a string, got {type(name).__name__} at position {i}"
            )

        is_debug = name.startswith(DEBUG_PREFIX)
        if is_debug:
            name = name[len(DEBUG_PREFIX):]
        if not name:
            raise PairingError(f"invariant name is empty at position {i}")

        if is_debug and not mode.enabled:
            logger.debug("skipping debug invariant %s: %s", group, name)
            continue

        satisfied, cause = _outcome(name, predicate)
        if satisfied:
            continue

        failure = CheckError(
            invariant=name,
            group=group,
            caller=caller,
            cause=cause,
            debug=is_debug,
        )
        logger.debug("%s", failure)
        failures.append(failure)

    if failures:
        return InvariantError(failures)

    return None


def check(
    group: str,
    *pairs: Any,
    mode: Optional[DebugMode] = None,
    caller: Optional[str] = None,
) -> Optional[InvariantError]:
    """
    Check a set of invariants and return an error if any of them fail.

    Since several invariants are checked together, `group` labels them in
    the resulting messages. Failures are reported as a single InvariantError
    holding one CheckError per broken invariant, in the order given.

    Args:
        group: Label relating these invariants to each other
        *pairs: Alternating invariant names and predicates
        mode: Debug switch to consult; defaults to the process-wide one
        caller: Label to report instead of the calling file and line

    Returns:
        None if every invariant holds, otherwise an InvariantError

    Raises:
        PairingError: If the invariants are not passed as pairs
        InvalidPredicateError: If a predicate has an unsupported type
    """
    if caller is None:
        caller = caller_location(1)
    return evaluate(group, pairs, mode, caller)
