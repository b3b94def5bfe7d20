"""
Error types for invariant checking.

Two tiers of failure exist:

    Invariant failures  — a named condition did not hold. Each one becomes a
                          CheckError and all of them from one call are
                          bundled into a single InvariantError.
    Structural errors   — the call itself was malformed (PairingError) or a
                          predicate had an unsupported shape
                          (InvalidPredicateError). These are programmer
                          errors and are raised immediately, never bundled.

An InvariantError is an ExceptionGroup, so `except*` and `split()` work on
it. Causes attached to individual failures stay reachable through the
group with `iter_causes`, `has_cause` and `find_cause`.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional, Union

from .config import DEBUG_TITLE, TITLE


# =============================================================================
# STRUCTURAL ERRORS
# =============================================================================

class PairingError(ValueError):
    """Raised when invariants are not passed as (name, predicate) pairs."""
    pass


class InvalidPredicateError(TypeError):
    """Raised when a predicate is not a bool, exception, None or callable."""

    def __init__(self, invariant: str, value: Any):
        self.invariant = invariant
        self.value = value
        super().__init__(
            f"invalid value type for invariant: {invariant}: {type(value).__name__}"
        )

    def __reduce__(self):
        return (InvalidPredicateError, (self.invariant, self.value))


# =============================================================================
# FAILURE RECORD
# =============================================================================

class CheckError(Exception):
    """
    A single invariant that did not hold.

    If the invariant failed because of an exception value, that exception is
    kept as `cause` and installed as `__cause__` so tracebacks show it.
    Records are read-only once built.
    """

    def __init__(
        self,
        invariant: str,
        group: str,
        caller: str,
        cause: Optional[BaseException] = None,
        debug: bool = False,
    ):
        if not invariant:
            raise PairingError(f"invariant name is required: group {group}")

        self._invariant = invariant
        self._group = group
        self._caller = caller
        self._cause = cause
        self._debug = debug
        super().__init__(self._format())
        self.__cause__ = cause

    @property
    def invariant(self) -> str:
        """Name of the invariant, without the debug marker."""
        return self._invariant

    @property
    def group(self) -> str:
        return self._group

    @property
    def caller(self) -> str:
        """`file:line` of the code that requested the check."""
        return self._caller

    @property
    def cause(self) -> Optional[BaseException]:
        return self._cause

    @property
    def debug(self) -> bool:
        return self._debug

    @property
    def title(self) -> str:
        return DEBUG_TITLE if self._debug else TITLE

    def unwrap(self) -> Optional[BaseException]:
        """Return the underlying error that made the invariant fail."""
        return self._cause

    def __reduce__(self):
        return (
            CheckError,
            (self._invariant, self._group, self._caller, self._cause, self._debug),
        )

    def _format(self) -> str:
        msg = f"{self._caller}: {self.title}: {self._group}: {self._invariant}"
        if self._cause is not None:
            msg += f": {self._cause}"
        return msg

    def __str__(self) -> str:
        return self._format()


# =============================================================================
# AGGREGATE ERROR
# =============================================================================

class InvariantError(ExceptionGroup):
    """
    All invariant failures from one check, in the order they were checked.

    An InvariantError always holds at least one CheckError. When nothing
    fails, `check` returns None rather than an empty group.

    str() of a single failure is exactly that failure's message. Several
    failures are joined with newlines.
    """

    def __new__(cls, failures: Iterable[CheckError]):
        failures = tuple(failures)
        if not failures:
            raise ValueError("InvariantError requires at least one failure")
        return super().__new__(cls, TITLE, failures)

    def __init__(self, failures: Iterable[CheckError]):
        super().__init__(TITLE, self.exceptions)

    @property
    def failures(self) -> tuple[CheckError, ...]:
        return self.exceptions

    @property
    def causes(self) -> list[BaseException]:
        """Underlying errors of the failures that have one."""
        return [f.cause for f in self.failures if f.cause is not None]

    def unwrap(self) -> list[CheckError]:
        return list(self.failures)

    def derive(self, excs):
        return InvariantError(excs)

    def __reduce__(self):
        return (InvariantError, (self.failures,))

    def __str__(self) -> str:
        if len(self.failures) == 1:
            return str(self.failures[0])
        return "\n".join(str(f) for f in self.failures)


# =============================================================================
# CAUSE INSPECTION
# =============================================================================

def iter_causes(error: BaseException) -> Iterator[BaseException]:
    """
    Walk an error and everything it wraps, depth-first.

    Yields `error` itself, then members of exception groups and `__cause__`
    links. Each exception is yielded once even if reachable twice.
    """
    seen: set[int] = set()

    def walk(exc: Optional[BaseException]) -> Iterator[BaseException]:
        if exc is None or id(exc) in seen:
            return
        seen.add(id(exc))
        yield exc
        if isinstance(exc, BaseExceptionGroup):
            for member in exc.exceptions:
                yield from walk(member)
        yield from walk(exc.__cause__)

    yield from walk(error)


def has_cause(
    error: BaseException,
    target: Union[BaseException, type[BaseException]],
) -> bool:
    """
    Report whether `target` is reachable from `error`.

    A class matches any instance of it; an instance matches only itself.
    """
    if isinstance(target, type):
        return any(isinstance(exc, target) for exc in iter_causes(error))
    return any(exc is target for exc in iter_causes(error))


def find_cause(error: BaseException, cls: type[BaseException]) -> Optional[BaseException]:
    """Return the first exception of type `cls` reachable from `error`."""
    for exc in iter_causes(error):
        if isinstance(exc, cls):
            return exc
    return None
