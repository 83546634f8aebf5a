"""
Misuse errors — loud failures for programming mistakes.

The library never wraps or translates errors raised by the functions it
composes or curries. The only errors it raises itself describe misuse of
the plumbing: touching a wrapper that a composition already consumed, or
feeding a curried chain the wrong number of arguments.

Each error carries a MisuseCode so callers can branch on the kind of
misuse without string matching:

    try:
        step(1, 2)
    except ArityError as err:
        assert err.code is MisuseCode.ARITY_MISMATCH
"""

from __future__ import annotations

from enum import Enum, unique


@unique
class MisuseCode(Enum):
    """Structured codes for misuse of composition and currying."""

    CONSUMED = "CONSUMED"
    """A wrapper was invoked or composed after a composition consumed it."""

    SELF_COMPOSITION = "SELF_COMPOSITION"
    """A wrapper was composed with itself; it can only be consumed once."""

    ARITY_MISMATCH = "ARITY_MISMATCH"
    """A curried step received anything other than exactly one positional argument."""

    ARITY_UNRESOLVED = "ARITY_UNRESOLVED"
    """The arity of a function to curry cannot be determined or is invalid."""

    ARITY_LIMIT = "ARITY_LIMIT"
    """The arity of a function to curry exceeds the configured max_arity."""


class MisuseError(Exception):
    """
    Base class for every error the library raises on its own behalf.

    >>> err = MisuseError(MisuseCode.CONSUMED, "already consumed")
    >>> err.code
    <MisuseCode.CONSUMED: 'CONSUMED'>
    >>> str(err)
    'already consumed'
    """

    def __init__(self, code: MisuseCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code.value}: {self.message!r})"


class ConsumedFunctionError(MisuseError, RuntimeError):
    """Raised when a consumed ComposableFn is invoked or composed again."""

    def __init__(self, message: str, code: MisuseCode = MisuseCode.CONSUMED) -> None:
        super().__init__(code, message)


class ArityError(MisuseError, TypeError):
    """Raised when a curried chain is built or applied with the wrong arity."""

    def __init__(self, message: str, code: MisuseCode = MisuseCode.ARITY_MISMATCH) -> None:
        super().__init__(code, message)
