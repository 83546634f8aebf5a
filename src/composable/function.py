"""
ComposableFn — a unary transformation that can be chained into pipelines.

A ComposableFn[T, U] owns exactly one transformation T → U. Composing two
wrappers consumes both and yields a new wrapper; the left operand runs
first and its output feeds the right operand:

    ┌──────────┐        ┌──────────┐        ┌──────────┐
    │ first_   │  str   │ parse_   │  int?  │ default_ │
    │ word     │───────→│ int      │───────→│ zero     │──→ int
    └──────────┘        └──────────┘        └──────────┘

    number = wrap(first_word) >> wrap(parse_int) >> wrap(default_zero)
    number("100 apples")  # → 100

Composition is lazy: nothing runs until the composed wrapper is invoked.
Internally a composed wrapper holds one flat tuple of stages, so
(f >> g) >> h and f >> (g >> h) run exactly the same stage sequence.

Ownership:
  - Composing moves the transformations out of both operands. A consumed
    wrapper raises ConsumedFunctionError when invoked or composed again.
  - Invoking never changes the wrapper; it may be called any number of times.
  - Exceptions raised by a stage propagate unchanged. Later stages don't run.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from composable.errors import ConsumedFunctionError, MisuseCode
from composable.log import get_logger

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

type _Stage = Callable[[Any], Any]

_TRACE_LEVELS = frozenset({logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL})


@dataclass(frozen=True, slots=True)
class _Chain:
    """Flat, ordered sequence of stages run left to right."""

    stages: tuple[_Stage, ...]

    def __call__(self, value: Any) -> Any:
        for stage in self.stages:
            value = stage(value)
        return value

    def __repr__(self) -> str:
        return " >> ".join(_describe(stage) for stage in self.stages)


@dataclass(frozen=True, slots=True)
class _Traced:
    """Stage that logs its start and completion around an inner transformation."""

    name: str
    transform: _Stage
    level: int

    def __call__(self, value: Any) -> Any:
        log = get_logger("composable.trace")
        log.log(self.level, "composable.stage_started", stage=self.name)
        start = time.monotonic()
        result = self.transform(value)
        log.log(
            self.level,
            "composable.stage_completed",
            stage=self.name,
            elapsed_ms=round((time.monotonic() - start) * 1000, 3),
        )
        return result

    def __repr__(self) -> str:
        return f"traced({self.name})"


def _describe(transform: Any) -> str:
    if isinstance(transform, (_Chain, _Traced)):
        return repr(transform)
    return getattr(transform, "__qualname__", None) or repr(transform)


def _stages_of(transform: _Stage) -> tuple[_Stage, ...]:
    if isinstance(transform, _Chain):
        return transform.stages
    return (transform,)


class ComposableFn(Generic[T, U]):
    """
    Single-owner wrapper around a unary transformation.

    Three equivalent ways to compose:

        compose(parse, default_zero)
        parse.then(default_zero)
        parse >> default_zero

    Usage:
        >>> inc = wrap(lambda x: x + 1)
        >>> double = wrap(lambda x: x * 2)
        >>> (inc >> double)(5)
        12
    """

    __slots__ = ("_transform",)

    def __init__(self, transform: Callable[[T], U]) -> None:
        self._transform: Callable[[T], U] | None = transform

    # ──────────────────────── Invocation ────────────────────────

    def __call__(self, value: T) -> U:
        return self._held()(value)

    def invoke(self, value: T) -> U:
        """Apply the held transformation to `value` and return its result."""
        return self._held()(value)

    # ──────────────────────── Composition ────────────────────────

    def then(self, after: ComposableFn[U, V] | Callable[[U], V]) -> ComposableFn[T, V]:
        """
        Compose with `after`, consuming both wrappers.

            wrap(str.strip).then(int)  # strip first, then int
        """
        return compose(self, after)

    def __rshift__(self, other: Any) -> Any:
        if isinstance(other, ComposableFn) or callable(other):
            return compose(self, other)
        return NotImplemented

    def __rrshift__(self, other: Any) -> Any:
        # Plain callable on the left: other >> self
        if callable(other):
            return compose(other, self)
        return NotImplemented

    # ──────────────────────── Tracing ────────────────────────

    def traced(self, name: str | None = None, level: int = logging.DEBUG) -> ComposableFn[T, U]:
        """
        Consume this wrapper and return one that logs each invocation.

        Logs composable.stage_started before and composable.stage_completed
        (with elapsed_ms) after the transformation runs. If it raises, the
        exception propagates and no completion event is logged.

        `level` must be one of the standard logging levels; anything else
        raises ValueError and leaves this wrapper unconsumed.

            parse = wrap(int).traced("parse")
        """
        if level not in _TRACE_LEVELS:
            raise ValueError(
                f"traced() level must be DEBUG, INFO, WARNING, ERROR or CRITICAL, got {level!r}"
            )
        transform = self._take()
        return ComposableFn(_Traced(name or _describe(transform), transform, level))

    # ──────────────────────── Ownership ────────────────────────

    @property
    def consumed(self) -> bool:
        """True once a composition has moved the transformation out."""
        return self._transform is None

    def _held(self) -> Callable[[T], U]:
        transform = self._transform
        if transform is None:
            raise ConsumedFunctionError(
                "ComposableFn was consumed by a composition and can no longer be used"
            )
        return transform

    def _take(self) -> Callable[[T], U]:
        transform = self._held()
        self._transform = None
        return transform

    def __repr__(self) -> str:
        if self._transform is None:
            return "ComposableFn(<consumed>)"
        return f"ComposableFn({_describe(self._transform)})"


def wrap(transform: Callable[[T], U]) -> ComposableFn[T, U]:
    """
    Wrap a unary transformation so it can be composed.

    Works as a decorator too:

        @wrap
        def first_word(text: str) -> str:
            return text.split(maxsplit=1)[0] if text.strip() else ""
    """
    return ComposableFn(transform)


def _coerce(fn: ComposableFn[T, U] | Callable[[T], U]) -> ComposableFn[T, U]:
    if isinstance(fn, ComposableFn):
        return fn
    return ComposableFn(fn)


def compose(
    first: ComposableFn[T, U] | Callable[[T], U],
    second: ComposableFn[U, V] | Callable[[U], V],
) -> ComposableFn[T, V]:
    """
    Compose two wrappers into one that runs `first`, then `second`.

    Both wrappers are consumed. Plain callables are wrapped first. Neither
    operand is consumed if the composition is rejected.

        compose(wrap(parse_int), wrap(default_zero))("10")  # → 10
    """
    f, g = _coerce(first), _coerce(second)
    if f is g:
        raise ConsumedFunctionError(
            "Cannot compose a ComposableFn with itself; wrap the transformation twice",
            MisuseCode.SELF_COMPOSITION,
        )
    # Validate both before moving either
    f._held()
    g._held()
    return ComposableFn(_Chain(_stages_of(f._take()) + _stages_of(g._take())))


def pipeline(*transforms: ComposableFn[Any, Any] | Callable[[Any], Any]) -> ComposableFn[Any, Any]:
    """
    Compose any number of transformations left to right.

    With no transformations the result is the identity.

        pipeline(first_word, parse_int, default_zero)("7 days")  # → 7
    """
    if not transforms:
        return ComposableFn(_Chain(()))
    result = _coerce(transforms[0])
    for transform in transforms[1:]:
        result = compose(result, transform)
    return result
