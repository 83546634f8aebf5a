"""
Currying — turn an N-ary function into a chain of N unary steps.

    add = curry(lambda a, b: a + b)
    add_10 = add(10)      # Curried step awaiting one more argument
    add_10(4)             # → 14
    add_10(5)             # → 15, add_10 is reusable

The chain is a state machine Needs(N) → Needs(N-1) → … → result. Every
step is an immutable snapshot of the arguments supplied so far; applying an
argument builds a new snapshot and never touches the old one, so partial
applications can be shared and reused freely.

Arity is fixed when the chain is built, either from the function's
signature (required positional parameters) or from an explicit `arity=`.
Each step takes exactly one positional argument. Anything else raises
ArityError instead of silently truncating or padding the argument list.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Callable, Generic, TypeVar, overload

from composable.config import get_settings
from composable.errors import ArityError, MisuseCode

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
R = TypeVar("R")

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


@dataclass(frozen=True, slots=True)
class Curried(Generic[R]):
    """
    One step of a curried chain.

    Holds the original function, its fixed arity and the arguments applied
    so far. Calling a step with the last missing argument runs the function;
    otherwise it returns the next step.
    """

    function: Callable[..., R]
    arity: int
    args: tuple[Any, ...] = field(default=())

    @property
    def remaining(self) -> int:
        """Number of arguments still needed before the function runs."""
        return self.arity - len(self.args)

    @property
    def name(self) -> str:
        """Name of the curried function, for messages and repr."""
        return _name_of(self.function)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if kwargs or len(args) != 1:
            supplied = len(args) + len(kwargs)
            raise ArityError(
                f"{self.name} expects exactly one positional argument per step "
                f"({self.remaining} of {self.arity} remaining), got {supplied}"
                + (f" including keywords {sorted(kwargs)}" if kwargs else "")
            )
        applied = self.args + args
        if len(applied) == self.arity:
            return self.function(*applied)
        return Curried(self.function, self.arity, applied)

    def __repr__(self) -> str:
        applied = "".join(f"({arg!r})" for arg in self.args)
        return f"curry({self.name}){applied} <needs {self.remaining}>"


def resolve_arity(fn: Callable[..., Any]) -> int:
    """
    Count the required positional parameters of `fn`.

    Raises ArityError when the signature cannot be inspected, takes *args,
    or has required keyword-only parameters that a unary chain could never
    supply.
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError) as e:
        raise ArityError(
            f"Cannot inspect the signature of {fn!r}; pass arity= explicitly",
            MisuseCode.ARITY_UNRESOLVED,
        ) from e

    count = 0
    for param in signature.parameters.values():
        match param.kind:
            case kind if kind in _POSITIONAL:
                if param.default is inspect.Parameter.empty:
                    count += 1
            case inspect.Parameter.VAR_POSITIONAL:
                raise ArityError(
                    f"{_name_of(fn)} takes *{param.name}; pass arity= explicitly",
                    MisuseCode.ARITY_UNRESOLVED,
                )
            case inspect.Parameter.KEYWORD_ONLY if param.default is inspect.Parameter.empty:
                raise ArityError(
                    f"{_name_of(fn)} has required keyword-only parameter {param.name!r}, "
                    f"which a curried chain cannot supply",
                    MisuseCode.ARITY_UNRESOLVED,
                )
    return count


def _name_of(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__name__", None) or repr(fn)


def _check_explicit_arity(fn: Callable[..., Any], arity: int) -> None:
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        # Builtins without signatures: trust the caller
        return
    params = signature.parameters.values()
    if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params):
        return
    positional = [p for p in params if p.kind in _POSITIONAL]
    required = sum(1 for p in positional if p.default is inspect.Parameter.empty)
    if not required <= arity <= len(positional):
        raise ArityError(
            f"arity={arity} does not fit {_name_of(fn)}, which takes between "
            f"{required} and {len(positional)} positional arguments",
            MisuseCode.ARITY_UNRESOLVED,
        )


def _build(fn: Callable[..., R], arity: int | None) -> Curried[R]:
    if arity is None:
        arity = resolve_arity(fn)
    else:
        _check_explicit_arity(fn, arity)
    if arity < 1:
        raise ArityError(
            f"Cannot curry {_name_of(fn)}: it takes no arguments",
            MisuseCode.ARITY_UNRESOLVED,
        )
    max_arity = get_settings().max_arity
    if arity > max_arity:
        raise ArityError(
            f"Cannot curry {_name_of(fn)}: arity {arity} exceeds max_arity={max_arity}",
            MisuseCode.ARITY_LIMIT,
        )
    return Curried(fn, arity)


@overload
def curry(fn: Callable[..., R], *, arity: int | None = None) -> Curried[R]: ...


@overload
def curry(fn: None = None, *, arity: int | None = None) -> Callable[[Callable[..., R]], Curried[R]]: ...


def curry(fn: Callable[..., R] | None = None, *, arity: int | None = None) -> Any:
    """
    Curry `fn` into a chain of unary steps and return the first step.

    Usable directly or as a decorator, with or without an explicit arity:

        add = curry(lambda a, b: a + b)

        @curry
        def clamp(low: int, high: int, value: int) -> int:
            return max(low, min(high, value))

        @curry(arity=2)
        def scale(factor, value, *, rounding=None): ...
    """
    if fn is None:
        return partial(_build, arity=arity)
    return _build(fn, arity)


def curry2(fn: Callable[[A, B], R]) -> Callable[[A], Callable[[B], R]]:
    """Curry a binary function: curry2(f)(a)(b) == f(a, b)."""
    return curry(fn, arity=2)


def curry3(fn: Callable[[A, B, C], R]) -> Callable[[A], Callable[[B], Callable[[C], R]]]:
    """Curry a ternary function: curry3(f)(a)(b)(c) == f(a, b, c)."""
    return curry(fn, arity=3)


def curry4(
    fn: Callable[[A, B, C, D], R],
) -> Callable[[A], Callable[[B], Callable[[C], Callable[[D], R]]]]:
    """Curry a four-argument function."""
    return curry(fn, arity=4)
