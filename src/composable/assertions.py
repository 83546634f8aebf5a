"""
Test assertions for composed and curried functions.

Provides expressive assert helpers with clear failure messages for the
properties composition has to hold: ownership, equivalence of two chains
over a set of inputs, and unchanged propagation of failures.

Usage in tests:
    from composable import CompositionAssertions

    def test_grouping_does_not_matter():
        CompositionAssertions.assert_equivalent(
            (wrap(f) >> wrap(g)) >> wrap(h),
            wrap(f) >> (wrap(g) >> wrap(h)),
            inputs=["1", "2", "x"],
        )
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

from composable.function import ComposableFn


def _outcome(fn: Callable[[Any], Any], value: Any) -> tuple[str, Any]:
    try:
        return ("returned", fn(value))
    except Exception as e:
        return ("raised", (type(e), e.args))


class CompositionAssertions:
    """Expressive test assertions for ComposableFn and curried chains."""

    @staticmethod
    def assert_consumed(fn: ComposableFn[Any, Any], message: str = "") -> None:
        """Assert a composition has consumed `fn`."""
        context = f" — {message}" if message else ""
        assert fn.consumed, f"Expected a consumed ComposableFn but got {fn!r}{context}"

    @staticmethod
    def assert_invocable(fn: ComposableFn[Any, Any], message: str = "") -> None:
        """Assert `fn` still owns its transformation."""
        context = f" — {message}" if message else ""
        assert not fn.consumed, f"Expected an invocable ComposableFn but it was consumed{context}"

    @staticmethod
    def assert_equivalent(
        left: Callable[[Any], Any],
        right: Callable[[Any], Any],
        inputs: Iterable[Any],
    ) -> None:
        """
        Assert two unary callables behave identically on every input.

        Both must return equal values, or both must raise the same
        exception type with the same args.
        """
        for value in inputs:
            expected, actual = _outcome(left, value), _outcome(right, value)
            assert expected == actual, (
                f"Callables diverge on input {value!r}: "
                f"left {expected[0]} {expected[1]!r}, right {actual[0]} {actual[1]!r}"
            )

    @staticmethod
    def assert_propagates(
        fn: Callable[[Any], Any],
        value: Any,
        expected: type[BaseException],
    ) -> BaseException:
        """
        Assert invoking `fn(value)` raises `expected` and return the exception.

            err = CompositionAssertions.assert_propagates(parse, "x", ValueError)
        """
        try:
            result = fn(value)
        except expected as e:
            return e
        raise AssertionError(
            f"Expected {expected.__name__} from input {value!r} but got result {result!r}"
        )
