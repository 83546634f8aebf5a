"""
composable — chainable unary functions and currying for Python.

Wrap plain unary transformations, chain them into pipelines, and curry
multi-argument functions so their last leg can join a pipeline too.

    from composable import curry, wrap

    def parse_int(text: str) -> int | None:
        try:
            return int(text)
        except ValueError:
            return None

    add = curry(lambda a, b: a + b)
    add_10 = wrap(parse_int) >> wrap(lambda n: n or 0) >> add(10)
    add_10("4")  # → 14
"""

from composable.function import ComposableFn, compose, pipeline, wrap
from composable.curry import Curried, curry, curry2, curry3, curry4, resolve_arity
from composable.errors import ArityError, ConsumedFunctionError, MisuseCode, MisuseError
from composable.config import ComposableSettings, get_settings
from composable.log import configure_logging
from composable.assertions import CompositionAssertions

__all__ = [
    "ComposableFn",
    "wrap",
    "compose",
    "pipeline",
    "Curried",
    "curry",
    "curry2",
    "curry3",
    "curry4",
    "resolve_arity",
    "MisuseCode",
    "MisuseError",
    "ConsumedFunctionError",
    "ArityError",
    "ComposableSettings",
    "get_settings",
    "configure_logging",
    "CompositionAssertions",
]

__version__ = "0.1.0"
