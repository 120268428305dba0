"""Function table: closed-form evaluators keyed by function type."""
from __future__ import annotations

import math
import re
from typing import Iterable

from tick_graph.types import GraphFunction, GraphParameters, InvalidArgumentError, Point


def _power(base: float, exponent: float) -> float:
    """``base ** exponent`` with IEEE results instead of exceptions."""
    odd = float(exponent).is_integer() and int(exponent) % 2 == 1
    try:
        return math.pow(base, exponent)
    except ValueError:
        # Zero to a negative power, or a negative base with a fractional exponent.
        if base == 0.0:
            return math.copysign(math.inf, base) if odd else math.inf
        return math.nan
    except OverflowError:
        if base < 0 and odd:
            return -math.inf
        return math.inf


def horizontal_line(x: float, positive_exponent: bool, coefficient: float = 1.0, y_intercept: float = 0.0) -> Point:
    return (x, coefficient + y_intercept)


def sloped_line(x: float, positive_exponent: bool, coefficient: float = 1.0, y_intercept: float = 0.0) -> Point:
    return (x, coefficient * (x if positive_exponent else -x) + y_intercept)


def parametric(x: float, positive_exponent: bool, power: float, coefficient: float = 1.0, y_intercept: float = 0.0) -> Point:
    """Power form ``coefficient * x^(±power) + y_intercept``."""
    exponent = power if positive_exponent else -power
    return (x, coefficient * _power(x, exponent) + y_intercept)


def squared(x: float, positive_exponent: bool, coefficient: float = 1.0, y_intercept: float = 0.0) -> Point:
    return parametric(x, positive_exponent, 2, coefficient, y_intercept)


def cubed(x: float, positive_exponent: bool, coefficient: float = 1.0, y_intercept: float = 0.0) -> Point:
    return parametric(x, positive_exponent, 3, coefficient, y_intercept)


def square_root(x: float, positive_exponent: bool, coefficient: float = 1.0, y_intercept: float = 0.0) -> Point:
    return parametric(x, positive_exponent, 0.5, coefficient, y_intercept)


def sine(x: float, positive_exponent: bool, coefficient: float = 1.0, y_intercept: float = 0.0) -> Point:
    return (x, coefficient * math.sin(x if positive_exponent else -x) + y_intercept)


def cosine(x: float, positive_exponent: bool, coefficient: float = 1.0, y_intercept: float = 0.0) -> Point:
    return (x, coefficient * math.cos(x if positive_exponent else -x) + y_intercept)


FUNCTIONS: dict[str, GraphFunction] = {
    "horizontal_line": horizontal_line,
    "sloped_line": sloped_line,
    "squared": squared,
    "cubed": cubed,
    "square_root": square_root,
    "sine": sine,
    "cosine": cosine,
}

FUNCTION_TYPES: tuple[str, ...] = tuple(FUNCTIONS)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def normalize_function_type(tag: str) -> str:
    """Map ``SlopedLine`` / ``sloped-line`` / ``sloped_line`` to ``sloped_line``.

    Raises InvalidArgumentError if the result is not a known function type.
    """
    if not isinstance(tag, str):
        raise InvalidArgumentError(f"function type must be a string, got {tag!r}")
    name = _CAMEL_BOUNDARY.sub("_", tag.strip()).replace("-", "_").replace(" ", "_").lower()
    if name not in FUNCTIONS:
        raise InvalidArgumentError(
            f"Unknown function type {tag!r}, expected one of {', '.join(FUNCTION_TYPES)}"
        )
    return name


def get_function(tag: str) -> GraphFunction:
    """Return the evaluator for ``tag``. Raises InvalidArgumentError if unknown."""
    return FUNCTIONS[normalize_function_type(tag)]


def sample(tag: str, xs: Iterable[float], params: GraphParameters | None = None) -> list[Point]:
    """Evaluate ``tag`` at each x in ``xs``."""
    fn = get_function(tag)
    if params is None:
        params = GraphParameters()
    return [fn(x, params.positive_exponent, params.coefficient, params.y_intercept) for x in xs]
