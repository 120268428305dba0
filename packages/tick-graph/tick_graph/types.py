"""Shared types for tick-graph."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

Point = tuple[float, float]
Color = tuple[int, int, int]

# (x, positive_exponent, coefficient, y_intercept) -> (x, y)
GraphFunction = Callable[[float, bool, float, float], Point]

TRACE = "trace"
LINE = "line"
OUTPUT_MODES = (TRACE, LINE)

RUNNING = "running"
RESETTING = "resetting"


class InvalidArgumentError(ValueError):
    """Raised for an unrecognized function type, output mode, or config key."""


@dataclass(frozen=True)
class GraphParameters:
    """Per-run inputs shared by every evaluator in the function table."""

    positive_exponent: bool = True
    coefficient: float = 1.0
    y_intercept: float = 0.0


@dataclass
class Marker:
    """A trail marker placed by a host."""

    name: str
    position: Point
    color: Color
