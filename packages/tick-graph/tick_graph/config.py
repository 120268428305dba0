"""Graph configuration dataclass and TOML loading."""
from __future__ import annotations

import dataclasses
import math
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from tick_graph.functions import normalize_function_type
from tick_graph.types import OUTPUT_MODES, TRACE, Color, GraphParameters, InvalidArgumentError, Point


_NUMERIC_FIELDS = (
    "coefficient",
    "y_intercept",
    "speed",
    "reset_interval",
    "reset_delay",
    "trace_spawn_interval",
    "line_y_cutoff",
    "line_width",
)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class GraphConfig:
    """Immutable configuration for one graph run.

    Attributes:
        function_type: Function table tag (see ``FUNCTION_TYPES``).
        output_mode: ``"trace"`` spawns markers along the X axis,
            ``"line"`` draws a polyline along the Y axis.
        positive_exponent: When False, negates the exponent of power forms
            and the input of linear and trig forms.
        coefficient: Multiplier applied to the function value.
        y_intercept: Offset added to the function value.
        speed: Input units advanced per second.
        reset_interval: Seconds of running before a reset.
        reset_delay: Seconds spent resetting before running again.
        trace_spawn_interval: Seconds between markers in trace mode.
        line_y_cutoff: Line points whose function value exceeds this are skipped.
        anchor: Starting position of the graphing node.
        marker_color: RGB color of trail markers and the line.
        line_width: Polyline width in world units.
    """

    function_type: str = "sine"
    output_mode: str = TRACE
    positive_exponent: bool = True
    coefficient: float = 1.0
    y_intercept: float = 0.0
    speed: float = 1.0
    reset_interval: float = 5.0
    reset_delay: float = 1.0
    trace_spawn_interval: float = 0.5
    line_y_cutoff: float = 3.0
    anchor: Point = (0.0, 0.0)
    marker_color: Color = (0, 200, 255)
    line_width: float = 0.1

    def __post_init__(self) -> None:
        object.__setattr__(self, "function_type", normalize_function_type(self.function_type))
        if self.output_mode not in OUTPUT_MODES:
            raise InvalidArgumentError(
                f"Unknown output mode {self.output_mode!r}, expected one of {', '.join(OUTPUT_MODES)}"
            )
        if not isinstance(self.positive_exponent, bool):
            raise ValueError(f"positive_exponent must be a bool, got {self.positive_exponent!r}")
        for name in _NUMERIC_FIELDS:
            value = getattr(self, name)
            if not _is_number(value):
                raise ValueError(f"{name} must be a number, got {value!r}")
        if len(self.anchor) != 2 or not all(_is_number(v) for v in self.anchor):
            raise ValueError(f"anchor must be two numbers, got {self.anchor!r}")
        if not math.isfinite(self.speed) or self.speed < 0:
            raise ValueError(f"speed must be a finite value >= 0, got {self.speed}")
        for name in ("reset_interval", "reset_delay", "trace_spawn_interval"):
            value = getattr(self, name)
            if not value > 0:
                raise ValueError(f"{name} must be > 0, got {value}")
        if self.line_width < 0:
            raise ValueError(f"line_width must be >= 0, got {self.line_width}")
        object.__setattr__(self, "anchor", (float(self.anchor[0]), float(self.anchor[1])))
        object.__setattr__(self, "marker_color", tuple(int(c) for c in self.marker_color))

    @property
    def parameters(self) -> GraphParameters:
        return GraphParameters(
            positive_exponent=self.positive_exponent,
            coefficient=self.coefficient,
            y_intercept=self.y_intercept,
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> GraphConfig:
        """Build a config from a plain mapping. Raises InvalidArgumentError on unknown keys."""
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidArgumentError(f"Unknown config keys: {', '.join(unknown)}")
        kwargs = dict(data)
        for key in ("anchor", "marker_color"):
            if key in kwargs:
                kwargs[key] = tuple(kwargs[key])
        return cls(**kwargs)

    def replace(self, **changes: Any) -> GraphConfig:
        return dataclasses.replace(self, **changes)


def load_config(path: str | Path) -> GraphConfig:
    """Load a GraphConfig from a TOML file.

    Keys may sit at the top level or inside a ``[graph]`` table.
    """
    with open(path, "rb") as f:
        data = tomllib.load(f)
    if "graph" in data and isinstance(data["graph"], dict):
        data = data["graph"]
    return GraphConfig.from_mapping(data)
