"""tick-graph - Animated function graphs driven by the tick engine."""
from __future__ import annotations

from tick_graph.config import GraphConfig, load_config
from tick_graph.functions import FUNCTION_TYPES, FUNCTIONS, get_function, normalize_function_type, sample
from tick_graph.host import GraphHost, RecordingHost
from tick_graph.log import LOG_LEVELS, setup_default_logging
from tick_graph.state import AnimationState
from tick_graph.stepper import Stepper
from tick_graph.systems import make_graph_system
from tick_graph.types import (
    LINE,
    OUTPUT_MODES,
    RESETTING,
    RUNNING,
    TRACE,
    GraphParameters,
    InvalidArgumentError,
    Marker,
)

__all__ = [
    "AnimationState",
    "FUNCTIONS",
    "FUNCTION_TYPES",
    "GraphConfig",
    "GraphHost",
    "GraphParameters",
    "InvalidArgumentError",
    "LINE",
    "LOG_LEVELS",
    "Marker",
    "OUTPUT_MODES",
    "RESETTING",
    "RUNNING",
    "RecordingHost",
    "Stepper",
    "TRACE",
    "get_function",
    "load_config",
    "make_graph_system",
    "normalize_function_type",
    "sample",
    "setup_default_logging",
]
