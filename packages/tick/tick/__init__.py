"""tick - A minimal frame-driven tick engine in Python."""

from tick.clock import Clock
from tick.engine import Engine
from tick.types import Hook, System, TickContext

__all__ = [
    "Engine",
    "Clock",
    "TickContext",
    "System",
    "Hook",
]
