"""Shared type aliases for the tick frame loop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]


System = Callable[[TickContext], None]
Hook = Callable[[TickContext], None]
