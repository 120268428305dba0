"""Mutable animation state owned by a Stepper."""
from __future__ import annotations

from dataclasses import dataclass

from tick_graph.types import RESETTING, RUNNING, Point


@dataclass
class AnimationState:
    input: float = 0.0
    position: Point = (0.0, 0.0)
    phase: str = RUNNING
    reset_timer: float = 0.0
    reset_delay_timer: float = 0.0
    trace_elapsed: float = 0.0
    node_index: int = 0

    @property
    def is_resetting(self) -> bool:
        return self.phase == RESETTING

    def restore(self, anchor: Point) -> None:
        """Zero input and timers and return to ``anchor``. Phase is left alone."""
        self.input = 0.0
        self.position = anchor
        self.reset_timer = 0.0
        self.reset_delay_timer = 0.0
        self.trace_elapsed = 0.0
        self.node_index = 0
