"""System factory that plugs a Stepper into a tick Engine."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from tick_graph.stepper import Stepper

if TYPE_CHECKING:
    from tick import TickContext


def make_graph_system(stepper: Stepper) -> Callable[[TickContext], None]:
    """Return a system that advances ``stepper`` by each frame's dt."""

    def graph_system(ctx: TickContext) -> None:
        stepper.tick(ctx.dt)

    return graph_system
