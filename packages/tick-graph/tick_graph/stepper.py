"""Stepper - timer-driven state loop that animates one graph."""
from __future__ import annotations

import logging
import math
from typing import Any, Callable

from tick_graph.config import GraphConfig
from tick_graph.functions import get_function
from tick_graph.host import GraphHost
from tick_graph.state import AnimationState
from tick_graph.types import RESETTING, RUNNING, TRACE, GraphFunction, Point

logger = logging.getLogger(__name__)


class Stepper:
    """Owns the animation state of one graph and advances it per tick.

    While ``running`` each tick advances the input by ``speed * dt``,
    evaluates the configured function, and either moves the node and drops
    trail markers (trace mode) or extends the polyline (line mode). Once
    ``reset_interval`` is exceeded the drawing is cleared and the stepper
    sits in ``resetting`` until ``reset_delay`` is exceeded, then resumes
    from the anchor.

    Args:
        config: Run configuration.
        host: Drawing primitives (see GraphHost).
        on_reset: Called once per reset cycle, on entering ``resetting``.
        on_transition: Called with (stepper, old_phase, new_phase) on every
            phase change.
    """

    def __init__(
        self,
        config: GraphConfig,
        host: GraphHost,
        on_reset: Callable[[Stepper], None] | None = None,
        on_transition: Callable[[Stepper, str, str], None] | None = None,
    ) -> None:
        self._config = config
        self._host = host
        self._function: GraphFunction = get_function(config.function_type)
        self._params = config.parameters
        self._state = AnimationState(position=config.anchor)
        self._markers: list[Any] = []
        self._reset_count = 0
        self._on_reset = on_reset
        self._on_transition = on_transition

        host.show_node(config.output_mode == TRACE)
        host.move_node(config.anchor)
        logger.info(
            "graph %s (%s) coefficient=%s y_intercept=%s positive_exponent=%s",
            config.function_type,
            config.output_mode,
            config.coefficient,
            config.y_intercept,
            config.positive_exponent,
        )

    @property
    def config(self) -> GraphConfig:
        return self._config

    @property
    def state(self) -> AnimationState:
        return self._state

    @property
    def phase(self) -> str:
        return self._state.phase

    @property
    def markers(self) -> tuple[Any, ...]:
        """Handles of the markers currently owned by this stepper."""
        return tuple(self._markers)

    @property
    def reset_count(self) -> int:
        return self._reset_count

    def evaluate(self, x: float) -> Point:
        p = self._params
        return self._function(x, p.positive_exponent, p.coefficient, p.y_intercept)

    def tick(self, dt: float) -> None:
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        state = self._state
        if state.phase == RUNNING:
            state.reset_timer += dt
            if state.reset_timer > self._config.reset_interval:
                self._restore()
                self._set_phase(RESETTING)
                self._reset_count += 1
                logger.debug("reset #%d", self._reset_count)
                if self._on_reset is not None:
                    self._on_reset(self)
                return
        else:
            state.reset_delay_timer += dt
            if state.reset_delay_timer <= self._config.reset_delay:
                return
            self._restore()
            self._set_phase(RUNNING)
        self._advance(dt)

    def reset(self) -> None:
        """Clear the drawing and return to the anchor without changing phase."""
        self._restore()

    def _set_phase(self, phase: str) -> None:
        old = self._state.phase
        self._state.phase = phase
        if self._on_transition is not None:
            self._on_transition(self, old, phase)

    def _advance(self, dt: float) -> None:
        cfg = self._config
        state = self._state
        state.input += cfg.speed * dt
        x, y = self.evaluate(state.input)
        ax, ay = cfg.anchor

        if cfg.output_mode == TRACE:
            if math.isfinite(y):
                state.position = (ax + y, ay)
                self._host.move_node(state.position)
            state.trace_elapsed += dt
            # Count from total running time; summing dt drifts below exact multiples.
            due = math.floor(state.trace_elapsed / cfg.trace_spawn_interval + 1e-9)
            while state.node_index < due:
                self._spawn_marker()
            return

        if not math.isfinite(y) or y > cfg.line_y_cutoff:
            return
        state.position = (ax + x, ay + y)
        self._host.append_line_point(state.position)

    def _spawn_marker(self) -> None:
        state = self._state
        name = f"{self._config.function_type} {state.node_index}"
        handle = self._host.place_marker(name, state.position, self._config.marker_color)
        self._markers.append(handle)
        state.node_index += 1

    def _restore(self) -> None:
        if self._config.output_mode == TRACE:
            for handle in self._markers:
                self._host.destroy_marker(handle)
            self._markers.clear()
        else:
            self._host.clear_line()
        anchor = self._config.anchor
        self._state.restore(anchor)
        self._host.move_node(anchor)
