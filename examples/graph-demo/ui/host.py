"""pygame implementation of the GraphHost protocol."""
from __future__ import annotations

import math

import pygame

from tick_graph import Marker

from ui.constants import (
    AXIS_COLOR,
    GRID_COLOR,
    MARKER_RADIUS,
    NODE_COLOR,
    NODE_RADIUS,
    ORIGIN,
    PLOT_H,
    PLOT_W,
    PX_PER_UNIT,
)


def to_screen(x: float, y: float) -> tuple[int, int] | None:
    """World units to plot pixels (y up). None for non-finite points."""
    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    px = ORIGIN[0] + x * PX_PER_UNIT
    py = ORIGIN[1] - y * PX_PER_UNIT
    # Clamp so far-off values do not overflow pygame's int coordinates.
    px = max(-10_000, min(10_000, px))
    py = max(-10_000, min(10_000, py))
    return int(px), int(py)


class PygameHost:
    """Keeps what the stepper asked for and draws it each frame."""

    def __init__(self, line_width: float = 0.1) -> None:
        self.markers: dict[int, Marker] = {}
        self.line: list[tuple[float, float]] = []
        self.node_position: tuple[float, float] = (0.0, 0.0)
        self.node_visible = True
        self.line_px = max(1, round(line_width * PX_PER_UNIT))
        self._next_handle = 0

    # --- GraphHost ---

    def place_marker(self, name, position, color) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self.markers[handle] = Marker(name=name, position=position, color=color)
        return handle

    def destroy_marker(self, handle) -> None:
        self.markers.pop(handle, None)

    def append_line_point(self, point) -> None:
        self.line.append(point)

    def clear_line(self) -> None:
        self.line.clear()

    def move_node(self, position) -> None:
        self.node_position = position

    def show_node(self, visible) -> None:
        self.node_visible = visible

    # --- Rendering ---

    def draw(self, surface: pygame.Surface, color: tuple[int, int, int]) -> None:
        pygame.draw.rect(surface, (0, 0, 0), (0, 0, PLOT_W, PLOT_H))
        for gx in range(ORIGIN[0] % PX_PER_UNIT, PLOT_W, PX_PER_UNIT):
            pygame.draw.line(surface, GRID_COLOR, (gx, 0), (gx, PLOT_H))
        for gy in range(ORIGIN[1] % PX_PER_UNIT, PLOT_H, PX_PER_UNIT):
            pygame.draw.line(surface, GRID_COLOR, (0, gy), (PLOT_W, gy))
        pygame.draw.line(surface, AXIS_COLOR, (0, ORIGIN[1]), (PLOT_W, ORIGIN[1]))
        pygame.draw.line(surface, AXIS_COLOR, (ORIGIN[0], 0), (ORIGIN[0], PLOT_H))

        points = [p for p in (to_screen(x, y) for x, y in self.line) if p is not None]
        if len(points) > 1:
            pygame.draw.lines(surface, color, False, points, self.line_px)

        for marker in self.markers.values():
            pos = to_screen(*marker.position)
            if pos is not None:
                pygame.draw.circle(surface, marker.color, pos, MARKER_RADIUS)

        if self.node_visible:
            pos = to_screen(*self.node_position)
            if pos is not None:
                pygame.draw.circle(surface, NODE_COLOR, pos, NODE_RADIUS)
                pygame.draw.circle(surface, color, pos, NODE_RADIUS - 3)
