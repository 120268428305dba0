"""Host protocol and in-memory recording implementation."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from tick_graph.types import Color, Marker, Point


@runtime_checkable
class GraphHost(Protocol):
    """Drawing primitives a host engine provides to a Stepper.

    Marker handles are opaque to the stepper; it only hands them back to
    ``destroy_marker``.
    """

    def place_marker(self, name: str, position: Point, color: Color) -> Any: ...
    def destroy_marker(self, handle: Any) -> None: ...
    def append_line_point(self, point: Point) -> None: ...
    def clear_line(self) -> None: ...
    def move_node(self, position: Point) -> None: ...
    def show_node(self, visible: bool) -> None: ...


class RecordingHost:
    """Headless host that records everything drawn.

    Conforms to the GraphHost protocol. Used by the CLI and in tests.

    Attributes:
        markers: Live markers keyed by handle.
        line: Points of the current polyline.
        node_position: Last position passed to ``move_node``.
        node_visible: Last value passed to ``show_node``.
        placed_count: Total markers ever placed.
        destroyed_count: Total markers destroyed.
    """

    def __init__(self) -> None:
        self.markers: dict[int, Marker] = {}
        self.line: list[Point] = []
        self.node_position: Point | None = None
        self.node_visible: bool = True
        self.placed_count: int = 0
        self.destroyed_count: int = 0
        self._next_handle: int = 0

    def place_marker(self, name: str, position: Point, color: Color) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self.markers[handle] = Marker(name=name, position=position, color=color)
        self.placed_count += 1
        return handle

    def destroy_marker(self, handle: int) -> None:
        if self.markers.pop(handle, None) is not None:
            self.destroyed_count += 1

    def append_line_point(self, point: Point) -> None:
        self.line.append(point)

    def clear_line(self) -> None:
        self.line.clear()

    def move_node(self, position: Point) -> None:
        self.node_position = position

    def show_node(self, visible: bool) -> None:
        self.node_visible = visible
