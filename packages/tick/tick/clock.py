"""Clock and TickContext for a frame-driven engine."""

from typing import Callable

from tick.types import TickContext


class Clock:
    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0
        self._elapsed = 0.0
        self._last_dt = 0.0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        """Fixed timestep used when a frame does not supply its own delta."""
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def advance(self, dt: float | None = None) -> int:
        if dt is None:
            dt = self._dt
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        self._tick_number += 1
        self._elapsed += dt
        self._last_dt = dt
        return self._tick_number

    def context(self, stop_fn: Callable[[], None]) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._last_dt,
            elapsed=self._elapsed,
            request_stop=stop_fn,
        )

    def reset(self) -> None:
        self._tick_number = 0
        self._elapsed = 0.0
        self._last_dt = 0.0
