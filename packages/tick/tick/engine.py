"""Engine - frame loop, pacing, and lifecycle hooks."""

import time

from tick.clock import Clock
from tick.types import Hook, System


class Engine:
    def __init__(self, tps: int = 60) -> None:
        self._clock = Clock(tps)
        self._systems: list[System] = []
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._stop_requested: bool = False

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def stop_requested(self) -> bool:
        return self._stop_requested

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self, dt: float | None) -> None:
        self._clock.advance(dt)
        ctx = self._clock.context(self._request_stop)
        for system in self._systems:
            system(ctx)
            if self._stop_requested:
                break

    def _fire(self, hooks: list[Hook]) -> None:
        ctx = self._clock.context(self._request_stop)
        for hook in hooks:
            hook(ctx)

    def step(self, dt: float | None = None) -> None:
        """Advance one frame. ``dt`` is the host's elapsed time in seconds."""
        self._stop_requested = False
        self._tick(dt)

    def run(self, n: int) -> None:
        self._stop_requested = False
        self._fire(self._start_hooks)

        for _ in range(n):
            self._tick(None)
            if self._stop_requested:
                break

        self._fire(self._stop_hooks)

    def run_for(self, seconds: float) -> None:
        """Run fixed steps until ``seconds`` of simulated time have elapsed."""
        if seconds < 0:
            raise ValueError(f"seconds must be >= 0, got {seconds}")
        # Counting steps avoids drift from summing the fixed dt.
        self.run(round(seconds * self._clock.tps))

    def run_forever(self) -> None:
        self._stop_requested = False
        self._fire(self._start_hooks)

        last = time.monotonic()
        dt = self._clock.dt
        while not self._stop_requested:
            start = time.monotonic()
            self._tick(start - last)
            last = start
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        self._fire(self._stop_hooks)
