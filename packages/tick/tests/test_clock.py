"""Tests for clock advancement and TickContext generation."""

import pytest
from tick.clock import Clock
from tick.types import TickContext


def test_clock_initialization():
    """Test clock initializes with correct TPS and dt."""
    clock = Clock(tps=20)
    assert clock.tps == 20
    assert clock.tick_number == 0
    assert clock.elapsed == 0.0
    # dt should be 1.0 / tps
    assert abs(clock.dt - 0.05) < 1e-9


@pytest.mark.parametrize("tps", [0, -1])
def test_clock_rejects_non_positive_tps(tps):
    with pytest.raises(ValueError):
        Clock(tps=tps)


def test_advance_increments_tick_number():
    """Test clock advance() increments tick_number correctly."""
    clock = Clock(tps=20)
    assert clock.advance() == 1
    assert clock.tick_number == 1
    assert clock.advance() == 2
    assert clock.tick_number == 2


def test_advance_without_dt_uses_fixed_step():
    clock = Clock(tps=4)
    for _ in range(8):
        clock.advance()
    assert clock.elapsed == 2.0


def test_advance_with_variable_dt():
    """Frames of different length accumulate into elapsed."""
    clock = Clock(tps=60)
    clock.advance(0.5)
    clock.advance(0.25)
    clock.advance(0.0)
    assert clock.tick_number == 3
    assert clock.elapsed == 0.75


def test_advance_rejects_negative_dt():
    clock = Clock(tps=60)
    with pytest.raises(ValueError, match="dt must be >= 0"):
        clock.advance(-0.1)
    assert clock.tick_number == 0


def test_context_returns_correct_values():
    """Test context() returns TickContext with the last frame's values."""
    clock = Clock(tps=20)
    clock.advance(0.125)

    stop_called = []

    def stop_fn():
        stop_called.append(True)

    ctx = clock.context(stop_fn)

    assert isinstance(ctx, TickContext)
    assert ctx.tick_number == 1
    assert ctx.dt == 0.125
    assert ctx.elapsed == 0.125

    ctx.request_stop()
    assert stop_called == [True]


def test_context_before_first_advance():
    """Test context at tick 0 (before first advance)."""
    clock = Clock(tps=20)
    ctx = clock.context(lambda: None)

    assert ctx.tick_number == 0
    assert ctx.dt == 0.0
    assert ctx.elapsed == 0.0


def test_reset_resets_to_zero():
    clock = Clock(tps=30)
    for _ in range(10):
        clock.advance()
    clock.reset()

    assert clock.tick_number == 0
    assert clock.elapsed == 0.0
    assert clock.tps == 30
    assert clock.advance() == 1


def test_context_is_frozen():
    clock = Clock(tps=20)
    clock.advance()
    ctx = clock.context(lambda: None)

    with pytest.raises(AttributeError):
        ctx.tick_number = 99  # type: ignore[misc]
