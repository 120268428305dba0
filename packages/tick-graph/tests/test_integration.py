"""Tests for running a Stepper inside a tick Engine."""
from tick import Engine

from tick_graph import LINE, RUNNING, GraphConfig, RecordingHost, Stepper, make_graph_system


def build(config: GraphConfig, tps: int = 4):
    host = RecordingHost()
    stepper = Stepper(config, host)
    engine = Engine(tps=tps)
    engine.add_system(make_graph_system(stepper))
    return engine, stepper, host


def test_system_forwards_fixed_dt():
    engine, stepper, _ = build(GraphConfig(speed=2.0), tps=4)
    engine.run(4)
    assert stepper.state.input == 2.0


def test_system_forwards_frame_dt():
    engine, stepper, host = build(GraphConfig(function_type="sloped_line", output_mode=LINE))
    engine.step(0.5)
    engine.step(0.25)
    assert stepper.state.input == 0.75
    assert host.line == [(0.5, 0.5), (0.75, 0.75)]


def test_full_cycle_through_engine():
    resets = []
    host = RecordingHost()
    stepper = Stepper(GraphConfig(), host, on_reset=lambda s: resets.append(s.reset_count))
    engine = Engine(tps=4)
    engine.add_system(make_graph_system(stepper))

    engine.run_for(7.0)

    assert engine.clock.tick_number == 28
    assert resets == [1]
    assert stepper.phase == RUNNING
    assert len(host.markers) == 1
    assert host.destroyed_count == 10


def test_stop_from_reset_callback():
    host = RecordingHost()
    engine = Engine(tps=4)
    stop = []

    def on_reset(s):
        stop[0]()

    stepper = Stepper(GraphConfig(), host, on_reset=on_reset)
    system = make_graph_system(stepper)

    def graph_system(ctx):
        stop[:] = [ctx.request_stop]
        system(ctx)

    engine.add_system(graph_system)
    engine.run(1000)
    assert engine.clock.tick_number == 21
    assert stepper.reset_count == 1
