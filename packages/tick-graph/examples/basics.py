"""Console graph -- the simplest tick-graph program.

Demonstrates:
- Building a GraphConfig and a Stepper over a RecordingHost
- Registering the stepper as a system and running the loop
- Watching the reset cycle through on_reset / on_transition

Run: python -m examples.basics
"""

from tick import Engine

from tick_graph import LINE, GraphConfig, RecordingHost, Stepper, make_graph_system


def on_transition(stepper: Stepper, old: str, new: str) -> None:
    print(f"  {old} -> {new}  (input={stepper.state.input:.2f})")


def main() -> None:
    print("=== Console Graph ===\n")

    config = GraphConfig(function_type="sine", output_mode=LINE, coefficient=2.0)
    host = RecordingHost()
    stepper = Stepper(config, host, on_transition=on_transition)

    # 10 ticks per second; the stepper sees dt=0.1 each tick.
    engine = Engine(tps=10)
    engine.add_system(make_graph_system(stepper))

    # Two seconds of drawing.
    engine.run_for(2.0)
    for x, y in host.line:
        bar = " " * int((y + 2.0) * 10)
        print(f"  x={x:4.1f} |{bar}*")

    # Run on through a reset cycle.
    engine.run_for(5.0)
    print(f"\nDone. {stepper.reset_count} reset(s), {len(host.line)} point(s) on the line.")


if __name__ == "__main__":
    main()
