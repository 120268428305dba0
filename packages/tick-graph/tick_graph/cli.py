"""tick-graph command line: run a graph headless and print a JSON summary."""
from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from typing import Any, Sequence

from tick import Engine

from tick_graph.config import GraphConfig, load_config
from tick_graph.functions import FUNCTION_TYPES
from tick_graph.host import RecordingHost
from tick_graph.log import LOG_LEVELS, setup_default_logging
from tick_graph.stepper import Stepper
from tick_graph.systems import make_graph_system
from tick_graph.types import OUTPUT_MODES

logger = logging.getLogger(__name__)


def _bool(value: str) -> bool:
    lowered = value.lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise argparse.ArgumentTypeError(f"expected a boolean, got {value!r}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tick-graph",
        description="Animate a function graph headless and print what was drawn.",
    )
    p.add_argument("--list", action="store_true", help="List function types and exit")
    p.add_argument("--config", default=None, help="TOML config file")
    p.add_argument("--seconds", type=float, default=6.0,
                   help="Simulated seconds to run (default: 6.0)")
    p.add_argument("--tps", type=int, default=60, help="Ticks per second (default: 60)")
    p.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default="WARNING",
                   help="Logging level (default: WARNING)")

    # Overrides: None means "keep the config file / default value".
    p.add_argument("--function", dest="function_type", default=None,
                   help=f"One of: {', '.join(FUNCTION_TYPES)}")
    p.add_argument("--output", dest="output_mode", choices=OUTPUT_MODES, default=None)
    p.add_argument("--positive-exponent", type=_bool, default=None)
    p.add_argument("--coefficient", type=float, default=None)
    p.add_argument("--y-intercept", type=float, default=None)
    p.add_argument("--speed", type=float, default=None)
    p.add_argument("--reset-interval", type=float, default=None)
    p.add_argument("--reset-delay", type=float, default=None)
    p.add_argument("--trace-spawn-interval", type=float, default=None)
    p.add_argument("--line-y-cutoff", type=float, default=None)
    return p


_OVERRIDES = (
    "function_type",
    "output_mode",
    "positive_exponent",
    "coefficient",
    "y_intercept",
    "speed",
    "reset_interval",
    "reset_delay",
    "trace_spawn_interval",
    "line_y_cutoff",
)


def config_from_args(args: argparse.Namespace) -> GraphConfig:
    config = load_config(args.config) if args.config else GraphConfig()
    changes = {name: getattr(args, name) for name in _OVERRIDES if getattr(args, name) is not None}
    return config.replace(**changes) if changes else config


def run(config: GraphConfig, seconds: float, tps: int = 60) -> dict[str, Any]:
    """Run ``config`` for ``seconds`` of simulated time and summarize the result."""
    host = RecordingHost()
    stepper = Stepper(config, host)
    engine = Engine(tps=tps)
    engine.add_system(make_graph_system(stepper))
    engine.run_for(seconds)

    state = stepper.state
    return {
        "config": dataclasses.asdict(config),
        "seconds": seconds,
        "ticks": engine.clock.tick_number,
        "resets": stepper.reset_count,
        "phase": stepper.phase,
        "input": state.input,
        "position": list(state.position),
        "markers": [
            {"name": m.name, "position": list(m.position)} for m in host.markers.values()
        ],
        "markers_placed": host.placed_count,
        "line": [list(pt) for pt in host.line],
    }


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list:
        print("\n".join(FUNCTION_TYPES))
        return 0

    setup_default_logging(args.log_level)
    try:
        config = config_from_args(args)
        summary = run(config, args.seconds, args.tps)
    except (OSError, ValueError) as e:
        # InvalidArgumentError and tomllib.TOMLDecodeError are ValueErrors.
        logger.debug("run failed", exc_info=True)
        print(f"tick-graph: error: {e}", file=sys.stderr)
        return 2

    print(json.dumps(summary, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
