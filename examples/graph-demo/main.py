"""Graph Demo — animated function graphs in a pygame window.

Exercises tick and tick-graph.

Controls:
  1-7     Select function type
  Tab     Toggle trace / line output
  E       Toggle exponent sign
  R       Force a reset
  Esc     Quit
"""
from __future__ import annotations

import argparse
import sys

import pygame

from tick import Engine
from tick_graph import (
    FUNCTION_TYPES,
    LINE,
    LOG_LEVELS,
    OUTPUT_MODES,
    TRACE,
    GraphConfig,
    Stepper,
    load_config,
    make_graph_system,
    setup_default_logging,
)

from ui.constants import BG_COLOR, FPS, FUNCTION_COLORS, SCREEN_H, SCREEN_W
from ui.host import PygameHost
from ui.status import draw_sidebar, draw_status_bar


class GraphState:
    """Holds the engine, host, and stepper; rebuilds them on config changes."""

    def __init__(self, config: GraphConfig) -> None:
        self.build(config)

    def build(self, config: GraphConfig) -> None:
        color = FUNCTION_COLORS.get(config.function_type, config.marker_color)
        config = config.replace(marker_color=color)
        self.host = PygameHost(line_width=config.line_width)
        self.stepper = Stepper(config, self.host)
        self.engine = Engine(tps=FPS)
        self.engine.add_system(make_graph_system(self.stepper))

    @property
    def config(self) -> GraphConfig:
        return self.stepper.config

    def select_function(self, index: int) -> None:
        if 0 <= index < len(FUNCTION_TYPES):
            self.build(self.config.replace(function_type=FUNCTION_TYPES[index]))

    def toggle_output(self) -> None:
        mode = LINE if self.config.output_mode == TRACE else TRACE
        self.build(self.config.replace(output_mode=mode))

    def toggle_exponent(self) -> None:
        self.build(self.config.replace(positive_exponent=not self.config.positive_exponent))


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Graph Demo — tick-graph visual demo")
    p.add_argument("--config", default=None, help="TOML config file")
    p.add_argument("--function", default=None, help=f"One of: {', '.join(FUNCTION_TYPES)}")
    p.add_argument("--output", choices=OUTPUT_MODES, default=None)
    p.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default="INFO")
    return p.parse_args()


_NUMBER_KEYS = [pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4, pygame.K_5, pygame.K_6, pygame.K_7]


def main() -> None:
    args = parse_args()
    setup_default_logging(args.log_level)

    config = load_config(args.config) if args.config else GraphConfig()
    if args.function:
        config = config.replace(function_type=args.function)
    if args.output:
        config = config.replace(output_mode=args.output)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Graph Demo — tick-graph")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = GraphState(config)
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_TAB:
                    state.toggle_output()
                elif event.key == pygame.K_e:
                    state.toggle_exponent()
                elif event.key == pygame.K_r:
                    state.stepper.reset()
                elif event.key in _NUMBER_KEYS:
                    state.select_function(_NUMBER_KEYS.index(event.key))

        # --- Tick ---
        state.engine.step(dt)

        # --- Render ---
        screen.fill(BG_COLOR)
        state.host.draw(screen, state.config.marker_color)
        draw_sidebar(screen, font, state.stepper)
        draw_status_bar(screen, font)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
