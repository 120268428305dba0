"""Info panel (sidebar) and bottom status bar."""
from __future__ import annotations

import pygame

from tick_graph import FUNCTION_TYPES, Stepper

from ui.constants import (
    FUNCTION_COLORS,
    LABEL_COLOR,
    PHASE_COLORS,
    PLOT_H,
    SCREEN_W,
    SIDEBAR_BG,
    SIDEBAR_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
)


def draw_sidebar(surface: pygame.Surface, font: pygame.font.Font, stepper: Stepper) -> None:
    """Draw right-side info panel."""
    x = SCREEN_W - SIDEBAR_W
    cfg = stepper.config
    state = stepper.state

    pygame.draw.rect(surface, SIDEBAR_BG, (x, 0, SIDEBAR_W, PLOT_H))
    pygame.draw.line(surface, (50, 50, 70), (x, 0), (x, PLOT_H))

    pad = 10
    line_h = 22
    cx = x + pad
    cy = 8

    surface.blit(font.render("GRAPH", True, LABEL_COLOR), (cx, cy))
    cy += line_h + 4

    for i, name in enumerate(FUNCTION_TYPES):
        color = FUNCTION_COLORS[name] if name == cfg.function_type else TEXT_DIM
        surface.blit(font.render(f"{i + 1} {name}", True, color), (cx, cy))
        cy += line_h
    cy += 8

    phase_color = PHASE_COLORS.get(stepper.phase, TEXT_COLOR)
    rows = [
        (f"Output: {cfg.output_mode}", TEXT_COLOR),
        (f"Exponent: {'+' if cfg.positive_exponent else '-'}", TEXT_COLOR),
        (f"Phase: {stepper.phase}", phase_color),
        (f"Input: {state.input:.2f}", TEXT_COLOR),
        (f"Markers: {len(stepper.markers)}", TEXT_COLOR),
        (f"Resets: {stepper.reset_count}", TEXT_COLOR),
    ]
    for text, color in rows:
        surface.blit(font.render(text, True, color), (cx, cy))
        cy += line_h


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font) -> None:
    """Draw bottom key hints."""
    y = PLOT_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    hint = "1-7 function   Tab output   E exponent   R reset   Esc quit"
    surface.blit(font.render(hint, True, TEXT_DIM), (10, y + 10))
