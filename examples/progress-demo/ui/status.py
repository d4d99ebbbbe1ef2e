"""Readout under the bar and bottom status bar."""
from __future__ import annotations

import pygame

from tick_progress import ProgressState

from ui.constants import (
    BAR_X,
    BAR_Y,
    PHASE_COLORS,
    SCREEN_H,
    SCREEN_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
)


def draw_readout(
    surface: pygame.Surface,
    font: pygame.font.Font,
    state: ProgressState,
    bar_height: int,
) -> None:
    y = BAR_Y + bar_height + 14
    value = font.render(f"{state.progress:6.2f}%", True, TEXT_COLOR)
    surface.blit(value, (BAR_X, y))

    phase = font.render(state.phase.value, True, PHASE_COLORS[state.phase.value])
    surface.blit(phase, (BAR_X + 110, y))

    detail = (
        f"tick {state.tick_number}  acc {state.accumulator:.3f}  "
        f"{'running' if state.running else 'stopped'}"
        f"{'  completed' if state.completed else ''}"
    )
    surface.blit(font.render(detail, True, TEXT_DIM), (BAR_X + 220, y))


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font) -> None:
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    text = "[Space] active  [C] completed  [R] reset  [Esc] quit"
    surface.blit(font.render(text, True, TEXT_DIM), (10, y + 10))
