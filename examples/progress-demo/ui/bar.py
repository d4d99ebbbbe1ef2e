"""Progress bar drawing from a BarView."""
from __future__ import annotations

import pygame

from tick_progress import BarView

from ui.constants import BAR_COLORS, BAR_W, BAR_X, BAR_Y, TRACK_BG, TRACK_BORDER


def _parse_px(value: str) -> int:
    return int(float(value.removesuffix("px")))


def draw_bar(surface: pygame.Surface, view: BarView, shown_width: float) -> None:
    """Draw the track and the filled part.

    ``shown_width`` is the eased width in percent, so the fill glides the
    way the style's transition asks for.
    """
    height = _parse_px(view.style["height"])
    span = view.value_max - view.value_min
    frac = (shown_width - view.value_min) / span if span else 0.0
    frac = max(0.0, min(frac, 1.0))

    pygame.draw.rect(surface, TRACK_BG, (BAR_X, BAR_Y, BAR_W, height))
    color = BAR_COLORS.get(view.style["background"], BAR_COLORS["blue"])
    pygame.draw.rect(surface, color, (BAR_X, BAR_Y, int(BAR_W * frac), height))
    pygame.draw.rect(surface, TRACK_BORDER, (BAR_X, BAR_Y, BAR_W, height), 1)
