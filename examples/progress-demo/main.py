"""Progress Demo -- Simulated progress bar with live flags.

Exercises tick-progress: ProgressBar, ManualDriver, and the bar view.

Controls:
  Space   Toggle active
  C       Toggle completed
  R       Toggle reset (acts on the rising edge)
  Esc     Quit
"""
from __future__ import annotations

import sys

import pygame

from tick_progress import ManualDriver, ProgressBar

from ui.bar import draw_bar
from ui.constants import BG_COLOR, FPS, SCREEN_H, SCREEN_W
from ui.status import draw_readout, draw_status_bar


class DemoState:
    """Holds the bar, its driver, and the eased on-screen width."""

    def __init__(self) -> None:
        self.driver = ManualDriver()
        self.bar = ProgressBar(height=28, driver=self.driver)
        self.shown_width = float(self.bar.config.start_progress_value)

    def toggle_active(self) -> None:
        self.bar.update(active=not self.bar.active)

    def toggle_completed(self) -> None:
        self.bar.update(completed=not self.bar.completed)

    def toggle_reset(self) -> None:
        self.bar.update(reset=not self.bar.reset)

    def ease_towards(self, target: float, dt: float) -> None:
        """Close the gap to ``target`` over the configured transition time."""
        speed = self.bar.config.transition_speed
        if speed <= 0:
            self.shown_width = target
            return
        self.shown_width += (target - self.shown_width) * min(dt / speed, 1.0)


def main() -> None:
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Progress Demo - tick-progress")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = DemoState()
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
                elif event.key == pygame.K_SPACE:
                    state.toggle_active()
                elif event.key == pygame.K_c:
                    state.toggle_completed()
                elif event.key == pygame.K_r:
                    state.toggle_reset()

        # --- Tick ---
        state.driver.advance(dt)

        # --- Render ---
        view = state.bar.render()
        state.ease_towards(view.width, dt)

        screen.fill(BG_COLOR)
        draw_bar(screen, view, state.shown_width)
        height = int(view.style["height"].removesuffix("px"))
        draw_readout(screen, font, state.bar.engine.state, height)
        draw_status_bar(screen, font)

        pygame.display.flip()

    state.bar.close()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
