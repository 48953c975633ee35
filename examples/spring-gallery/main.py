"""Spring Gallery — Side-by-side comparison of the tick-spring presets.

Every lane chases the same target with a different preset. Frame time is
measured with pygame's clock and fed straight to tick_spring.update.

Controls:
  Click   Move the target to the cursor
  Space   Swap the target between the two ends of the rail
  +/-     Cycle the rest threshold
  Esc     Quit
"""
from __future__ import annotations

import sys

import pygame

from game.lanes import (
    clamp_frame_ms,
    make_lanes,
    retarget_all,
    set_threshold_all,
    step_lanes,
)
from ui.constants import (
    BG_COLOR,
    FPS,
    LABEL_W,
    SCREEN_W,
    THRESHOLDS,
    TRACK_PAD,
    TRACK_W,
    screen_h,
)
from ui.lanes import draw_lanes, rail_length
from ui.status import draw_sidebar, draw_status_bar


class GalleryState:
    """Holds the lanes and the UI counters."""

    def __init__(self) -> None:
        self.lanes = make_lanes(0.0)
        self.threshold_idx = 0
        self.retargets = 0
        self.settled = len(self.lanes)
        self.current_target = 0.0

    @property
    def threshold(self) -> float:
        return THRESHOLDS[self.threshold_idx]

    def move_target(self, target: float) -> None:
        self.current_target = max(0.0, min(target, rail_length()))
        retarget_all(self.lanes, self.current_target)
        self.retargets += 1

    def swap_ends(self) -> None:
        end = rail_length()
        self.move_target(0.0 if self.current_target >= end / 2 else end)

    def cycle_threshold(self, step: int) -> None:
        self.threshold_idx = (self.threshold_idx + step) % len(THRESHOLDS)
        set_threshold_all(self.lanes, self.threshold)


def main() -> None:
    pygame.init()
    state = GalleryState()
    screen = pygame.display.set_mode((SCREEN_W, screen_h(len(state.lanes))))
    pygame.display.set_caption("Spring Gallery — tick-spring demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    running = True
    while running:
        delta_ms = clamp_frame_ms(clock.tick(FPS))

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    state.swap_ends()
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    state.cycle_threshold(1)
                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    state.cycle_threshold(-1)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mx, _my = event.pos
                if LABEL_W <= mx < LABEL_W + TRACK_W:
                    state.move_target(mx - LABEL_W - TRACK_PAD)

        # --- Step ---
        state.settled = step_lanes(state.lanes, delta_ms)

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_lanes(screen, state.lanes, font)
        draw_sidebar(
            screen,
            font,
            state.lanes,
            settled=state.settled,
            threshold=state.threshold,
            retargets=state.retargets,
        )
        draw_status_bar(screen, font, len(state.lanes))

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
