"""Lane renderer: one rail per preset with its orb and target marker."""
from __future__ import annotations

import pygame
from tick_spring import value

from game.lanes import Lane
from ui.constants import (
    LABEL_COLOR,
    LABEL_W,
    LANE_BG,
    LANE_BORDER,
    LANE_H,
    ORB_RADIUS,
    PRESET_COLORS,
    SETTLED_COLOR,
    TARGET_COLOR,
    TRACK_PAD,
    TRACK_RAIL,
    TRACK_W,
)


def track_x(pos: float) -> int:
    """Map a spring value (pixels along the rail) to a screen x."""
    return int(LABEL_W + TRACK_PAD + pos)


def rail_length() -> float:
    return float(TRACK_W - 2 * TRACK_PAD)


def draw_lanes(surface: pygame.Surface, lanes: list[Lane], font: pygame.font.Font) -> None:
    for i, lane in enumerate(lanes):
        lane_y = i * LANE_H
        pygame.draw.rect(surface, LANE_BG, (0, lane_y, LABEL_W + TRACK_W, LANE_H))
        pygame.draw.line(
            surface, LANE_BORDER, (0, lane_y + LANE_H - 1), (LABEL_W + TRACK_W, lane_y + LANE_H - 1)
        )

        label = font.render(lane.name, True, LABEL_COLOR)
        surface.blit(label, (10, lane_y + LANE_H // 2 - label.get_height() // 2))

        rail_y = lane_y + LANE_H // 2
        pygame.draw.line(
            surface, TRACK_RAIL, (track_x(0.0), rail_y), (track_x(rail_length()), rail_y), 2
        )

        # Target tick
        tx = track_x(lane.spring.target)
        pygame.draw.line(surface, TARGET_COLOR, (tx, rail_y - 16), (tx, rail_y + 16), 1)

        color = SETTLED_COLOR if lane.settled else PRESET_COLORS.get(lane.name, (200, 200, 200))
        ox = track_x(value(lane.spring))
        pygame.draw.circle(surface, color, (ox, rail_y), ORB_RADIUS)
        outline = tuple(min(c + 40, 255) for c in color)
        pygame.draw.circle(surface, outline, (ox, rail_y), ORB_RADIUS, 1)
