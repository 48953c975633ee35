"""Info panel (sidebar) and bottom status bar."""
from __future__ import annotations

import pygame

from game.lanes import Lane, lane_readout
from ui.constants import (
    LABEL_COLOR,
    LANE_H,
    PRESET_COLORS,
    SCREEN_W,
    SETTLED_COLOR,
    SIDEBAR_BG,
    SIDEBAR_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
)


def draw_sidebar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    lanes: list[Lane],
    settled: int,
    threshold: float,
    retargets: int,
) -> None:
    """Draw right-side info panel."""
    x = SCREEN_W - SIDEBAR_W
    h = LANE_H * len(lanes)

    pygame.draw.rect(surface, SIDEBAR_BG, (x, 0, SIDEBAR_W, h))
    pygame.draw.line(surface, (50, 50, 70), (x, 0), (x, h))

    pad = 10
    line_h = 18
    cx = x + pad
    cy = 8

    surface.blit(font.render("INFO", True, LABEL_COLOR), (cx, cy))
    cy += line_h + 4
    surface.blit(font.render(f"Moves: {retargets}", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    surface.blit(font.render(f"Rest <: {threshold:g}px", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    settled_color = SETTLED_COLOR if settled == len(lanes) else TEXT_COLOR
    surface.blit(font.render(f"Settled: {settled}/{len(lanes)}", True, settled_color), (cx, cy))
    cy += line_h + 8

    for lane in lanes:
        header, *details = lane_readout(lane)
        color = SETTLED_COLOR if lane.settled else PRESET_COLORS.get(lane.name, TEXT_COLOR)
        surface.blit(font.render(header, True, color), (cx, cy))
        cy += line_h
        for line in details:
            surface.blit(font.render(line, True, TEXT_DIM), (cx, cy))
            cy += line_h
        cy += 2


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font, lane_count: int) -> None:
    """Draw bottom key-bindings bar."""
    y = LANE_H * lane_count
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    pygame.draw.line(surface, (50, 50, 70), (0, y), (SCREEN_W, y))

    text = "[Click] Move target  [Space] Swap ends  [+/-] Rest threshold  [Esc] Quit"
    label = font.render(text, True, TEXT_DIM)
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))
