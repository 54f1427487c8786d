"""Shared pygame drawing for the crossing game. Reads a GameState, never changes it."""

from __future__ import annotations

import pygame

from leapfrog.config.schema import FieldConfig
from leapfrog.engine.entities import Crocodile, GameState, Hazard, Plank, Turtle, Vehicle

HUD_H = 40

# Palette
C_BANK = (34, 110, 52)
C_RIVER = (28, 62, 140)
C_GRASS = (70, 140, 60)
C_ROAD = (30, 30, 38)
C_ZONE = (20, 70, 36)
C_ZONE_EDGE = (120, 200, 120)
C_STRIPE = (90, 90, 110)
C_WHITE = (255, 255, 255)
C_DIM = (160, 160, 180)
C_FROG = (0, 200, 0)
C_CAR = (255, 255, 255)
C_PLANK = (191, 120, 53)
C_CROC = (162, 207, 143)
C_MOUTH = (255, 255, 255)
C_TURTLE = (255, 0, 0)

# Background bands as (top, bottom) in field coordinates
BANK = (0, 100)
RIVER = (100, 300)
SAFE_STRIP = (300, 350)
ROAD = (350, 550)
START_STRIP = (550, 600)


class RenderError(RuntimeError):
    """Raised when a state holds something the renderer cannot draw."""


def _band(surf, color, band, width) -> None:
    top, bottom = band
    pygame.draw.rect(surf, color, (0, top, width, bottom - top))


def draw_background(surf, cfg: FieldConfig) -> None:
    w = cfg.field_width
    _band(surf, C_BANK, BANK, w)
    _band(surf, C_RIVER, RIVER, w)
    _band(surf, C_GRASS, SAFE_STRIP, w)
    _band(surf, C_ROAD, ROAD, w)
    _band(surf, C_GRASS, START_STRIP, w)
    for y in range(ROAD[0] + 50, ROAD[1], 50):
        for x in range(0, w, 40):
            pygame.draw.rect(surf, C_STRIPE, (x, y - 1, 20, 2))


def draw_frog(surf, x: float, y: float, cfg: FieldConfig) -> None:
    pygame.draw.circle(surf, C_FROG, (int(x), int(y)), cfg.pilot_radius)


def draw_hazard(surf, h: Hazard, cfg: FieldConfig) -> None:
    rect = (int(h.x), int(h.y), int(h.width), int(h.height))
    if isinstance(h, Vehicle):
        pygame.draw.rect(surf, C_CAR, rect)
    elif isinstance(h, Plank):
        pygame.draw.rect(surf, C_PLANK, rect)
    elif isinstance(h, Crocodile):
        pygame.draw.rect(surf, C_CROC, rect)
        m = h.mouth(cfg)
        pygame.draw.rect(surf, C_MOUTH, (int(m.x), int(m.y), int(m.width), int(m.height)))
    elif isinstance(h, Turtle):
        if not h.hidden:
            pygame.draw.rect(surf, C_TURTLE, rect)
    else:
        raise RenderError(f"Don't know how to draw hazard {h.id!r} of kind {h.kind!r}")


def hud_text(state: GameState) -> str:
    return (f"Score: {state.score} Highscore: {state.high_score}   Round: {state.round + 1}"
            f"   Zones: {state.occupied_zones()}/{len(state.zones)}")


def draw_state(surf, state: GameState, cfg: FieldConfig, font) -> None:
    """Draw the whole board plus the score line below it."""
    draw_background(surf, cfg)

    for z in state.zones:
        pygame.draw.rect(surf, C_ZONE, (int(z.x), int(z.y), int(z.width), int(z.height)))
        pygame.draw.rect(surf, C_ZONE_EDGE, (int(z.x), int(z.y), int(z.width), int(z.height)), 2)
        if z.occupied:
            draw_frog(surf, z.x + z.width / 2, z.y + z.height / 2, cfg)

    for h in state.hazards():
        draw_hazard(surf, h, cfg)

    if not state.pilot.settled:
        draw_frog(surf, state.pilot.x, state.pilot.y, cfg)

    hud_y = cfg.field_height
    pygame.draw.rect(surf, (0, 0, 0), (0, hud_y, cfg.field_width, HUD_H))
    label = font.render(hud_text(state), True, C_WHITE)
    surf.blit(label, (12, hud_y + HUD_H // 2 - label.get_height() // 2))
