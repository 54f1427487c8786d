#!/usr/bin/env python3
"""
LEAPFROG: interactive crossing game
Hop over four lanes of traffic and a river to fill all five landing zones.

Requirements:
    pip install pygame
"""

from __future__ import annotations

import logging
import sys

import pygame

from leapfrog.config.schema import Settings
from leapfrog.engine.events import AdvanceTick, Begin, Move
from leapfrog.engine.layout import LANE_GROUPS, initial_state
from leapfrog.engine.reducer import reduce_state
from leapfrog.ui.render import HUD_H, draw_state

logger = logging.getLogger(__name__)

KEY_MOVES = {
    pygame.K_a: "left",
    pygame.K_LEFT: "left",
    pygame.K_d: "right",
    pygame.K_RIGHT: "right",
    pygame.K_w: "up",
    pygame.K_UP: "up",
    pygame.K_s: "down",
    pygame.K_DOWN: "down",
}


def key_to_move(key: int) -> Move | None:
    direction = KEY_MOVES.get(key)
    return Move(direction) if direction else None


def start_lane_timers(settings: Settings) -> dict[int, list[str]]:
    """One pygame timer per lane group. Returns timer event type -> hazard ids."""
    timers = {}
    for i, (group, ids) in enumerate(LANE_GROUPS.items()):
        event_type = pygame.USEREVENT + 1 + i
        pygame.time.set_timer(event_type, settings.tick_periods[group])
        timers[event_type] = ids
    return timers


# ─────────────────────────────────────────
# Main
# ─────────────────────────────────────────

def main(settings: Settings) -> int:
    cfg = settings.field
    pygame.init()
    screen = pygame.display.set_mode((cfg.field_width, cfg.field_height + HUD_H))
    pygame.display.set_caption("LEAPFROG")
    clock = pygame.time.Clock()

    try:
        font = pygame.font.SysFont("Courier New", 20, bold=True)
    except Exception:
        font = pygame.font.SysFont(None, 20)

    state = reduce_state(initial_state(cfg), Begin(), cfg)
    shown = state
    hold_until = 0
    timers = start_lane_timers(settings)

    while True:
        clock.tick(settings.fps)

        # ── Events ──────────────────────
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit()
                return 0
            game_events = []
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    pygame.quit()
                    return 0
                move = key_to_move(event.key)
                if move is not None:
                    game_events.append(move)
            elif event.type in timers:
                game_events.extend(AdvanceTick(hid) for hid in timers[event.type])

            for game_event in game_events:
                state = reduce_state(state, game_event, cfg)
                if state.restart:
                    logger.info("round %d starts, high score %d", state.round + 1, state.high_score)
                    hold_until = pygame.time.get_ticks() + settings.settle_delay_ms

        # ── Draw ────────────────────────
        # A new round is shown only after the settle delay; the game itself keeps running.
        if pygame.time.get_ticks() >= hold_until:
            shown = state
        draw_state(screen, shown, cfg, font)
        pygame.display.flip()


if __name__ == "__main__":
    from leapfrog.config.loader import load_settings

    sys.exit(main(load_settings()))
