"""Move policies for headless runs. A policy maps the current state to a move or None (wait)."""

from __future__ import annotations

from typing import Protocol

import numpy as np

from leapfrog.config.schema import FieldConfig
from leapfrog.engine.entities import GameState
from leapfrog.engine.events import MOVE_DIRECTIONS, Move
from leapfrog.engine.pilot import move
from leapfrog.engine.reducer import complete_round, reduce_state


class Policy(Protocol):
    name: str

    def decide(self, state: GameState, cfg: FieldConfig) -> str | None: ...


def lost_life(before: GameState, after: GameState, cfg: FieldConfig, direction: str | None = None) -> bool:
    """True if the pilot was sent back to start without landing.

    For a move, pass its `direction`: the outcome is compared with where the
    step would have put the pilot, so a squash on the first hop from start counts.
    """
    p0, p1 = before.pilot, after.pilot
    if after.restart or p1.id != p0.id or p1.settled:
        return False
    if direction is not None:
        p0 = move(p0, direction, cfg)
    start = (cfg.start_x, cfg.start_y)
    return (p1.x, p1.y) == start and (p0.x, p0.y) != start


class RandomPolicy:
    """Random walk with a configurable pull towards the landing zones."""

    name = "random"

    def __init__(self, seed: int = 0, up_bias: float = 0.55):
        self.rng = np.random.default_rng(seed)
        rest = (1.0 - up_bias) / 3
        # order matches MOVE_DIRECTIONS: left, right, up, down
        self.probs = np.array([rest, rest, up_bias, rest])

    def decide(self, state: GameState, cfg: FieldConfig) -> str | None:
        return str(self.rng.choice(MOVE_DIRECTIONS, p=self.probs))


class CautiousPolicy:
    """Looks one move ahead with the reducer and only takes moves that keep the pilot alive."""

    name = "cautious"

    def __init__(self, seed: int = 0):
        self.rng = np.random.default_rng(seed)

    def decide(self, state: GameState, cfg: FieldConfig) -> str | None:
        # a landed pilot is replaced before the move applies
        current = complete_round(state, cfg)
        sideways = ["left", "right"]
        self.rng.shuffle(sideways)
        for direction in ["up", *sideways]:
            after = reduce_state(current, Move(direction), cfg)
            if not lost_life(current, after, cfg, direction):
                return direction
        return None


class ScriptedPolicy:
    """Replays a fixed list of moves, one per move slot; None entries wait."""

    name = "scripted"

    def __init__(self, moves: list[str | None]):
        self.moves = list(moves)
        self._i = 0

    def decide(self, state: GameState, cfg: FieldConfig) -> str | None:
        if self._i >= len(self.moves):
            return None
        move = self.moves[self._i]
        self._i += 1
        return move


_POLICIES = {
    "random": RandomPolicy,
    "cautious": CautiousPolicy,
}


def load_policy(name: str, seed: int = 0) -> Policy:
    try:
        return _POLICIES[name](seed=seed)
    except KeyError as exc:
        raise ValueError(f"Unknown policy: {name!r}. Expected one of {sorted(_POLICIES)}") from exc


def available_policies() -> list[str]:
    return sorted(_POLICIES)
