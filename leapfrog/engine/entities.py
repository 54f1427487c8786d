"""
Immutable game objects: the pilot, lane hazards, landing zones and the game state.

Nothing here is mutated in place. Every transition builds new values with
`dataclasses.replace` or the factory functions below.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from leapfrog.config.schema import FieldConfig
from leapfrog.engine.geometry import Rect

LaneDirection = Literal["left", "right"]

DEFAULT_SPEED = 0.5


# ─────────────────────────────────────────
# Pilot
# ─────────────────────────────────────────

@dataclass(frozen=True)
class Pilot:
    id: int
    x: float
    y: float
    # id of the river hazard the pilot is riding, "" when on foot
    carrier_id: str = ""
    # True once the pilot has landed; it no longer accepts moves
    settled: bool = False

    @classmethod
    def starter(cls, cfg: FieldConfig) -> "Pilot":
        """First pilot of a round, at the fixed start position."""
        return cls(1, cfg.start_x, cfg.start_y)

    def at_start(self, cfg: FieldConfig) -> "Pilot":
        """Same life, back at the start position with no carrier (squashed or drowned)."""
        return Pilot(self.id, cfg.start_x, cfg.start_y)

    def next_life(self, cfg: FieldConfig) -> "Pilot":
        """A fresh pilot for the next landing of the round."""
        return Pilot(self.id + 1, cfg.start_x, cfg.start_y)


# ─────────────────────────────────────────
# Hazards
# ─────────────────────────────────────────

@dataclass(frozen=True)
class Hazard:
    id: str
    x: float
    y: float
    width: float
    height: float
    direction: LaneDirection
    speed: float

    kind = "hazard"


@dataclass(frozen=True)
class Vehicle(Hazard):
    kind = "vehicle"


@dataclass(frozen=True)
class Plank(Hazard):
    kind = "plank"


@dataclass(frozen=True)
class Crocodile(Hazard):
    kind = "crocodile"

    def mouth(self, cfg: FieldConfig) -> Rect:
        """The jaws: a strip at the crocodile's front (left) edge, full body height."""
        return Rect(self.x, self.y, cfg.mouth_width, self.height)


@dataclass(frozen=True)
class Turtle(Hazard):
    hidden: bool = False
    # x interval (inclusive) in which the turtle is under water
    dive_range: tuple[float, float] = (0.0, 0.0)

    kind = "turtle"


@dataclass(frozen=True)
class LandingZone:
    x: float
    y: float
    width: float
    height: float
    occupied: bool = False


def make_vehicle(id: str, x: float, y: float, direction: LaneDirection, speed: float = DEFAULT_SPEED) -> Vehicle:
    return Vehicle(id, x, y, 50, 40, direction, speed)


def make_plank(id: str, x: float, y: float, direction: LaneDirection, speed: float = DEFAULT_SPEED) -> Plank:
    return Plank(id, x, y, 70, 40, direction, speed)


def make_crocodile(id: str, x: float, y: float, direction: LaneDirection, speed: float = DEFAULT_SPEED) -> Crocodile:
    return Crocodile(id, x, y, 80, 40, direction, speed)


def make_turtle(
    id: str,
    x: float,
    y: float,
    direction: LaneDirection,
    dive_range: tuple[float, float],
    speed: float = DEFAULT_SPEED,
) -> Turtle:
    return Turtle(id, x, y, 50, 40, direction, speed, hidden=False, dive_range=tuple(dive_range))


def make_zone(x: float) -> LandingZone:
    return LandingZone(x, 50, 104, 50)


# ─────────────────────────────────────────
# Game state
# ─────────────────────────────────────────

@dataclass(frozen=True)
class GameState:
    pilot: Pilot
    vehicles: tuple[Vehicle, ...]
    planks: tuple[Plank, ...]
    crocodiles: tuple[Crocodile, ...]
    turtles: tuple[Turtle, ...]
    zones: tuple[LandingZone, ...]
    score: int = 0
    high_score: int = 0
    # True on the first state of a new round (after five landings)
    restart: bool = False
    # True only for the untouched starting state
    init: bool = True
    # completed rounds so far
    round: int = 0

    def hazards(self) -> tuple[Hazard, ...]:
        return self.vehicles + self.planks + self.crocodiles + self.turtles

    def occupied_zones(self) -> int:
        return sum(1 for z in self.zones if z.occupied)


def encode(state: GameState) -> dict[str, Any]:
    """Encode a state as a JSON-ready dict for replays and recordings."""
    p = state.pilot
    return {
        "pilot": {"id": p.id, "x": p.x, "y": p.y, "carrier": p.carrier_id, "settled": p.settled},
        "hazards": [
            {"id": h.id, "kind": h.kind, "x": round(h.x, 3), "speed": round(h.speed, 3),
             **({"hidden": h.hidden} if isinstance(h, Turtle) else {})}
            for h in state.hazards()
        ],
        "zones": [z.occupied for z in state.zones],
        "score": state.score,
        "high_score": state.high_score,
        "round": state.round,
        "restart": state.restart,
    }
