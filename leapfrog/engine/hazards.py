"""Lane hazard motion: wrap-around advance, turtle diving and per-round speed-up."""

from __future__ import annotations

from dataclasses import replace
from typing import TypeVar

from leapfrog.config.schema import FieldConfig
from leapfrog.engine.entities import Hazard, Pilot, Turtle

H = TypeVar("H", bound=Hazard)


def wrap_x(x: float, width: float, direction: str, speed: float, cfg: FieldConfig) -> float:
    """Shift x by `speed` along the lane and wrap into [0, field_width - width)."""
    span = cfg.field_width - width
    shifted = x + speed if direction == "right" else x - speed
    # Python's % floors, so a leftward overshoot comes back as shifted + span.
    return shifted % span


def is_submerged(turtle: Turtle, x: float, pilot: Pilot) -> bool:
    lo, hi = turtle.dive_range
    return lo <= x <= hi and pilot.carrier_id != turtle.id


def advance(hazard: H, pilot: Pilot, cfg: FieldConfig) -> H:
    """Move one hazard a single step. Turtles dive inside their range unless ridden."""
    x = wrap_x(hazard.x, hazard.width, hazard.direction, hazard.speed, cfg)
    if isinstance(hazard, Turtle):
        return replace(hazard, x=x, hidden=is_submerged(hazard, x, pilot))
    return replace(hazard, x=x)


def advance_matching(hazards: tuple[H, ...], target_id: str, pilot: Pilot, cfg: FieldConfig) -> tuple[H, ...]:
    """Advance only the hazard whose id matches; an unknown id leaves the lane as is."""
    if not any(h.id == target_id for h in hazards):
        return hazards
    return tuple(advance(h, pilot, cfg) if h.id == target_id else h for h in hazards)


def at_edge(hazard: Hazard, cfg: FieldConfig) -> bool:
    """True if the hazard's next step crosses the edge it is heading for and wraps."""
    if hazard.direction == "right":
        return hazard.x + hazard.speed >= cfg.field_width - hazard.width
    return hazard.x - hazard.speed < 0


def find_by_id(hazards: tuple[H, ...], hazard_id: str) -> H | None:
    for h in hazards:
        if h.id == hazard_id:
            return h
    return None


def with_round_speed(base: tuple[H, ...], round_index: int, cfg: FieldConfig) -> tuple[H, ...]:
    """Round-start hazards with one speed increment per completed round."""
    return tuple(replace(h, speed=h.speed + cfg.speed_increment * round_index) for h in base)
