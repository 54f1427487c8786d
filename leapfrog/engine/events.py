"""Inputs to the reducer: begin signal, pilot moves and per-hazard advance ticks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

MoveDirection = Literal["left", "right", "up", "down"]
MOVE_DIRECTIONS: tuple[str, ...] = ("left", "right", "up", "down")


@dataclass(frozen=True)
class Begin:
    pass


@dataclass(frozen=True)
class Move:
    direction: MoveDirection

    def __post_init__(self):
        if self.direction not in MOVE_DIRECTIONS:
            raise ValueError(f"Unknown move direction: {self.direction!r}. Expected one of {MOVE_DIRECTIONS}")

    @property
    def is_up(self) -> bool:
        return self.direction == "up"


@dataclass(frozen=True)
class AdvanceTick:
    hazard_id: str


Event = Union[Begin, Move, AdvanceTick]
