"""Round-start layout of the board and the hazard ids of each ticking lane group."""

from __future__ import annotations

from leapfrog.config.schema import FieldConfig
from leapfrog.engine.entities import (
    GameState,
    Pilot,
    make_crocodile,
    make_plank,
    make_turtle,
    make_vehicle,
    make_zone,
)

LANE_XS = (0, 200, 400)
SUFFIXES = ("a", "b", "c")

# lane number -> (y, direction)
VEHICLE_LANES = {1: (510, "right"), 2: (460, "right"), 3: (410, "left"), 4: (360, "left")}
PLANK_LANES = {1: (210, "left"), 2: (160, "right")}
CROCODILE_LANES = {1: (110, "left")}

TURTLE_LANE_Y = 260
TURTLES = (
    ("turtle1a", 0, (100, 150)),
    ("turtle1b", 100, (50, 100)),
    ("turtle1c", 200, (400, 450)),
    ("turtle1d", 300, (450, 500)),
    ("turtle1e", 400, (200, 250)),
)

ZONE_XS = (20, 134, 248, 362, 476)


def _lane_ids(prefix: str, lane: int) -> list[str]:
    return [f"{prefix}{lane}{s}" for s in SUFFIXES]


def initial_state(cfg: FieldConfig) -> GameState:
    """The fixed starting state of the game."""
    vehicles = tuple(
        make_vehicle(hid, x, y, d)
        for lane, (y, d) in VEHICLE_LANES.items()
        for hid, x in zip(_lane_ids("car", lane), LANE_XS)
    )
    planks = tuple(
        make_plank(hid, x, y, d)
        for lane, (y, d) in PLANK_LANES.items()
        for hid, x in zip(_lane_ids("plank", lane), LANE_XS)
    )
    crocodiles = tuple(
        make_crocodile(hid, x, y, d)
        for lane, (y, d) in CROCODILE_LANES.items()
        for hid, x in zip(_lane_ids("croc", lane), LANE_XS)
    )
    turtles = tuple(make_turtle(hid, x, TURTLE_LANE_Y, "right", r) for hid, x, r in TURTLES)
    return GameState(
        pilot=Pilot.starter(cfg),
        vehicles=vehicles,
        planks=planks,
        crocodiles=crocodiles,
        turtles=turtles,
        zones=tuple(make_zone(x) for x in ZONE_XS),
    )


# Lane group -> hazard ids, in the order each period emits them.
LANE_GROUPS: dict[str, list[str]] = {
    "cars_outer": _lane_ids("car", 1) + _lane_ids("car", 3),
    "cars_inner": _lane_ids("car", 2) + _lane_ids("car", 4),
    "planks": _lane_ids("plank", 1) + _lane_ids("plank", 2),
    "turtles": [hid for hid, _, _ in TURTLES],
    "crocodiles": _lane_ids("croc", 1),
}
