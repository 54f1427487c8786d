"""
Pilot movement and its interactions with road vehicles, river carriers and landing zones.

All functions are pure: they take the current pilot (and the lanes it can touch)
and return the next pilot, plus points earned where a move scores.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from leapfrog.config.schema import FieldConfig
from leapfrog.engine.entities import GameState, Hazard, LandingZone, Pilot, Vehicle
from leapfrog.engine.events import Move
from leapfrog.engine.geometry import contains, overlaps, pilot_box, rect_of
from leapfrog.engine.hazards import at_edge, find_by_id

logger = logging.getLogger(__name__)

# direction -> (dx, dy) in steps
STEPS = {
    "left": (-1, 0),
    "right": (1, 0),
    "up": (0, -1),
    "down": (0, 1),
}


def on_river(pilot: Pilot, cfg: FieldConfig) -> bool:
    return pilot.y < cfg.river_boundary_y


def move(pilot: Pilot, direction: str, cfg: FieldConfig) -> Pilot:
    """Step the pilot one move; a step that would leave the field is ignored."""
    dx, dy = STEPS[direction]
    x = pilot.x + dx * cfg.step_x
    y = pilot.y + dy * cfg.step_y
    r = cfg.pilot_radius
    if not (r <= x <= cfg.field_width - r and r <= y <= cfg.field_height - r):
        return pilot
    return replace(pilot, x=x, y=y)


# ─────────────────────────────────────────
# Road
# ─────────────────────────────────────────

def hits_vehicle(pilot: Pilot, vehicles: tuple[Vehicle, ...], cfg: FieldConfig) -> bool:
    box = pilot_box(pilot, cfg)
    return any(overlaps(box, rect_of(v)) for v in vehicles)


def road_move(pilot: Pilot, event: Move, vehicles: tuple[Vehicle, ...], cfg: FieldConfig) -> tuple[Pilot, int]:
    """Move on the road. A vehicle hit sends the pilot back to start; a clean step up scores."""
    moved = move(pilot, event.direction, cfg)
    if hits_vehicle(moved, vehicles, cfg):
        logger.debug("pilot %d squashed at (%.1f, %.1f)", moved.id, moved.x, moved.y)
        return moved.at_start(cfg), 0
    return moved, cfg.road_step_score if event.is_up else 0


def road_tick(pilot: Pilot, vehicles: tuple[Vehicle, ...], cfg: FieldConfig) -> Pilot:
    """Passive tick on the road: a vehicle driving into the pilot squashes it."""
    if hits_vehicle(pilot, vehicles, cfg):
        logger.debug("pilot %d run over at (%.1f, %.1f)", pilot.id, pilot.x, pilot.y)
        return pilot.at_start(cfg)
    return pilot


# ─────────────────────────────────────────
# River
# ─────────────────────────────────────────

def in_mouth(pilot: Pilot, state: GameState, cfg: FieldConfig) -> bool:
    box = pilot_box(pilot, cfg)
    return any(overlaps(box, c.mouth(cfg)) for c in state.crocodiles)


def carrier_under(pilot: Pilot, state: GameState, cfg: FieldConfig) -> Hazard | None:
    """The plank, crocodile or surfaced turtle the pilot stands fully on, if any."""
    box = pilot_box(pilot, cfg)
    candidates = state.planks + state.crocodiles + tuple(t for t in state.turtles if not t.hidden)
    for h in candidates:
        if contains(rect_of(h), box):
            return h
    return None


def free_zone_under(pilot: Pilot, zones: tuple[LandingZone, ...], cfg: FieldConfig) -> int | None:
    box = pilot_box(pilot, cfg)
    for i, z in enumerate(zones):
        if not z.occupied and contains(rect_of(z), box):
            return i
    return None


def river_move(
    pilot: Pilot, event: Move, state: GameState, cfg: FieldConfig
) -> tuple[Pilot, int, tuple[LandingZone, ...]]:
    """Move on the river and resolve where the pilot ends up.

    In order: crocodile jaws kill; a carrier is boarded; a free landing
    zone is settled; the grass strip is safe ground; anything else is open
    water and the pilot drowns.

    Returns:
        (pilot, points, zones) with `zones` updated when the pilot settles.
    """
    moved = move(pilot, event.direction, cfg)
    zones = state.zones

    if in_mouth(moved, state, cfg):
        logger.debug("pilot %d bitten at (%.1f, %.1f)", moved.id, moved.x, moved.y)
        return moved.at_start(cfg), 0, zones

    carrier = carrier_under(moved, state, cfg)
    if carrier is not None:
        points = cfg.carrier_step_score if event.is_up else 0
        return replace(moved, carrier_id=carrier.id), points, zones

    idx = free_zone_under(moved, zones, cfg)
    if idx is not None:
        logger.debug("pilot %d settled in zone %d", moved.id, idx)
        zones = tuple(replace(z, occupied=True) if i == idx else z for i, z in enumerate(zones))
        return replace(moved, carrier_id="", settled=True), cfg.landing_score, zones

    if moved.y >= cfg.safe_strip_y:
        return replace(moved, carrier_id=""), 0, zones

    logger.debug("pilot %d drowned at (%.1f, %.1f)", moved.id, moved.x, moved.y)
    return moved.at_start(cfg), 0, zones


def carrier_lane(pilot: Pilot, state: GameState) -> tuple[Hazard, ...]:
    """The river lane whose vertical band holds the pilot, or () when between lanes."""
    for lane in (state.planks, state.crocodiles, state.turtles):
        if any(h.y <= pilot.y < h.y + h.height for h in lane):
            return lane
    return ()


def drift(pilot: Pilot, hazard_id: str, state: GameState, cfg: FieldConfig) -> Pilot:
    """Passive tick on the river: ride along when the ticking hazard is the pilot's carrier.

    A carrier about to wrap past the field edge drops the pilot in the water.
    A stale carrier id (no such hazard in the pilot's lane) means no carrier.
    """
    if not pilot.carrier_id:
        return pilot
    carrier = find_by_id(carrier_lane(pilot, state), pilot.carrier_id)
    if carrier is None or carrier.id != hazard_id:
        return pilot
    if at_edge(carrier, cfg):
        logger.debug("pilot %d carried off the edge by %s", pilot.id, carrier.id)
        return pilot.at_start(cfg)
    dx = carrier.speed if carrier.direction == "right" else -carrier.speed
    return replace(pilot, x=pilot.x + dx)
