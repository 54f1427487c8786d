"""
The game's state machine: a pure reducer folded over the event stream.

    state' = reduce_state(state, event, cfg)

`scan` threads one state through a sequence of events and yields each
intermediate state, which is what the renderer and the recorder consume.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Iterator

from leapfrog.config.schema import FieldConfig
from leapfrog.engine.entities import GameState, Pilot
from leapfrog.engine.events import AdvanceTick, Begin, Event, Move
from leapfrog.engine.hazards import advance_matching, with_round_speed
from leapfrog.engine.layout import initial_state
from leapfrog.engine.pilot import drift, on_river, river_move, road_move, road_tick

logger = logging.getLogger(__name__)


def new_round(state: GameState, cfg: FieldConfig) -> GameState:
    """Fresh board for the next round: hazards sped up, zones empty, score zeroed."""
    base = initial_state(cfg)
    round_index = state.round + 1
    logger.debug("round %d complete, score %d, high score %d", round_index, state.score, state.high_score)
    return replace(
        base,
        pilot=Pilot.starter(cfg),
        vehicles=with_round_speed(base.vehicles, round_index, cfg),
        planks=with_round_speed(base.planks, round_index, cfg),
        crocodiles=with_round_speed(base.crocodiles, round_index, cfg),
        turtles=with_round_speed(base.turtles, round_index, cfg),
        score=0,
        high_score=state.high_score,
        restart=True,
        init=False,
        round=round_index,
    )


def complete_round(state: GameState, cfg: FieldConfig) -> GameState:
    """Resolve a landed pilot before the next event is applied.

    The fifth landing of a round starts a new round. Earlier landings bring
    on the next pilot while the occupied zones stay filled.
    """
    pilot = state.pilot
    if pilot.settled and pilot.id == cfg.lives_per_round:
        return new_round(state, cfg)
    if pilot.settled:
        pilot = pilot.next_life(cfg)
    return replace(state, pilot=pilot, restart=False, init=False)


def _scored(state: GameState, points: int) -> tuple[int, int]:
    score = state.score + points
    return score, max(state.high_score, score)


def reduce_move(state: GameState, event: Move, cfg: FieldConfig) -> GameState:
    if not on_river(state.pilot, cfg):
        pilot, points = road_move(state.pilot, event, state.vehicles, cfg)
        score, high_score = _scored(state, points)
        return replace(state, pilot=pilot, score=score, high_score=high_score)

    pilot, points, zones = river_move(state.pilot, event, state, cfg)
    score, high_score = _scored(state, points)
    return replace(state, pilot=pilot, zones=zones, score=score, high_score=high_score)


def reduce_tick(state: GameState, event: AdvanceTick, cfg: FieldConfig) -> GameState:
    hid = event.hazard_id
    if on_river(state.pilot, cfg):
        pilot = drift(state.pilot, hid, state, cfg)
    else:
        pilot = road_tick(state.pilot, state.vehicles, cfg)
    return replace(
        state,
        pilot=pilot,
        vehicles=advance_matching(state.vehicles, hid, pilot, cfg),
        planks=advance_matching(state.planks, hid, pilot, cfg),
        crocodiles=advance_matching(state.crocodiles, hid, pilot, cfg),
        turtles=advance_matching(state.turtles, hid, pilot, cfg),
    )


def reduce_state(state: GameState, event: Event, cfg: FieldConfig) -> GameState:
    """Return the state that follows `state` after `event`."""
    match event:
        case Begin():
            return state
        case Move():
            return reduce_move(complete_round(state, cfg), event, cfg)
        case AdvanceTick():
            return reduce_tick(complete_round(state, cfg), event, cfg)
    raise ValueError(f"Unknown event: {event!r}")


def scan(events: Iterable[Event], state: GameState, cfg: FieldConfig) -> Iterator[GameState]:
    """Fold events into states, yielding every state after each event."""
    for event in events:
        state = reduce_state(state, event, cfg)
        yield state
