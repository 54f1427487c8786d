"""Tests for leapfrog.engine.reducer: event dispatch, rounds, scoring and high score."""

import sys
from dataclasses import replace
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from leapfrog.config.schema import FieldConfig
from leapfrog.engine.entities import Pilot, make_plank, make_turtle, make_vehicle
from leapfrog.engine.events import AdvanceTick, Begin, Move
from leapfrog.engine.layout import LANE_GROUPS, ZONE_XS, initial_state
from leapfrog.engine.reducer import complete_round, reduce_state, scan
from leapfrog.simulation.policies import RandomPolicy

CFG = FieldConfig()
START = (250, 580)
ZONE_CENTERS = [x + 52 for x in ZONE_XS]


def bare_state(pilot=None):
    state = replace(initial_state(CFG), vehicles=(), planks=(), crocodiles=(), turtles=())
    return replace(state, pilot=pilot) if pilot is not None else state


def landed(state, life, zone):
    """State with pilot `life` settled in zone index `zone`."""
    zones = tuple(replace(z, occupied=True) if i <= zone else z for i, z in enumerate(state.zones))
    pilot = Pilot(life, ZONE_CENTERS[zone], 80, settled=True)
    return replace(state, pilot=pilot, zones=zones)


class TestBegin:
    def test_begin_returns_state_unchanged(self):
        """The begin signal hands back the starting state as is."""
        state = initial_state(CFG)
        assert reduce_state(state, Begin(), CFG) == state
        assert reduce_state(state, Begin(), CFG).init is True

    def test_first_real_event_clears_init(self):
        state = reduce_state(initial_state(CFG), AdvanceTick("car1a"), CFG)
        assert state.init is False
        assert state.restart is False


class TestMoves:
    def test_start_hop_scores_10(self):
        """Pilot at (250, 580) hops up with no vehicle in the way: +10 and y - 50."""
        state = bare_state()
        after = reduce_state(state, Move("up"), CFG)
        assert after.score == state.score + 10
        assert (after.pilot.x, after.pilot.y) == (250, 530)
        assert after.high_score == 10

    def test_squash_keeps_score(self):
        state = replace(bare_state(), score=40, high_score=90,
                        vehicles=(make_vehicle("car1b", 200, 510, "right"),))
        after = reduce_state(state, Move("up"), CFG)
        assert (after.pilot.x, after.pilot.y) == START
        assert after.score == 40
        assert after.high_score == 90

    def test_road_rules_chosen_by_pre_move_y(self):
        """A hop up from the first road lane onto the grass strip uses road scoring."""
        state = bare_state(Pilot(1, 250, 380))
        after = reduce_state(state, Move("up"), CFG)
        assert (after.pilot.x, after.pilot.y) == (250, 330)
        assert after.score == 10

    def test_settle_through_reducer(self):
        state = bare_state(Pilot(1, ZONE_CENTERS[2], 130))
        after = reduce_state(state, Move("up"), CFG)
        assert after.pilot.settled is True
        assert after.zones[2].occupied is True
        assert after.score == 100
        assert after.occupied_zones() == 1

    def test_settled_pilot_is_replaced_before_move(self):
        """A settled pilot cannot move; the next event brings on the next life at start."""
        state = landed(bare_state(), life=1, zone=0)
        after = reduce_state(state, Move("left"), CFG)
        assert after.pilot.id == 2
        assert (after.pilot.x, after.pilot.y) == (245, 580)
        assert after.zones[0].occupied is True


class TestTicks:
    def test_tick_advances_only_named_hazard(self):
        state = initial_state(CFG)
        after = reduce_state(state, AdvanceTick("plank2b"), CFG)
        changed = [h.id for h, h0 in zip(after.hazards(), state.hazards()) if h != h0]
        assert changed == ["plank2b"]
        assert after.pilot == state.pilot

    def test_unknown_tick_is_noop(self):
        """An id that names no hazard changes nothing on the board."""
        state = initial_state(CFG)
        after = reduce_state(state, AdvanceTick("ufo1a"), CFG)
        assert after.hazards() == state.hazards()
        assert after.pilot == state.pilot

    def test_pilot_rides_plank(self):
        plank = make_plank("plank1b", 200, 210, "left")
        state = replace(bare_state(Pilot(1, 235, 230, carrier_id="plank1b")), planks=(plank,))
        after = reduce_state(state, AdvanceTick("plank1b"), CFG)
        assert after.pilot.x == pytest.approx(234.5)
        assert after.planks[0].x == pytest.approx(199.5)

    def test_ridden_turtle_does_not_dive(self):
        """The turtle under the pilot stays up inside its dive range; a free one dives."""
        turtle = make_turtle("turtle1a", 99.8, 260, "right", (100, 150))
        ridden = replace(bare_state(Pilot(1, 125, 280, carrier_id="turtle1a")), turtles=(turtle,))
        free = replace(bare_state(), turtles=(turtle,))
        assert reduce_state(ridden, AdvanceTick("turtle1a"), CFG).turtles[0].hidden is False
        assert reduce_state(free, AdvanceTick("turtle1a"), CFG).turtles[0].hidden is True

    def test_car_runs_over_standing_pilot(self):
        state = replace(bare_state(Pilot(1, 300, 480)), vehicles=(make_vehicle("car2b", 290, 460, "right"),))
        after = reduce_state(state, AdvanceTick("car2b"), CFG)
        assert (after.pilot.x, after.pilot.y) == START

    def test_safe_strip_tick(self):
        """On the grass strip with no carrier, ticks never drown the pilot."""
        state = replace(initial_state(CFG), pilot=Pilot(1, 250, 330))
        for hid in LANE_GROUPS["turtles"] + LANE_GROUPS["planks"]:
            state = reduce_state(state, AdvanceTick(hid), CFG)
        assert (state.pilot.x, state.pilot.y) == (250, 330)


class TestRounds:
    def test_next_life_after_landing(self):
        state = landed(bare_state(), life=2, zone=1)
        after = complete_round(state, CFG)
        assert after.pilot == Pilot(3, 250, 580)
        assert after.restart is False
        assert [z.occupied for z in after.zones] == [True, True, False, False, False]

    def test_fifth_landing_starts_new_round(self):
        """Five landings reset the board, zero the score, keep the high score and set restart."""
        state = replace(landed(initial_state(CFG), life=5, zone=4), score=740, high_score=740)
        after = reduce_state(state, AdvanceTick("ufo1a"), CFG)
        assert after.restart is True
        assert after.init is False
        assert after.score == 0
        assert after.high_score == 740
        assert after.round == 1
        assert after.pilot == Pilot(1, 250, 580)
        assert not any(z.occupied for z in after.zones)

    def test_five_consecutive_settles(self):
        """Drive five landings through the reducer; the event after the fifth restarts the round."""
        state = bare_state()
        for i, cx in enumerate(ZONE_CENTERS):
            state = replace(state, pilot=replace(state.pilot, x=cx, y=130))
            state = reduce_state(state, Move("up"), CFG)
            assert state.pilot.settled is True
            assert state.pilot.id == i + 1
            state = reduce_state(state, AdvanceTick("ufo1a"), CFG)
        assert state.restart is True
        assert not any(z.occupied for z in state.zones)
        assert state.score == 0
        assert state.high_score == 500

    def test_restart_flag_cleared_next_event(self):
        state = reduce_state(landed(initial_state(CFG), life=5, zone=4), AdvanceTick("ufo1a"), CFG)
        assert reduce_state(state, AdvanceTick("ufo1a"), CFG).restart is False

    @pytest.mark.parametrize("rounds", [1, 2, 5])
    def test_speed_after_rounds(self, rounds):
        """After round N every hazard moves at 0.5 + 0.2 * N."""
        state = initial_state(CFG)
        for _ in range(rounds):
            state = reduce_state(landed(state, life=5, zone=4), AdvanceTick("ufo1a"), CFG)
        assert state.round == rounds
        for h in state.hazards():
            assert h.speed == pytest.approx(0.5 + 0.2 * rounds)


class TestScan:
    def test_scan_yields_state_per_event(self):
        events = [Begin(), AdvanceTick("car1a"), Move("left"), AdvanceTick("croc1a")]
        states = list(scan(events, initial_state(CFG), CFG))
        assert len(states) == 4
        assert states[0] == initial_state(CFG)

    def test_high_score_is_running_max(self):
        """Every transition keeps high_score == max(previous high score, new score)."""
        policy = RandomPolicy(seed=7, up_bias=0.7)
        state = initial_state(CFG)
        ticks = [hid for ids in LANE_GROUPS.values() for hid in ids]
        for step in range(3000):
            if step % 4 == 0:
                event = Move(policy.decide(state, CFG))
            else:
                event = AdvanceTick(ticks[step % len(ticks)])
            after = reduce_state(state, event, CFG)
            assert after.high_score == max(state.high_score, after.score)
            if after.restart:
                assert after.score == 0
            state = after

    def test_states_are_not_mutated(self):
        state = initial_state(CFG)
        snapshot = initial_state(CFG)
        list(scan([AdvanceTick(h.id) for h in state.hazards()] * 3, state, CFG))
        assert state == snapshot
