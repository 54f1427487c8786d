from .entities import GameState, Pilot, Hazard, Vehicle, Plank, Crocodile, Turtle, LandingZone, encode
from .events import AdvanceTick, Begin, Event, Move
from .layout import LANE_GROUPS, initial_state
from .reducer import reduce_state, scan

__all__ = [
    'GameState', 'Pilot', 'Hazard', 'Vehicle', 'Plank', 'Crocodile', 'Turtle', 'LandingZone', 'encode',
    'AdvanceTick', 'Begin', 'Event', 'Move',
    'LANE_GROUPS', 'initial_state',
    'reduce_state', 'scan',
]
