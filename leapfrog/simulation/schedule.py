"""
Deterministic event timelines for headless runs.

The interactive game gets its ticks from real timers. Here the same lane
periods are laid out on a virtual millisecond clock and merged into one
ordered stream, so a run depends only on its inputs.
"""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from leapfrog.engine.events import AdvanceTick, Begin, Event, Move


@dataclass(frozen=True)
class MoveSlot:
    """A point in time where the pilot's policy may choose a move."""


@dataclass(frozen=True, order=True)
class Timed:
    t: int
    source: int
    seq: int
    event: Event | MoveSlot = field(compare=False)


def tick_stream(
    groups: dict[str, list[str]],
    periods: dict[str, int],
    duration_ms: int,
) -> Iterator[Timed]:
    """Advance ticks for every lane group, each group on its own period.

    Every period a group emits one tick per hazard id, in order.
    """
    streams = []
    for source, (name, ids) in enumerate(groups.items(), start=1):
        period = periods.get(name)
        if period is None:
            raise ValueError(f"No tick period for {name!r}")
        if period <= 0:
            raise ValueError(f"Tick period for {name!r} must be > 0, got {period}")
        streams.append(_group_ticks(source, ids, period, duration_ms))
    return heapq.merge(*streams)


def _group_ticks(source: int, ids: list[str], period: int, duration_ms: int) -> Iterator[Timed]:
    seq = 0
    for t in range(period, duration_ms + 1, period):
        for hid in ids:
            yield Timed(t, source, seq, AdvanceTick(hid))
            seq += 1


def move_slots(period_ms: int, duration_ms: int) -> Iterator[Timed]:
    if period_ms <= 0:
        raise ValueError("period_ms must be > 0")
    for seq, t in enumerate(range(period_ms, duration_ms + 1, period_ms)):
        yield Timed(t, 0, seq, MoveSlot())


def scripted_moves(moves: Iterable[tuple[int, str]]) -> list[Timed]:
    """Fixed moves at given times, e.g. [(100, "up"), (350, "left")]."""
    return sorted(Timed(t, 0, seq, Move(d)) for seq, (t, d) in enumerate(moves))


def timeline(*streams: Iterable[Timed]) -> Iterator[Timed]:
    """The begin signal at t=0 followed by all streams merged in time order."""
    yield Timed(0, -1, 0, Begin())
    yield from heapq.merge(*streams)


def events_only(items: Iterable[Timed]) -> Iterator[Event]:
    for item in items:
        if not isinstance(item.event, MoveSlot):
            yield item.event
