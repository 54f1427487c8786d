from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path


@dataclass(frozen=True)
class FieldConfig:
    """Play-field geometry and scoring rules shared by every engine function."""

    field_width: int = 600
    field_height: int = 600

    pilot_radius: int = 20
    step_x: int = 5
    step_y: int = 50
    start_x: float = 250
    start_y: float = 580

    # Pilot y above this line is on the river, below it on the road.
    river_boundary_y: float = 350
    # Pilot y at or below this line (numerically >=) is the grass strip between road and river.
    safe_strip_y: float = 330

    mouth_width: float = 15

    road_step_score: int = 10
    carrier_step_score: int = 10
    landing_score: int = 100

    speed_increment: float = 0.2
    lives_per_round: int = 5


@dataclass(frozen=True)
class Paths:
    project_dir: Path
    results_dir: Path

    replay_jsonl: Path
    results_json: Path

    def ensure_dirs(self) -> None:
        self.results_dir.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class Settings:
    field: FieldConfig
    paths: Paths

    # Lane group name -> tick period in milliseconds.
    tick_periods: dict[str, int] = field(default_factory=dict)
    settle_delay_ms: int = 100
    fps: int = 60

    sims_per_run: int = 20
    sim_duration_ms: int = 60_000
    move_period_ms: int = 250

    def with_overrides(self, **kwargs) -> "Settings":
        known = {f.name for f in fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise ValueError(f"Unknown settings: {unknown}. Expected some of {sorted(known)}")
        return replace(self, **kwargs)
