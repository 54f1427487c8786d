from __future__ import annotations

from pathlib import Path

from .schema import FieldConfig, Paths, Settings

PROJECT_DIR = Path(__file__).resolve().parents[2]

DEFAULT_FIELD = FieldConfig()

# Lane group -> tick period (ms). Every period emits one advance tick per hazard in the group.
TICK_PERIODS = {
    "cars_outer": 50,
    "cars_inner": 30,
    "planks": 50,
    "turtles": 40,
    "crocodiles": 30,
}

# Presentation-only pause before a round restart is drawn.
SETTLE_DELAY_MS = 100
FPS = 60

SIMS_PER_RUN = 20
SIM_DURATION_MS = 60_000
MOVE_PERIOD_MS = 250


def default_paths(project_dir: Path = PROJECT_DIR) -> Paths:
    results_dir = project_dir / "results"
    return Paths(
        project_dir=project_dir,
        results_dir=results_dir,
        replay_jsonl=results_dir / "replay.jsonl",
        results_json=results_dir / "results.json",
    )


def default_settings() -> Settings:
    return Settings(
        field=DEFAULT_FIELD,
        paths=default_paths(),
        tick_periods=dict(TICK_PERIODS),
        settle_delay_ms=SETTLE_DELAY_MS,
        fps=FPS,
        sims_per_run=SIMS_PER_RUN,
        sim_duration_ms=SIM_DURATION_MS,
        move_period_ms=MOVE_PERIOD_MS,
    )
