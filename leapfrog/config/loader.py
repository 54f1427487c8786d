from __future__ import annotations

from pathlib import Path

from .defaults import default_paths, default_settings
from .schema import Paths, Settings


def load_settings(*, results_dir: str | Path | None = None, ensure_dirs: bool = True, **overrides) -> Settings:
    """Load runtime settings from the defaults, then apply keyword overrides."""
    settings = default_settings()
    if results_dir is not None:
        base = default_paths(settings.paths.project_dir)
        results_dir = Path(results_dir)
        settings = settings.with_overrides(
            paths=Paths(
                project_dir=base.project_dir,
                results_dir=results_dir,
                replay_jsonl=results_dir / base.replay_jsonl.name,
                results_json=results_dir / base.results_json.name,
            )
        )
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        settings = settings.with_overrides(**overrides)
    for group, period in settings.tick_periods.items():
        if period <= 0:
            raise ValueError(f"Tick period for {group!r} must be > 0, got {period}")
    if ensure_dirs:
        settings.paths.ensure_dirs()
    return settings
