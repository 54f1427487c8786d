from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class RunResult:
    seed: int
    score: int
    high_score: int
    rounds: int
    landings: int
    resets: int
    events: int
    frames: list[dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class SimSummary:
    policy: str
    results: dict[str, Any]
    results_path: Path | None = None
