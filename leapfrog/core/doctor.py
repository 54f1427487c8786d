from __future__ import annotations

import importlib.util
from dataclasses import dataclass

from leapfrog.config.schema import Settings
from leapfrog.engine.layout import LANE_GROUPS


@dataclass(frozen=True)
class Check:
    name: str
    ok: bool
    detail: str


def _has_module(name: str) -> bool:
    return importlib.util.find_spec(name) is not None


def run_doctor(settings: Settings) -> list[Check]:
    checks: list[Check] = []
    checks.append(Check("pygame", _has_module("pygame"), "required for the interactive game"))
    checks.append(Check("numpy", _has_module("numpy"), "required for simulations"))

    missing = sorted(set(LANE_GROUPS) - set(settings.tick_periods))
    checks.append(Check("tick_periods", not missing, f"missing={missing}" if missing else "all lane groups timed"))
    checks.append(Check("settle_delay", settings.settle_delay_ms >= 0, f"{settings.settle_delay_ms} ms"))

    paths = settings.paths
    checks.append(Check("results_dir", paths.results_dir.exists(), str(paths.results_dir)))
    return checks
