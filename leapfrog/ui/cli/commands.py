from __future__ import annotations

import logging
from pathlib import Path

from leapfrog.config.loader import load_settings
from leapfrog.core.doctor import run_doctor
from leapfrog.core.results import load_result_json
from leapfrog.simulation.runner import run_and_save


def _configure_logging(args) -> None:
    if getattr(args, "verbose", False):
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s")


def cmd_play(args):
    _configure_logging(args)
    settings = load_settings(results_dir=args.results_dir, fps=args.fps)
    try:
        from leapfrog.ui.app_game import main as play
    except ImportError as exc:
        print(f"[play] pygame is required to play: {exc}")
        return 1
    try:
        return play(settings)
    except RuntimeError as exc:
        print(f"[play] {exc}")
        return 1


def cmd_simulate(args):
    _configure_logging(args)
    settings = load_settings(results_dir=args.results_dir, sim_duration_ms=args.duration)
    summary = run_and_save(settings, args.policy, n_sims=args.sims, workers=args.workers)
    print(f"\n[simulate] Saved {summary.results_path}")
    return 0


def cmd_report(args):
    settings = load_settings(results_dir=args.results_dir)
    path = Path(settings.paths.results_json)
    if not path.exists():
        print(f"[report] Missing results: {path}")
        return 1
    try:
        data = load_result_json(path)
    except ValueError as exc:
        print(f"[report] {exc}")
        return 1
    print(f"\n{data.get('policy', 'unknown').upper()} ({path})")
    print(f"  schema_version: {data.get('schema_version', 'n/a')}")
    for key in ("n_sims", "avg_high_score", "std_high_score", "max_high_score",
                "avg_landings", "avg_resets", "total_rounds", "best_seed"):
        if key in data:
            print(f"  {key}: {data[key]}")
    return 0


def cmd_doctor(args):
    settings = load_settings(results_dir=args.results_dir)
    checks = run_doctor(settings)
    ok_count = 0
    for chk in checks:
        mark = "OK" if chk.ok else "FAIL"
        print(f"[{mark}] {chk.name}: {chk.detail}")
        ok_count += int(chk.ok)
    print(f"\n{ok_count}/{len(checks)} checks passing")
    return 0 if ok_count == len(checks) else 1
