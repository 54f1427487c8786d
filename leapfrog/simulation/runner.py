"""Headless game runs: fold a scheduled event timeline through the reducer and aggregate results."""

from __future__ import annotations

import multiprocessing
import time
from typing import Any

import numpy as np

from leapfrog.config.schema import Settings
from leapfrog.core.contracts import RunResult, SimSummary
from leapfrog.core.results import save_frames_jsonl, save_result_json
from leapfrog.engine.entities import encode
from leapfrog.engine.events import Move
from leapfrog.engine.layout import LANE_GROUPS, initial_state
from leapfrog.engine.reducer import complete_round, reduce_state
from leapfrog.simulation.policies import Policy, load_policy, lost_life
from leapfrog.simulation.schedule import MoveSlot, move_slots, tick_stream, timeline

# Record one frame every this many reducer steps (keeps replays manageable)
RECORD_EVERY = 25


def simulate(policy: Policy, settings: Settings, *, seed: int = 0, duration_ms: int | None = None,
             record_every: int = RECORD_EVERY) -> RunResult:
    """Run one headless game for `duration_ms` of virtual time."""
    cfg = settings.field
    duration_ms = duration_ms or settings.sim_duration_ms
    items = timeline(
        tick_stream(LANE_GROUPS, settings.tick_periods, duration_ms),
        move_slots(settings.move_period_ms, duration_ms),
    )

    state = initial_state(cfg)
    frames = [encode(state)]
    rounds = landings = resets = steps = 0

    for item in items:
        event = item.event
        if isinstance(event, MoveSlot):
            direction = policy.decide(state, cfg)
            if direction is None:
                continue
            event = Move(direction)

        nxt = reduce_state(state, event, cfg)
        steps += 1
        if nxt.pilot.settled and not state.pilot.settled:
            landings += 1
        if nxt.restart:
            rounds += 1
        direction = event.direction if isinstance(event, Move) else None
        if lost_life(complete_round(state, cfg), nxt, cfg, direction):
            resets += 1
        state = nxt

        if steps % record_every == 0 or state.restart:
            frame = encode(state)
            frame["t"] = item.t
            frames.append(frame)

    return RunResult(
        seed=seed,
        score=state.score,
        high_score=state.high_score,
        rounds=rounds,
        landings=landings,
        resets=resets,
        events=steps,
        frames=frames,
    )


def _run_seed(args) -> RunResult:
    """Worker function: build the policy in-process and run one seed."""
    policy_name, settings, seed = args
    return simulate(load_policy(policy_name, seed=seed), settings, seed=seed)


def run_simulations(settings: Settings, policy_name: str, *, n_sims: int | None = None,
                    workers: int = 1) -> dict[str, Any]:
    """Run repeated simulations for one policy and aggregate metrics."""
    n_sims = n_sims or settings.sims_per_run
    args_list = [(policy_name, settings, seed) for seed in range(n_sims)]

    if workers > 1:
        with multiprocessing.Pool(processes=min(workers, n_sims)) as pool:
            runs = pool.map(_run_seed, args_list)
    else:
        runs = [_run_seed(a) for a in args_list]

    high_scores = [r.high_score for r in runs]
    landings = [r.landings for r in runs]
    resets = [r.resets for r in runs]
    return {
        "policy": policy_name,
        "n_sims": n_sims,
        "avg_high_score": float(np.mean(high_scores)),
        "std_high_score": float(np.std(high_scores)),
        "max_high_score": int(np.max(high_scores)),
        "avg_landings": float(np.mean(landings)),
        "avg_resets": float(np.mean(resets)),
        "total_rounds": int(np.sum([r.rounds for r in runs])),
        "runs": runs,
    }


def run_and_save(settings: Settings, policy_name: str, *, n_sims: int | None = None,
                 workers: int = 1) -> SimSummary:
    """Run a batch, save its summary JSON and the best run's replay frames."""
    print("\n" + "=" * 50)
    print(f"SIMULATION: {policy_name} policy")
    print("=" * 50)
    start = time.time()
    results = run_simulations(settings, policy_name, n_sims=n_sims, workers=workers)
    print(f"  Time: {time.time() - start:.1f}s")

    runs: list[RunResult] = results["runs"]
    best = max(runs, key=lambda r: r.high_score)
    save_frames_jsonl(settings.paths.replay_jsonl, best.frames)

    summary = {k: v for k, v in results.items() if k != "runs"}
    summary["high_scores"] = [r.high_score for r in runs]
    summary["best_seed"] = best.seed
    path = save_result_json(settings.paths.results_json, summary)

    print(
        f"  avg high score = {summary['avg_high_score']:.1f} (+/- {summary['std_high_score']:.1f}), "
        f"best = {summary['max_high_score']} (seed {best.seed})"
    )
    print(f"  avg landings = {summary['avg_landings']:.2f}, avg resets = {summary['avg_resets']:.2f}, "
          f"rounds = {summary['total_rounds']}")
    return SimSummary(policy=policy_name, results=summary, results_path=path)
