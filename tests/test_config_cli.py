"""Tests for settings loading, the doctor checks and the command-line entry point."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from leapfrog.config.defaults import TICK_PERIODS, default_settings
from leapfrog.config.loader import load_settings
from leapfrog.core.doctor import run_doctor
from leapfrog.core.results import load_result_json, save_result_json
from leapfrog.engine.layout import LANE_GROUPS
from leapfrog.ui.cli.main import build_parser, main


class TestSettings:
    def test_defaults(self):
        s = default_settings()
        assert s.field.field_width == 600
        assert s.settle_delay_ms == 100
        assert set(s.tick_periods) == set(LANE_GROUPS)

    def test_tick_periods_match_lane_groups(self):
        """Every lane group has a period and every period names a lane group."""
        assert set(TICK_PERIODS) == set(LANE_GROUPS)
        assert all(p > 0 for p in TICK_PERIODS.values())

    def test_results_dir_override(self, tmp_path):
        s = load_settings(results_dir=tmp_path / "out")
        assert s.paths.results_json == tmp_path / "out" / "results.json"
        assert (tmp_path / "out").is_dir()

    def test_none_overrides_ignored(self, tmp_path):
        s = load_settings(results_dir=tmp_path, fps=None)
        assert s.fps == default_settings().fps

    def test_unknown_override(self, tmp_path):
        with pytest.raises(ValueError, match="Unknown settings"):
            load_settings(results_dir=tmp_path, warp_speed=9)

    def test_bad_period(self, tmp_path):
        periods = dict(TICK_PERIODS, turtles=0)
        with pytest.raises(ValueError, match="turtles"):
            load_settings(results_dir=tmp_path, tick_periods=periods)


class TestResults:
    def test_schema_version_added(self, tmp_path):
        path = save_result_json(tmp_path / "r.json", {"policy": "random"})
        assert load_result_json(path) == {"schema_version": 1, "policy": "random"}

    @pytest.mark.parametrize("body", ['{"policy": "cautious"}', '{"schema_version": 2, "policy": "cautious"}', "[1, 2]"])
    def test_other_schema_rejected(self, tmp_path, body):
        """Files without the current schema version are refused rather than guessed at."""
        path = tmp_path / "results.json"
        path.write_text(body)
        with pytest.raises(ValueError, match="schema_version"):
            load_result_json(path)


class TestDoctor:
    def test_checks(self, tmp_path):
        checks = {c.name: c for c in run_doctor(load_settings(results_dir=tmp_path))}
        assert set(checks) == {"pygame", "numpy", "tick_periods", "settle_delay", "results_dir"}
        assert checks["numpy"].ok
        assert checks["tick_periods"].ok
        assert checks["results_dir"].ok

    def test_missing_group_fails(self, tmp_path):
        periods = {k: v for k, v in TICK_PERIODS.items() if k != "planks"}
        checks = {c.name: c for c in run_doctor(load_settings(results_dir=tmp_path, tick_periods=periods))}
        assert not checks["tick_periods"].ok
        assert "planks" in checks["tick_periods"].detail


class TestCli:
    def test_parser(self):
        args = build_parser().parse_args(["simulate", "--policy", "random", "--sims", "3", "--duration", "500"])
        assert args.command == "simulate"
        assert args.policy == "random"
        assert args.sims == 3
        assert args.duration == 500
        assert args.workers == 1

    def test_unknown_policy_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["simulate", "--policy", "psychic"])

    def test_report_missing(self, tmp_path, capsys):
        assert main(["report", "--results-dir", str(tmp_path)]) == 1
        assert "Missing results" in capsys.readouterr().out

    def test_report_unreadable_schema(self, tmp_path, capsys):
        (tmp_path / "results.json").write_text('{"policy": "random"}')
        assert main(["report", "--results-dir", str(tmp_path)]) == 1
        assert "[report]" in capsys.readouterr().out

    def test_simulate_then_report(self, tmp_path, capsys):
        """A short batch writes results that `report` can read back."""
        rc = main(["simulate", "--policy", "random", "--sims", "2", "--duration", "1000",
                   "--results-dir", str(tmp_path)])
        assert rc == 0
        assert (tmp_path / "results.json").exists()
        assert (tmp_path / "replay.jsonl").exists()
        assert main(["report", "--results-dir", str(tmp_path)]) == 0
        out = capsys.readouterr().out
        assert "RANDOM" in out
        assert "n_sims: 2" in out
