from __future__ import annotations

import argparse

from leapfrog.simulation.policies import available_policies
from leapfrog.ui.cli import commands


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Leapfrog")
    subparsers = parser.add_subparsers(dest="command", required=True)

    common_parent = argparse.ArgumentParser(add_help=False)
    common_parent.add_argument("--results-dir", default=None)
    common_parent.add_argument("--verbose", action="store_true", help="Log engine events")

    sub = subparsers.add_parser("play", parents=[common_parent], help="Play the game in a pygame window")
    sub.add_argument("--fps", type=int, default=None)
    sub.set_defaults(func=commands.cmd_play)

    sub = subparsers.add_parser("simulate", parents=[common_parent], help="Run headless games with a policy")
    sub.add_argument("--policy", choices=available_policies(), default="cautious")
    sub.add_argument("--sims", type=int, default=None)
    sub.add_argument("--duration", type=int, default=None, help="Virtual milliseconds per game")
    sub.add_argument("--workers", type=int, default=1)
    sub.set_defaults(func=commands.cmd_simulate)

    sub = subparsers.add_parser("report", parents=[common_parent], help="Print the saved simulation summary")
    sub.set_defaults(func=commands.cmd_report)

    sub = subparsers.add_parser("doctor", parents=[common_parent], help="Check environment/dependencies")
    sub.set_defaults(func=commands.cmd_doctor)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
