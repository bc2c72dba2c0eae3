"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from antichess.console import ConsoleSession
from antichess.core.rules import RuleOptions
from antichess.game.controller import GameController

_RULE_PRESETS = {
    "standard": RuleOptions.standard,
    "original": RuleOptions.original,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="antichess",
        description="Play anti-chess in the terminal: captures are mandatory.",
    )
    parser.add_argument(
        "--rules",
        choices=sorted(_RULE_PRESETS),
        default="standard",
        help="rule preset (default: %(default)s)",
    )
    parser.add_argument(
        "--position",
        metavar="PLACEMENT",
        help="start from a FEN piece-placement field instead of the initial setup",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Launch a two-player console game."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    ctrl = GameController()
    try:
        ctrl.new_game(_RULE_PRESETS[args.rules](), placement=args.position)
    except ValueError as exc:
        print(f"antichess: {exc}", file=sys.stderr)
        return 2

    ConsoleSession(ctrl).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
