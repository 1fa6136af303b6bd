#!/usr/bin/env python3
"""Interactive CLI to play one match of Indigo against the computer."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from random import Random
from typing import Iterable, Optional

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from pydantic import ValidationError

from indigo.config import MatchConfig
from indigo.game import new_match
from indigo.logging_utils import get_logger, setup_logging
from ui.console import ConsoleInteraction

logger = get_logger("indigo.play")


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Indigo against the computer.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible match.")
    parser.add_argument(
        "--first",
        choices=["yes", "no"],
        default=None,
        help="Skip the 'Play first?' prompt.",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default WARNING).")
    return parser.parse_args(argv)


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    try:
        config = MatchConfig.from_env(seed=args.seed, human_first=args.first, log_level=args.log_level)
    except ValidationError as exc:
        print(f"Invalid configuration:\n{exc}", file=sys.stderr)
        return 2
    setup_logging(config.log_level)

    console = ConsoleInteraction()
    console.greet()
    rng = Random(config.seed) if config.seed is not None else None
    try:
        engine = new_match(console, human_first=config.human_first, rng=rng)
    except EOFError:
        return 1
    result = engine.run()
    logger.debug("Match finished: %s", result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
