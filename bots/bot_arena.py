"""Simple bot arena for Indigo."""

from __future__ import annotations

import argparse
from random import Random
from typing import Dict, Iterable, List, Optional

from pydantic import ValidationError

from indigo.config import MatchConfig
from indigo.game import EndReason, GameEngine
from indigo.interaction import Interaction
from indigo.logging_utils import get_logger, setup_logging
from indigo.players import ComputerPlayer
from indigo.strategy import OpponentStrategy

from .random_bot import RandomStrategy

logger = get_logger(__name__)

BOT_REGISTRY: Dict[str, type[OpponentStrategy]] = {
    "indigo": OpponentStrategy,
    "random": RandomStrategy,
}


def play_match(
    bot_a: str,
    bot_b: str,
    *,
    first_player: int = 0,
    seed: Optional[int] = None,
    interaction: Optional[Interaction] = None,
) -> GameEngine:
    """Play one headless match; a single seeded RNG drives the deck and both bots."""
    rng = Random(seed)
    strategy_a = BOT_REGISTRY[bot_a](rng.choice)
    strategy_b = BOT_REGISTRY[bot_b](rng.choice)
    players = (
        ComputerPlayer(strategy_a, role=f"{strategy_a.name} A"),
        ComputerPlayer(strategy_b, role=f"{strategy_b.name} B"),
    )
    engine = GameEngine(
        players=players,
        first_player=first_player,
        interaction=interaction or Interaction(),
        rng=rng,
    )
    engine.run()
    return engine


def run_match(
    bot_a: str,
    bot_b: str,
    *,
    n_matches: int = 10,
    seed: Optional[int] = None,
) -> dict:
    totals = [0, 0]
    wins = [0, 0]
    history: List[dict] = []
    for idx in range(n_matches):
        match_seed = None if seed is None else seed + idx
        engine = play_match(bot_a, bot_b, first_player=idx % 2, seed=match_seed)
        result = engine.result
        assert result is not None and result.reason is EndReason.NATURAL_END
        board = result.scoreboard
        assert board is not None
        totals[0] += board.scores[0]
        totals[1] += board.scores[1]
        if board.scores[0] != board.scores[1]:
            wins[int(board.scores[1] > board.scores[0])] += 1
        history.append(
            {
                "scores": board.scores,
                "cards": board.cards,
                "first_player": idx % 2,
                "turns": len(engine.history),
            }
        )
        logger.info("Match %d: %s", idx + 1, board)
    return {"totals": totals, "wins": wins, "history": history}


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run computer-vs-computer Indigo matches.")
    parser.add_argument("--bot-a", default="indigo", choices=BOT_REGISTRY.keys())
    parser.add_argument("--bot-b", default="random", choices=BOT_REGISTRY.keys())
    parser.add_argument("--n", type=int, default=None, help="Number of matches to play.")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args(argv)

    try:
        config = MatchConfig.from_env(seed=args.seed, matches=args.n, log_level=args.log_level)
    except ValidationError as exc:
        parser.error(str(exc))
    setup_logging(config.log_level)

    results = run_match(args.bot_a, args.bot_b, n_matches=config.matches, seed=config.seed)

    print(f"Total points after {config.matches} matches: {results['totals']}")
    name_a = BOT_REGISTRY[args.bot_a].name
    name_b = BOT_REGISTRY[args.bot_b].name
    print(f"Wins: {name_a} {results['wins'][0]} - {name_b} {results['wins'][1]}")


if __name__ == "__main__":
    main()
