"""Match scoring helpers for Indigo."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from .cards import Card, Rank


class ScoringError(ValueError):
    """Raised when scoring input is malformed."""


# Ranks worth one point each; every other rank scores nothing.
POINT_RANKS = frozenset({Rank.ACE, Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING})

# Awarded once at the end of the match for the larger won-pile.
MOST_CARDS_BONUS = 3


@dataclass(frozen=True)
class Scoreboard:
    scores: Tuple[int, int]
    cards: Tuple[int, int]


def card_points(card: Card) -> int:
    return 1 if card.rank in POINT_RANKS else 0


def base_score(cards: Iterable[Card]) -> int:
    return sum(card_points(card) for card in cards)


def bonus_seat(card_counts: Sequence[int], first_player: int) -> int:
    """Return the seat that receives the end-of-match bonus."""
    if card_counts[0] > card_counts[1]:
        return 0
    if card_counts[1] > card_counts[0]:
        return 1
    return first_player


def score_match(
    won_piles: Sequence[Sequence[Card]],
    *,
    first_player: int,
    final: bool = False,
) -> Scoreboard:
    if len(won_piles) != 2:
        raise ScoringError("Exactly two players are supported.")
    if first_player not in (0, 1):
        raise ScoringError("First player must be seat 0 or 1.")

    scores = [base_score(pile) for pile in won_piles]
    counts = (len(won_piles[0]), len(won_piles[1]))
    if final:
        scores[bonus_seat(counts, first_player)] += MOST_CARDS_BONUS

    return Scoreboard(scores=(scores[0], scores[1]), cards=counts)
