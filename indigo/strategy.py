"""Rule-based card selection for the computer opponent."""

from __future__ import annotations

import random
from typing import List, Optional

from .cards import Card
from .deck import Chooser, Deck


class OpponentStrategy:
    """Fixed priority heuristic; never adapts between turns.

    ``candidates`` narrows the hand to the group the opponent will draw from.
    The random pick inside that group is delegated to ``choice`` so tests can
    substitute a seeded or fixed source.
    """

    name: str = "Indigo"

    def __init__(self, choice: Optional[Chooser] = None) -> None:
        self.choice: Chooser = choice or random.choice

    def candidates(self, hand: Deck, top: Optional[Card]) -> List[int]:
        if len(hand) == 0:
            raise ValueError("Cannot choose a card from an empty hand.")
        if len(hand) == 1:
            return [0]

        same_suit: List[int] = []
        same_rank: List[int] = []
        if top is not None:
            same_suit = [i for i, card in enumerate(hand) if card.suit is top.suit]
            same_rank = [i for i, card in enumerate(hand) if card.rank is top.rank]

        total = len(same_suit) + len(same_rank)
        if total == 0:
            return _fallback_group(hand)
        if total == 1:
            return same_suit or same_rank
        if len(same_suit) > 1:
            return same_suit
        if len(same_rank) > 1:
            return same_rank
        return sorted(set(same_suit) | set(same_rank))

    def choose(self, hand: Deck, top: Optional[Card]) -> Card:
        """Remove the chosen card from ``hand`` and return it."""
        return hand.retrieve_random(self.candidates(hand, top), self.choice)


def _fallback_group(hand: Deck) -> List[int]:
    group = hand.indices_with_duplicate_suit()
    if group is None:
        group = hand.indices_with_duplicate_rank()
    if group is None:
        group = list(range(len(hand)))
    return group
