"""Random baseline opponent for arena comparisons."""

from __future__ import annotations

from typing import List, Optional

from indigo.cards import Card
from indigo.deck import Deck
from indigo.strategy import OpponentStrategy


class RandomStrategy(OpponentStrategy):
    """Plays any card of the hand, ignoring the table."""

    name = "Random"

    def candidates(self, hand: Deck, top: Optional[Card]) -> List[int]:
        if len(hand) == 0:
            raise ValueError("Cannot choose a card from an empty hand.")
        return list(range(len(hand)))
