"""Player seats: a hand, a won-pile and a way to pick the next card."""

from __future__ import annotations

from typing import Optional

from .cards import Card
from .deck import Deck
from .interaction import InputCancelled, Interaction
from .strategy import OpponentStrategy


class Player:
    """Base class for both seats of a match."""

    role: str = "Player"
    announces_plays: bool = False

    def __init__(self, role: Optional[str] = None) -> None:
        if role is not None:
            self.role = role
        self.hand = Deck()
        self.won_pile = Deck()

    def has_cards(self) -> bool:
        return len(self.hand) > 0

    def take_turn(self, table: Deck) -> Optional[Card]:
        """Move one card from the hand onto ``table`` and return it.

        ``None`` means the player left the match; nothing was moved.
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(role={self.role!r}, hand={len(self.hand)}, won={len(self.won_pile)})"


class HumanPlayer(Player):
    role = "Player"

    def __init__(self, interaction: Interaction, role: Optional[str] = None) -> None:
        super().__init__(role)
        self.interaction = interaction

    def take_turn(self, table: Deck) -> Optional[Card]:
        self.interaction.display_hand(self.hand.cards)
        selection = self.interaction.request_human_card_index(len(self.hand))
        if selection is InputCancelled.EXIT:
            return None
        card = self.hand.retrieve(selection - 1)
        table.push(card)
        return card


class ComputerPlayer(Player):
    role = "Computer"
    announces_plays = True

    def __init__(self, strategy: Optional[OpponentStrategy] = None, role: Optional[str] = None) -> None:
        super().__init__(role)
        self.strategy = strategy or OpponentStrategy()

    def take_turn(self, table: Deck) -> Optional[Card]:
        card = self.strategy.choose(self.hand, table.top())
        table.push(card)
        return card
