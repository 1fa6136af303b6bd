"""Boundary between the engine and whoever drives the match."""

from __future__ import annotations

from enum import Enum, auto
from typing import Optional, Sequence, Union

from .cards import Card


class InputCancelled(Enum):
    """Returned instead of a selection when the human asks to leave."""

    EXIT = auto()


CardSelection = Union[int, InputCancelled]


class Interaction:
    """Base class for interaction collaborators.

    Display hooks are fire-and-forget and ignored by default, so a headless
    match (two computer players) can run on the bare base class.
    """

    def request_first_player_choice(self) -> bool:
        """Return True if the human moves first."""
        return True

    def request_human_card_index(self, hand_size: int) -> CardSelection:
        """Return a 1-based index in ``[1, hand_size]`` or ``InputCancelled.EXIT``."""
        raise NotImplementedError("This interaction cannot drive a human player.")

    def display_initial_table(self, cards: Sequence[Card]) -> None:
        return None

    def display_table_status(self, count: int, top_card: Optional[Card]) -> None:
        return None

    def display_hand(self, cards: Sequence[Card]) -> None:
        return None

    def display_play(self, card: Card) -> None:
        return None

    def display_trick_won(self, player_role: str) -> None:
        return None

    def display_scores(self, p1_score: int, p2_score: int, p1_cards: int, p2_cards: int) -> None:
        return None

    def display_game_over(self) -> None:
        return None
