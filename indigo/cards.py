"""Card-related data structures and helpers for Indigo."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Suit(Enum):
    DIAMONDS = "♦"
    HEARTS = "♥"
    SPADES = "♠"
    CLUBS = "♣"

    def __str__(self) -> str:
        return self.value


class Rank(Enum):
    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    def __str__(self) -> str:
        return self.value


# Suit and rank order used when building a fresh deck.
SUIT_ORDER: list[Suit] = [Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES, Suit.CLUBS]

RANK_ORDER: list[Rank] = list(Rank)


@dataclass(frozen=True)
class Card:
    """Immutable representation of a playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def matches(self, other: Card) -> bool:
        """Return True if both cards share a suit or a rank."""
        return self.suit is other.suit or self.rank is other.rank


def parse_card(label: str) -> Card:
    """Parse a compact label such as ``"10♥"`` or ``"A♦"``."""
    label = label.strip()
    if len(label) < 2:
        raise ValueError(f"Unknown card: {label!r}")
    try:
        return Card(Rank(label[:-1].upper()), Suit(label[-1]))
    except ValueError as exc:
        raise ValueError(f"Unknown card: {label!r}") from exc
