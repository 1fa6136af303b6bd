"""Card zones and deck creation utilities for Indigo."""

from __future__ import annotations

import random
from random import Random
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from .cards import RANK_ORDER, SUIT_ORDER, Card

DECK_SIZE = 52

# Picks one element from a non-empty sequence; ``random.choice`` by default.
Chooser = Callable[[Sequence[int]], int]


class DeckError(RuntimeError):
    """Base class for deck misuse."""


class InvalidDeckSize(DeckError, ValueError):
    """Raised when a deal size or preset deck is out of range."""


class IndexOutOfRange(DeckError, IndexError):
    """Raised when retrieving a card outside the deck bounds."""


class Deck:
    """Ordered card zone; front is the bottom, back is the top."""

    def __init__(self, cards: Optional[Iterable[Card]] = None) -> None:
        self._cards: List[Card] = list(cards) if cards is not None else []

    @classmethod
    def from_cards(cls, cards: Sequence[Card]) -> Deck:
        """Return a full draw pile in the given order after validating it."""
        if len(cards) != DECK_SIZE or len(set(cards)) != DECK_SIZE:
            raise InvalidDeckSize(f"Deck must contain exactly {DECK_SIZE} distinct cards.")
        return cls(cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __str__(self) -> str:
        return " ".join(str(card) for card in self._cards)

    def __repr__(self) -> str:
        return f"Deck([{', '.join(str(card) for card in self._cards)}])"

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    # Transfers ---------------------------------------------------------

    def pop_front(self, n: int) -> Deck:
        """Remove up to ``n`` cards from the bottom and return them as a new deck."""
        if not 1 <= n <= DECK_SIZE:
            raise InvalidDeckSize(f"Invalid number of cards: {n}.")
        count = min(n, len(self._cards))
        taken = self._cards[:count]
        del self._cards[:count]
        return Deck(taken)

    def pop_all(self) -> Deck:
        if not self._cards:
            return Deck()
        return self.pop_front(len(self._cards))

    def retrieve(self, index: int) -> Card:
        if not 0 <= index < len(self._cards):
            raise IndexOutOfRange(f"No card at index {index} in a deck of {len(self._cards)}.")
        return self._cards.pop(index)

    def retrieve_random(self, indices: Iterable[int], choice: Chooser = random.choice) -> Card:
        candidates = sorted(set(indices))
        if not candidates:
            raise DeckError("Cannot retrieve from an empty candidate set.")
        if len(candidates) == 1:
            return self.retrieve(candidates[0])
        return self.retrieve(choice(candidates))

    def push(self, card: Card) -> None:
        self._cards.append(card)

    def push_all(self, other: Deck) -> None:
        if other is self:
            raise DeckError("Cannot move a deck onto itself.")
        self._cards.extend(other._cards)
        other._cards.clear()

    # Inspection --------------------------------------------------------

    def top(self) -> Optional[Card]:
        return self._cards[-1] if self._cards else None

    def second_from_top(self) -> Card:
        return self._cards[-2]

    def indices_with_duplicate_suit(self) -> Optional[List[int]]:
        return self._first_duplicate_group(lambda card: card.suit)

    def indices_with_duplicate_rank(self) -> Optional[List[int]]:
        return self._first_duplicate_group(lambda card: card.rank)

    def _first_duplicate_group(self, key: Callable[[Card], object]) -> Optional[List[int]]:
        groups: Dict[object, List[int]] = {}
        for index, card in enumerate(self._cards):
            groups.setdefault(key(card), []).append(index)
        return next((group for group in groups.values() if len(group) > 1), None)


def build_cards() -> List[Card]:
    """Return the ordered 52-card universe."""
    return [Card(rank, suit) for suit in SUIT_ORDER for rank in RANK_ORDER]


def standard_deck(rng: Optional[Random] = None) -> Deck:
    """Return a freshly shuffled 52-card draw pile."""
    cards = build_cards()
    if rng is None:
        rng = Random()
    rng.shuffle(cards)
    return Deck(cards)
