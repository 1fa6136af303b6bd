"""Text console front-end for an Indigo match."""

from __future__ import annotations

from typing import Callable, Optional, Sequence, Tuple

from indigo.cards import Card
from indigo.interaction import CardSelection, InputCancelled, Interaction

EXIT_COMMAND = "exit"


class ConsoleInteraction(Interaction):
    """Line-based prompts; invalid answers are re-asked, ``exit`` leaves the match."""

    def __init__(
        self,
        input_fn: Callable[[], str] = input,
        output_fn: Callable[[str], None] = print,
        labels: Tuple[str, str] = ("Player", "Computer"),
    ) -> None:
        self._input = input_fn
        self._output = output_fn
        self.labels = labels

    def _read(self) -> Optional[str]:
        try:
            return self._input().strip()
        except EOFError:
            return None

    def greet(self) -> None:
        self._output("Indigo Card Game")

    # Requests ----------------------------------------------------------

    def request_first_player_choice(self) -> bool:
        while True:
            self._output("Play first?")
            answer = self._read()
            if answer is None:
                raise EOFError("Input closed before choosing the first player.")
            answer = answer.lower()
            if answer == "yes":
                return True
            if answer == "no":
                return False

    def request_human_card_index(self, hand_size: int) -> CardSelection:
        while True:
            self._output(f"Choose a card to play (1-{hand_size}):")
            answer = self._read()
            if answer is None or answer == EXIT_COMMAND:
                return InputCancelled.EXIT
            try:
                index = int(answer)
            except ValueError:
                continue
            if 1 <= index <= hand_size:
                return index

    # Displays ----------------------------------------------------------

    def display_initial_table(self, cards: Sequence[Card]) -> None:
        self._output(f"Initial cards on the table: {' '.join(str(card) for card in cards)}")

    def display_table_status(self, count: int, top_card: Optional[Card]) -> None:
        if count > 0 and top_card is not None:
            self._output(f"\n{count} cards on the table, and the top card is {top_card}")
        else:
            self._output("\nNo cards on the table")

    def display_hand(self, cards: Sequence[Card]) -> None:
        menu = " ".join(f"{index}){card}" for index, card in enumerate(cards, start=1))
        self._output(f"Cards in hand: {menu}")

    def display_play(self, card: Card) -> None:
        self._output(f"Computer plays {card}")

    def display_trick_won(self, player_role: str) -> None:
        self._output(f"{player_role} wins cards")

    def display_scores(self, p1_score: int, p2_score: int, p1_cards: int, p2_cards: int) -> None:
        first, second = self.labels
        self._output(f"Score: {first} {p1_score} - {second} {p2_score}")
        self._output(f"Cards: {first} {p1_cards} - {second} {p2_cards}")

    def display_game_over(self) -> None:
        self._output("Game Over")
