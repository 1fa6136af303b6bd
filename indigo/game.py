"""High-level game orchestration for Indigo."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from random import Random
from typing import List, Optional, Sequence, Tuple

from .cards import Card
from .deck import Deck, standard_deck
from .interaction import Interaction
from .logging_utils import get_logger
from .players import ComputerPlayer, HumanPlayer, Player
from .scoring import Scoreboard, score_match
from .strategy import OpponentStrategy

logger = get_logger(__name__)

HAND_SIZE = 6
INITIAL_TABLE_SIZE = 4


class GameStateError(RuntimeError):
    """Raised when the engine is driven out of order."""


class GamePhase(Enum):
    DEALING = auto()
    PLAYER_TURN = auto()
    GAME_OVER = auto()


class EndReason(Enum):
    NATURAL_END = auto()
    CANCELLED = auto()


@dataclass(frozen=True)
class TurnRecord:
    seat: int
    card: Card
    won_trick: bool


@dataclass(frozen=True)
class GameResult:
    reason: EndReason
    scoreboard: Optional[Scoreboard] = None


def is_trick_won(table: Deck) -> bool:
    """Return True if the two most recent table cards share a suit or rank."""
    if len(table) < 2:
        return False
    top = table.top()
    assert top is not None
    return top.matches(table.second_from_top())


@dataclass
class GameEngine:
    """Run a single match of Indigo between two seats."""

    players: Tuple[Player, Player]
    first_player: int = 0
    interaction: Interaction = field(default_factory=Interaction)
    rng: Optional[Random] = None
    deck: Optional[Sequence[Card]] = None

    phase: GamePhase = field(init=False, default=GamePhase.DEALING)
    draw_pile: Deck = field(init=False)
    table_pile: Deck = field(init=False)
    current_player: int = field(init=False)
    last_trick_winner: Optional[int] = field(init=False, default=None)
    history: List[TurnRecord] = field(init=False, default_factory=list)
    result: Optional[GameResult] = field(init=False, default=None)

    def __post_init__(self) -> None:
        if len(self.players) != 2:
            raise GameStateError("Indigo supports exactly two players.")
        if self.first_player not in (0, 1):
            raise GameStateError("First player must be seat 0 or 1.")
        self.players = (self.players[0], self.players[1])

        if self.deck is not None:
            self.draw_pile = Deck.from_cards(self.deck)
        else:
            self.draw_pile = standard_deck(self.rng)
        self.table_pile = self.draw_pile.pop_front(INITIAL_TABLE_SIZE)
        logger.debug("Initial table: %s", self.table_pile)
        self.interaction.display_initial_table(self.table_pile.cards)

        self.current_player = self.first_player
        self.phase = GamePhase.PLAYER_TURN

    # Turn order --------------------------------------------------------

    @property
    def turn_order(self) -> Tuple[int, int]:
        return self.first_player, 1 - self.first_player

    def run(self) -> GameResult:
        while self.phase is not GamePhase.GAME_OVER:
            self.play_round()
        assert self.result is not None
        return self.result

    def play_round(self) -> None:
        """Play both seats once, or finish the match if nothing is left to play."""
        self._ensure_phase(GamePhase.PLAYER_TURN)
        self.report_table()
        if self.is_exhausted():
            self._finish_naturally()
            return

        first, second = self.turn_order
        self.current_player = first
        if not self.play_turn():
            return
        self.report_table()
        self.current_player = second
        self.play_turn()

    def play_turn(self) -> bool:
        """Play the current seat's turn; return False if the match was cancelled."""
        self._ensure_phase(GamePhase.PLAYER_TURN)
        seat = self.current_player
        player = self.players[seat]

        if not player.has_cards():
            if not self.draw_pile:
                logger.debug("Seat %d has nothing to play", seat)
                return True
            player.hand.push_all(self.draw_pile.pop_front(HAND_SIZE))
            logger.debug("Seat %d draws %s (%d left)", seat, player.hand, len(self.draw_pile))

        card = player.take_turn(self.table_pile)
        if card is None:
            self._cancel()
            return False
        if player.announces_plays:
            self.interaction.display_play(card)
        logger.debug("Seat %d plays %s", seat, card)

        won = is_trick_won(self.table_pile)
        self.history.append(TurnRecord(seat=seat, card=card, won_trick=won))
        if won:
            self._award_trick(seat)
        return True

    def report_table(self) -> None:
        self.interaction.display_table_status(len(self.table_pile), self.table_pile.top())

    # State queries -----------------------------------------------------

    def is_exhausted(self) -> bool:
        return not self.draw_pile and not any(player.has_cards() for player in self.players)

    def scoreboard(self, *, final: bool = False) -> Scoreboard:
        return score_match(
            [player.won_pile.cards for player in self.players],
            first_player=self.first_player,
            final=final,
        )

    def all_cards(self) -> List[Card]:
        """Every card across the draw pile, table pile, hands and won-piles."""
        cards = list(self.draw_pile) + list(self.table_pile)
        for player in self.players:
            cards.extend(player.hand)
            cards.extend(player.won_pile)
        return cards

    # Transitions -------------------------------------------------------

    def _award_trick(self, seat: int) -> None:
        player = self.players[seat]
        self.interaction.display_trick_won(player.role)
        player.won_pile.push_all(self.table_pile.pop_all())
        self.last_trick_winner = seat
        logger.info("%s wins cards (%d won)", player.role, len(player.won_pile))
        self._report_scores(self.scoreboard())

    def _finish_naturally(self) -> None:
        if self.table_pile:
            seat = self.last_trick_winner if self.last_trick_winner is not None else self.first_player
            self.players[seat].won_pile.push_all(self.table_pile.pop_all())
        board = self.scoreboard(final=True)
        self._report_scores(board)
        self._end(GameResult(reason=EndReason.NATURAL_END, scoreboard=board))

    def _cancel(self) -> None:
        self._end(GameResult(reason=EndReason.CANCELLED))

    def _end(self, result: GameResult) -> None:
        self.result = result
        self.phase = GamePhase.GAME_OVER
        logger.info("Game over: %s %s", result.reason.name.lower(), result.scoreboard)
        self.interaction.display_game_over()

    def _report_scores(self, board: Scoreboard) -> None:
        self.interaction.display_scores(board.scores[0], board.scores[1], board.cards[0], board.cards[1])

    def _ensure_phase(self, expected: GamePhase) -> None:
        if self.phase != expected:
            raise GameStateError(f"Action not allowed in phase {self.phase}. Expected {expected}.")


def new_match(
    interaction: Interaction,
    *,
    human_first: Optional[bool] = None,
    rng: Optional[Random] = None,
    strategy: Optional[OpponentStrategy] = None,
) -> GameEngine:
    """Seat a human against the computer opponent and deal the table."""
    if human_first is None:
        human_first = interaction.request_first_player_choice()
    if strategy is None:
        strategy = OpponentStrategy(rng.choice if rng is not None else None)
    players = (HumanPlayer(interaction), ComputerPlayer(strategy))
    return GameEngine(
        players=players,
        first_player=0 if human_first else 1,
        interaction=interaction,
        rng=rng,
    )
