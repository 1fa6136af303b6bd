import pytest

from bots.bot_arena import play_match
from indigo.cards import parse_card
from indigo.deck import DECK_SIZE, Deck, build_cards
from indigo.game import (
    EndReason,
    GameEngine,
    GamePhase,
    GameStateError,
    is_trick_won,
    new_match,
)
from indigo.interaction import InputCancelled, Interaction
from indigo.players import ComputerPlayer, HumanPlayer
from indigo.strategy import OpponentStrategy
from random import Random


class RecordingInteraction(Interaction):
    def __init__(self, selections=(), human_first=True):
        self.events = []
        self.selections = list(selections)
        self.human_first = human_first

    def request_first_player_choice(self):
        self.events.append(("first?",))
        return self.human_first

    def request_human_card_index(self, hand_size):
        self.events.append(("choose", hand_size))
        return self.selections.pop(0)

    def display_initial_table(self, cards):
        self.events.append(("initial", [str(card) for card in cards]))

    def display_table_status(self, count, top_card):
        self.events.append(("table", count, str(top_card) if top_card else None))

    def display_hand(self, cards):
        self.events.append(("hand", [str(card) for card in cards]))

    def display_play(self, card):
        self.events.append(("play", str(card)))

    def display_trick_won(self, player_role):
        self.events.append(("won", player_role))

    def display_scores(self, p1_score, p2_score, p1_cards, p2_cards):
        self.events.append(("scores", p1_score, p2_score, p1_cards, p2_cards))

    def display_game_over(self):
        self.events.append(("game over",))

    def of_kind(self, kind):
        return [event for event in self.events if event[0] == kind]


class InvariantInteraction(Interaction):
    """Checks card conservation every time the table status is reported."""

    engine = None
    checks = 0

    def display_table_status(self, count, top_card):
        if self.engine is None:
            return
        cards = self.engine.all_cards()
        assert len(cards) == DECK_SIZE
        assert len(set(cards)) == DECK_SIZE
        assert all(len(player.hand) <= 6 for player in self.engine.players)
        self.checks += 1


def stacked_deck(*labels):
    """Full deck with the given cards at the bottom, in order."""
    front = [parse_card(label) for label in labels]
    return front + [card for card in build_cards() if card not in front]


def computers(choice=None):
    return (
        ComputerPlayer(OpponentStrategy(choice)),
        ComputerPlayer(OpponentStrategy(choice)),
    )


def test_trick_detection():
    assert is_trick_won(Deck([parse_card("3♦"), parse_card("7♦")]))
    assert is_trick_won(Deck([parse_card("3♦"), parse_card("3♣")]))
    assert not is_trick_won(Deck([parse_card("3♦"), parse_card("7♥")]))
    assert not is_trick_won(Deck([parse_card("3♦")]))


def test_setup_deals_table_and_hands():
    interaction = RecordingInteraction()
    engine = GameEngine(players=computers(), interaction=interaction, rng=Random(1))
    assert engine.phase is GamePhase.PLAYER_TURN
    assert len(engine.table_pile) == 4
    assert len(engine.draw_pile) == 48
    assert interaction.of_kind("initial")[0][1] == [str(card) for card in engine.table_pile]

    engine.play_round()
    assert len(engine.draw_pile) == 52 - 4 - 6 - 6
    assert len(engine.history) == 2


def test_trick_won_moves_table_to_winner():
    deck = stacked_deck("2♣", "3♣", "4♣", "5♦", "7♦", "8♠", "9♠", "J♥", "Q♥", "K♠")
    interaction = RecordingInteraction()
    engine = GameEngine(players=computers(), interaction=interaction, deck=deck)

    engine.play_turn()

    winner = engine.players[0]
    assert [str(card) for card in winner.won_pile] == ["2♣", "3♣", "4♣", "5♦", "7♦"]
    assert len(engine.table_pile) == 0
    assert engine.last_trick_winner == 0
    assert engine.history[-1].won_trick
    assert interaction.of_kind("play") == [("play", "7♦")]
    assert interaction.of_kind("won") == [("won", "Computer")]
    assert interaction.of_kind("scores") == [("scores", 0, 0, 5, 0)]


def test_remaining_table_goes_to_first_mover_without_tricks():
    interaction = RecordingInteraction()
    engine = GameEngine(players=computers(), first_player=1, interaction=interaction, rng=Random(5))
    engine.players[0].won_pile.push_all(engine.draw_pile.pop_all())

    result = engine.run()

    assert result.reason is EndReason.NATURAL_END
    assert len(engine.players[1].won_pile) == 4
    assert len(engine.table_pile) == 0
    assert result.scoreboard.cards == (48, 4)
    assert interaction.events[-1] == ("game over",)
    final = interaction.of_kind("scores")[-1]
    assert final[1:] == (result.scoreboard.scores[0], result.scoreboard.scores[1], 48, 4)


def test_remaining_table_goes_to_last_trick_winner():
    engine = GameEngine(players=computers(), rng=Random(5))
    engine.players[0].won_pile.push_all(engine.draw_pile.pop_all())
    engine.last_trick_winner = 1

    engine.run()

    assert len(engine.players[1].won_pile) == 4


def test_bonus_applied_once_at_end():
    interaction = RecordingInteraction()
    engine = GameEngine(players=computers(), interaction=interaction, rng=Random(11))
    result = engine.run()

    board = result.scoreboard
    assert sum(board.cards) == DECK_SIZE
    assert sum(board.scores) == 20 + 3
    for event in interaction.of_kind("scores")[:-1]:
        assert event[1] + event[2] <= 20


def test_invariants_hold_for_whole_match():
    interaction = InvariantInteraction()
    engine = GameEngine(players=computers(Random(4).choice), interaction=interaction, rng=Random(4))
    interaction.engine = engine
    engine.run()
    assert interaction.checks > 0
    assert engine.phase is GamePhase.GAME_OVER
    assert all(not player.hand for player in engine.players)
    assert len(engine.draw_pile) == 0


def test_seeded_match_is_reproducible():
    first = play_match("indigo", "indigo", seed=2024)
    second = play_match("indigo", "indigo", seed=2024)
    assert first.history == second.history
    assert first.result == second.result


def test_human_turn_plays_selected_card():
    interaction = RecordingInteraction(selections=[2])
    engine = new_match(interaction, rng=Random(8))
    human = engine.players[0]
    assert isinstance(human, HumanPlayer)
    assert engine.first_player == 0

    engine.play_turn()

    hand_event = interaction.of_kind("hand")[0]
    assert str(engine.history[0].card) == hand_event[1][1]
    assert len(human.hand) + len(human.won_pile) >= 5
    assert interaction.of_kind("choose") == [("choose", 6)]
    assert interaction.of_kind("play") == []


def test_computer_moves_first_when_human_declines():
    interaction = RecordingInteraction(selections=[1], human_first=False)
    engine = new_match(interaction, rng=Random(8))
    assert engine.first_player == 1
    assert interaction.events[0] == ("first?",)

    engine.play_round()
    assert [record.seat for record in engine.history] == [1, 0]


def test_exit_cancels_match():
    interaction = RecordingInteraction(selections=[InputCancelled.EXIT])
    engine = new_match(interaction, human_first=True, rng=Random(3))

    result = engine.run()

    assert result.reason is EndReason.CANCELLED
    assert result.scoreboard is None
    assert engine.phase is GamePhase.GAME_OVER
    assert len(engine.players[0].hand) == 6
    assert interaction.of_kind("scores") == []
    assert interaction.events[-1] == ("game over",)
    with pytest.raises(GameStateError):
        engine.play_round()


def test_empty_seat_skips_and_table_reported_before_each_turn():
    deck = stacked_deck("2♣", "3♣", "4♣", "5♦", "9♠")
    interaction = RecordingInteraction()
    engine = GameEngine(players=computers(), interaction=interaction, deck=deck)
    engine.players[0].hand.push(engine.draw_pile.retrieve(0))
    engine.players[1].won_pile.push_all(engine.draw_pile.pop_all())
    del interaction.events[:]

    engine.play_round()

    assert [record.seat for record in engine.history] == [0]
    assert engine.phase is GamePhase.PLAYER_TURN
    assert interaction.events == [
        ("table", 4, "5♦"),
        ("play", "9♠"),
        ("table", 5, "9♠"),
    ]

    result = engine.run()
    assert result.reason is EndReason.NATURAL_END
    assert result.scoreboard.cards == (5, 47)


def test_rejects_bad_seating():
    with pytest.raises(GameStateError):
        GameEngine(players=computers(), first_player=2)
