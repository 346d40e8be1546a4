"""
Tests for the Hi-Lo count, the true count and the bet spread.
"""

from unittest.mock import MagicMock

import pytest

from bjadvisor.blackjack.action import Action
from bjadvisor.blackjack.actor import Player
from bjadvisor.blackjack.counting import (
    CountState,
    HiLoStrategy,
    hi_lo_value,
    round_half_up,
    units_for_true_count,
)
from bjadvisor.blackjack.game import Game
from bjadvisor.blackjack.rules import Rules
from bjadvisor.common.card import Card, Rank, Suit

pytestmark = pytest.mark.counting


def card(rank, suit=Suit.HEARTS):
    return Card(suit, rank)


def deal_all(game, ranks, player=None):
    player = player or game.dealer
    for rank in ranks:
        game.deal(card(rank), player)


@pytest.fixture
def game():
    return Game(Rules())


@pytest.fixture
def hilo(game):
    return HiLoStrategy(game.rules, game=game)


@pytest.mark.parametrize(
    "rank, value",
    [
        (Rank.TWO, 1),
        (Rank.THREE, 1),
        (Rank.FOUR, 1),
        (Rank.FIVE, 1),
        (Rank.SIX, 1),
        (Rank.SEVEN, 0),
        (Rank.EIGHT, 0),
        (Rank.NINE, 0),
        (Rank.TEN, -1),
        (Rank.JACK, -1),
        (Rank.QUEEN, -1),
        (Rank.KING, -1),
        (Rank.ACE, -1),
    ],
)
def test_hi_lo_value(rank, value):
    assert hi_lo_value(card(rank)) == value


def test_count_sums_to_zero_over_a_deck():
    assert sum(hi_lo_value(Card(suit, rank)) for suit in Suit for rank in Rank) == 0


@pytest.mark.parametrize(
    "value, expected",
    [(0.5, 1), (1.5, 2), (2.5, 3), (-0.5, 0), (-2.5, -2), (3.8, 4), (-1.2, -1), (0.0, 0)],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


@pytest.mark.parametrize(
    "true_count, units",
    [(-7, 1), (-1, 1), (0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 6), (12, 6)],
)
def test_bet_spread(true_count, units):
    assert units_for_true_count(true_count) == units


class TestCountState:
    def test_fresh_shoe(self):
        state = CountState(num_decks=6)
        assert state.running_count == 0
        assert state.cards_remaining == 312
        assert state.true_count() == 0

    def test_invalid_deck_count(self):
        with pytest.raises(ValueError):
            CountState(num_decks=0)

    def test_record_returns_delta(self):
        state = CountState()
        assert state.record(card(Rank.TWO)) == 1
        assert state.record(card(Rank.KING)) == -1
        assert state.record(card(Rank.EIGHT)) == 0
        assert state.running_count == 0
        assert state.cards_remaining == 49

    def test_true_count_rounds_half_up(self):
        state = CountState(num_decks=2)
        state.running_count = 1
        state.cards_remaining = 104
        assert state.true_count() == 1
        state.running_count = -1
        assert state.true_count() == 0
        state.running_count = 3
        assert state.true_count() == 2

    def test_shoe_exhaustion_resets(self):
        state = CountState()
        deck = [Card(suit, rank) for suit in Suit for rank in Rank]
        for dealt in deck[:-1]:
            state.record(dealt)
        assert state.cards_remaining == 1
        state.record(deck[-1])
        assert state.cards_remaining == 52
        assert state.running_count == 0

    def test_count_continues_after_reset(self):
        state = CountState()
        for _ in range(52):
            state.record(card(Rank.TWO))
        state.record(card(Rank.THREE))
        assert state.running_count == 1
        assert state.cards_remaining == 51


class TestHiLoStrategy:
    def test_low_card_raises_count(self, game, hilo):
        deal_all(game, [Rank.TWO])
        assert hilo.running_count == 1
        assert hilo.cards_remaining == 51

    def test_high_card_lowers_count(self, game, hilo):
        deal_all(game, [Rank.TEN])
        assert hilo.running_count == -1
        assert hilo.cards_remaining == 51

    def test_neutral_card_keeps_count(self, game, hilo):
        deal_all(game, [Rank.SEVEN])
        assert hilo.running_count == 0
        assert hilo.cards_remaining == 51

    def test_fresh_shoe_bets_minimum(self, hilo):
        assert hilo.bet_amount() == 5

    def test_negative_count_bets_minimum(self):
        game = Game(Rules(num_decks=6))
        hilo = HiLoStrategy(game.rules, game=game)
        deal_all(game, [Rank.KING, Rank.ACE, Rank.TEN, Rank.QUEEN, Rank.JACK, Rank.ACE])
        assert hilo.running_count == -6
        assert hilo.bet_amount() == 5

    def test_positive_count_raises_bet(self):
        game = Game(Rules(min_bet=15))
        hilo = HiLoStrategy(game.rules, game=game)
        deal_all(
            game,
            [
                Rank.TWO,
                Rank.THREE,
                Rank.FOUR,
                Rank.FIVE,
                Rank.SIX,
                Rank.SEVEN,
                Rank.EIGHT,
                Rank.NINE,
                Rank.EIGHT,
                Rank.TEN,
                Rank.JACK,
            ],
        )
        assert hilo.running_count == 3
        assert hilo.cards_remaining == 41
        # 3 / (41 / 52) rounds to a true count of 4
        assert hilo.true_count() == 4
        assert hilo.bet_amount() == 75

    def test_every_card_in_the_game_is_counted(self, game, hilo):
        player = game.add_player(Player("Player", hilo))
        other = game.add_player(Player("Other"))
        game.deal(card(Rank.TWO), player)
        game.deal(card(Rank.THREE), other)
        game.deal(card(Rank.FOUR), game.dealer)
        assert hilo.running_count == 3
        assert hilo.cards_remaining == 49

    def test_count_survives_new_round(self, game, hilo):
        deal_all(game, [Rank.TWO, Rank.FIVE])
        game.new_round()
        assert hilo.running_count == 2
        assert hilo.cards_remaining == 50

    def test_shoe_exhaustion_resets_count(self, game, hilo):
        deck = [Card(suit, rank) for suit in Suit for rank in Rank]
        for dealt in deck:
            game.deal(dealt, game.dealer)
        assert hilo.running_count == 0
        assert hilo.cards_remaining == 52

    def test_detach_stops_counting(self, game, hilo):
        hilo.detach()
        deal_all(game, [Rank.TWO])
        assert hilo.running_count == 0
        assert hilo.cards_remaining == 52

    def test_attach_to_another_game(self, game, hilo):
        other_game = Game(Rules())
        hilo.attach(other_game)
        deal_all(game, [Rank.TWO])
        deal_all(other_game, [Rank.TEN])
        assert hilo.running_count == -1

    def test_strategy_without_game_counts_nothing(self, game):
        hilo = HiLoStrategy(game.rules)
        deal_all(game, [Rank.TWO])
        assert hilo.running_count == 0

    def test_next_action_is_delegated(self, game, make_hand):
        basic = MagicMock()
        basic.next_action.return_value = Action.SPLIT
        hilo = HiLoStrategy(game.rules, game=game, basic_strategy=basic)
        hand = make_hand(Rank.EIGHT, Rank.EIGHT)
        upcard = card(Rank.TEN, Suit.SPADES)

        assert hilo.next_action(hand, upcard) == Action.SPLIT
        basic.next_action.assert_called_once_with(hand, upcard, game.rules)

    def test_next_action_matches_basic_strategy(self, hilo, make_hand):
        hand = make_hand(Rank.FIVE, Rank.SIX)
        assert hilo.next_action(hand, card(Rank.TWO, Suit.SPADES)) == Action.DOUBLE_DOWN

    def test_strategy_str(self, hilo):
        assert str(hilo) == "Hi-Lo Strategy"
