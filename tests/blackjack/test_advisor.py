import pytest

from bjadvisor.blackjack import (
    Action,
    CountState,
    HandBustError,
    Rules,
    compute_action,
    compute_bet,
)
from bjadvisor.common.card import Card, Rank, Suit


def test_compute_action(make_hand, rules):
    hand = make_hand(Rank.FIVE, Rank.SIX)
    assert compute_action(hand, Card(Suit.CLUBS, Rank.TWO), rules) == Action.DOUBLE_DOWN


def test_compute_action_uses_given_rules(make_hand):
    hand = make_hand(Rank.FIVE, Rank.SIX, is_split=True)
    rules = Rules(allow_double_after_split=False)
    assert compute_action(hand, Card(Suit.CLUBS, Rank.TWO), rules) == Action.HIT


def test_compute_action_bust(make_hand, rules):
    with pytest.raises(HandBustError):
        compute_action(make_hand(Rank.KING, Rank.QUEEN, Rank.TWO), Card(Suit.CLUBS, Rank.TWO), rules)


def test_compute_bet_without_count():
    assert compute_bet(Rules(min_bet=10)) == 10


def test_compute_bet_with_count():
    state = CountState(num_decks=1)
    for rank in [Rank.TWO, Rank.THREE, Rank.FOUR]:
        state.record(Card(Suit.HEARTS, rank))
    # 3 / (49 / 52) rounds to 3, four units
    assert compute_bet(Rules(min_bet=10), state) == 40


def test_compute_bet_with_negative_count():
    state = CountState(num_decks=1)
    state.record(Card(Suit.HEARTS, Rank.ACE))
    assert compute_bet(Rules(min_bet=10), state) == 10
