"""
Pytest fixtures for blackjack tests.
"""

import pytest

from bjadvisor.blackjack.hand import BlackjackHand
from bjadvisor.blackjack.rules import Rules
from bjadvisor.common.card import Card, Suit

SUITS = [Suit.DIAMONDS, Suit.CLUBS, Suit.HEARTS, Suit.SPADES]


@pytest.fixture
def make_hand():
    """Build a BlackjackHand from ranks, cycling through the suits."""

    def _make_hand(*ranks, is_split=False):
        hand = BlackjackHand(is_split=is_split)
        for i, rank in enumerate(ranks):
            hand.add_card(Card(SUITS[i % len(SUITS)], rank))
        return hand

    return _make_hand


@pytest.fixture
def rules():
    """The default rule set."""
    return Rules()
