"""
This module provides the `Player` and `Dealer` classes for a game of Blackjack.

A player owns one hand for the length of a round and, optionally, the
strategy that advises it. The dealer is a player whose first card is the
face-up card every strategy decision is made against.
"""

from typing import Optional

from bjadvisor.blackjack.hand import BlackjackHand
from bjadvisor.blackjack.strategy import Strategy
from bjadvisor.common.card import Card


class Player:
    """A player in a game of Blackjack."""

    def __init__(self, name: str = "Player", strategy: Optional[Strategy] = None):
        self.name = name
        self.strategy = strategy
        self.hand = BlackjackHand()

    def deal_card(self, card: Card) -> None:
        """Add a card to the player's hand."""
        self.hand.add_card(card)

    def reset(self) -> None:
        """Empty the hand for the next round."""
        self.hand.clear()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.hand!r})"


class Dealer(Player):
    """The dealer in a game of Blackjack."""

    def __init__(self, name: str = "Dealer"):
        super().__init__(name)

    @property
    def up_card(self) -> Optional[Card]:
        """The first card the dealer was dealt, their face-up card."""
        cards = self.hand.cards
        return cards[0] if cards else None
