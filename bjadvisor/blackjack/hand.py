"""
Blackjack hands and the hand total calculation.

The total is a pure function of the cards, so it is computed on every call
instead of being cached on the hand.
"""

from dataclasses import dataclass
from typing import Iterable

from bjadvisor.blackjack.constants import BLACKJACK_LIMIT, get_blackjack_value
from bjadvisor.common.card import Card, Rank
from bjadvisor.common.hand import Hand


@dataclass(frozen=True)
class HandTotal:
    """Snapshot of a hand's best total and whether an Ace is still counted as 11."""

    total: int
    soft: bool

    @property
    def is_bust(self) -> bool:
        return self.total > BLACKJACK_LIMIT

    def __str__(self) -> str:
        return f"({'Soft' if self.soft else 'Hard'} {self.total})"


def calculate_total(cards: Iterable[Card]) -> HandTotal:
    """
    Calculate the best blackjack total for a collection of cards.

    Every Ace starts at 11. While the total is over 21 and an Ace is still
    worth 11, that Ace is re-valued as 1 (subtract 10). The total is soft when
    at least one Ace is left at 11.

    Two Aces and a Two total a soft 14.
    """
    total = 0
    num_aces = 0
    for card in cards:
        total += get_blackjack_value(card.rank)
        if card.rank == Rank.ACE:
            num_aces += 1

    downgraded = 0
    while total > BLACKJACK_LIMIT and downgraded < num_aces:
        total -= 10
        downgraded += 1

    return HandTotal(total=total, soft=downgraded < num_aces)


class BlackjackHand(Hand):
    """A hand in the game of Blackjack."""

    __slots__ = ("_cards", "_is_split")

    def __init__(self, *args, is_split: bool = False, **kwargs):
        super().__init__(*args, **kwargs)
        self._is_split = is_split

    def total(self) -> HandTotal:
        """Calculate the hand's total and softness."""
        return calculate_total(self._cards)

    def value(self) -> int:
        """The best total of the hand."""
        return self.total().total

    @property
    def is_soft(self) -> bool:
        """Determine if the hand is soft (contains an ace counted as 11)."""
        return self.total().soft

    @property
    def is_bust(self) -> bool:
        return self.total().is_bust

    @property
    def is_pair(self) -> bool:
        """
        Exactly two cards of identical rank.

        A hand holding three or more cards is never a pair, even when its
        first two cards match.
        """
        return len(self._cards) == 2 and self._cards[0].rank == self._cards[1].rank

    @property
    def is_split(self) -> bool:
        """Return whether this hand was created from a split."""
        return self._is_split

    @is_split.setter
    def is_split(self, value: bool) -> None:
        self._is_split = bool(value)

    def clear(self) -> None:
        super().clear()
        self._is_split = False

    def __repr__(self) -> str:
        return f"BlackjackHand({self._cards!r}, is_split={self._is_split})"

    def __str__(self) -> str:
        return f"{super().__str__()} {self.total()} split={self._is_split}"
