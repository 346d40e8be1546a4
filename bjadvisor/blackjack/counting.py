"""
Hi-Lo card counting.

The Hi-Lo count gives every dealt card a value:

- 2, 3, 4, 5 and 6 count +1,
- 10, Jack, Queen, King and Ace count -1,
- 7, 8 and 9 count 0.

The sum of those values over the shoe is the running count. Dividing it by
the number of decks still to be dealt gives the true count, which drives a
simple bet spread. Playing decisions are left to basic strategy.
"""

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from bjadvisor.blackjack.action import Action
from bjadvisor.blackjack.constants import CARDS_PER_DECK
from bjadvisor.blackjack.decision_logger import decision_logger
from bjadvisor.blackjack.hand import BlackjackHand
from bjadvisor.blackjack.rules import Rules
from bjadvisor.blackjack.strategy import BasicStrategy, Strategy
from bjadvisor.common.card import Card, Rank

if TYPE_CHECKING:
    from bjadvisor.blackjack.game import Game

HI_LO_VALUES = {
    Rank.TWO: 1,
    Rank.THREE: 1,
    Rank.FOUR: 1,
    Rank.FIVE: 1,
    Rank.SIX: 1,
    Rank.SEVEN: 0,
    Rank.EIGHT: 0,
    Rank.NINE: 0,
    Rank.TEN: -1,
    Rank.JACK: -1,
    Rank.QUEEN: -1,
    Rank.KING: -1,
    Rank.ACE: -1,
}

# Units to bet for true counts 1 to 4; anything lower bets 1 unit, anything higher 6.
BET_SPREAD = {1: 2, 2: 3, 3: 4, 4: 5}
MIN_UNITS = 1
MAX_UNITS = 6


def hi_lo_value(card: Card) -> int:
    """The Hi-Lo count value of a card."""
    return HI_LO_VALUES[card.rank]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def units_for_true_count(true_count: int) -> int:
    """Look up the number of betting units for a true count."""
    if true_count <= 0:
        return MIN_UNITS
    return BET_SPREAD.get(true_count, MAX_UNITS)


@dataclass
class CountState:
    """Running count and cards left in the current shoe."""

    num_decks: int = 1
    running_count: int = field(default=0, init=False)
    cards_remaining: int = field(default=0, init=False)

    def __post_init__(self):
        if self.num_decks < 1:
            raise ValueError(f"Number of decks must be at least 1, got {self.num_decks}")
        self.reset()

    @property
    def shoe_size(self) -> int:
        return CARDS_PER_DECK * self.num_decks

    def reset(self) -> None:
        """Start a fresh shoe: a zero count and a full complement of cards."""
        self.running_count = 0
        self.cards_remaining = self.shoe_size

    def record(self, card: Card) -> int:
        """
        Count a dealt card.

        When the last card of the shoe has been counted the state is reset in
        place, as if the shoe had been reshuffled.

        Returns:
            The Hi-Lo value applied to the running count.
        """
        delta = hi_lo_value(card)
        self.running_count += delta
        self.cards_remaining -= 1
        decision_logger.log_count_update(card, delta, self.running_count, self.cards_remaining)

        if self.cards_remaining == 0:
            self.reset()
            decision_logger.log_shoe_reset(self.cards_remaining)
        return delta

    @property
    def decks_remaining(self) -> float:
        return self.cards_remaining / CARDS_PER_DECK

    def true_count(self) -> int:
        """The running count per deck remaining, rounded to the nearest integer."""
        return round_half_up(self.running_count / self.decks_remaining)


class HiLoStrategy(Strategy):
    """
    Card counting strategy that sizes bets from the Hi-Lo true count.

    The strategy observes every card dealt in its game, not only the cards of
    its own player. Playing decisions are delegated to a `BasicStrategy`.
    """

    name = "Hi-Lo Strategy"

    def __init__(
        self,
        rules: Rules,
        game: Optional["Game"] = None,
        basic_strategy: Optional[BasicStrategy] = None,
    ):
        super().__init__(rules)
        self.basic_strategy = basic_strategy if basic_strategy is not None else BasicStrategy(rules)
        self.count_state = CountState(num_decks=rules.num_decks)
        self._unsubscribe = None
        if game is not None:
            self.attach(game)

    def attach(self, game: "Game") -> None:
        """Start counting the cards dealt in a game."""
        self.detach()
        self._unsubscribe = game.register_observer(self)

    def detach(self) -> None:
        """Stop counting cards for the game this strategy is attached to."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    @property
    def running_count(self) -> int:
        return self.count_state.running_count

    @property
    def cards_remaining(self) -> int:
        return self.count_state.cards_remaining

    def true_count(self) -> int:
        return self.count_state.true_count()

    def on_card_dealt(self, card: Card) -> None:
        """Called each time a card is dealt in the game."""
        self.count_state.record(card)

    def bet_amount(self) -> int:
        """
        Determine how much to bet from the true count and the bet spread.

        Returns:
            The minimum bet multiplied by the number of units for the true count.
        """
        true_count = self.true_count()
        units = units_for_true_count(true_count)
        amount = self.rules.min_bet * units
        decision_logger.log_bet_decision(self.name, true_count, units, amount)
        return amount

    def next_action(
        self, hand: BlackjackHand, dealer_up_card: Card, rules: Optional[Rules] = None
    ) -> Action:
        return self.basic_strategy.next_action(hand, dealer_up_card, rules or self.rules)

    def __str__(self) -> str:
        return self.name
