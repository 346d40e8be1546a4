"""
The two calls a game session makes to the advisor: what to do with a hand,
and how much to bet on the next one.
"""

from typing import Optional

from bjadvisor.blackjack.action import Action
from bjadvisor.blackjack.counting import CountState, units_for_true_count
from bjadvisor.blackjack.hand import BlackjackHand
from bjadvisor.blackjack.rules import Rules
from bjadvisor.blackjack.strategy import BasicStrategy
from bjadvisor.blackjack.tables import StrategyTables
from bjadvisor.common.card import Card

_tables = None


def _default_tables() -> StrategyTables:
    global _tables
    if _tables is None:
        _tables = StrategyTables()
    return _tables


def compute_action(hand: BlackjackHand, dealer_up_card: Card, rules: Rules) -> Action:
    """
    Recommend the next move for a hand with basic strategy.

    Raises:
        HandBustError: If the hand's total is over 21.
    """
    return BasicStrategy(rules, tables=_default_tables()).next_action(hand, dealer_up_card)


def compute_bet(rules: Rules, count_state: Optional[CountState] = None) -> int:
    """
    Recommend a bet.

    Without a count the bet is the table minimum; with one it follows the
    Hi-Lo bet spread for the current true count.
    """
    if count_state is None:
        return rules.min_bet
    return rules.min_bet * units_for_true_count(count_state.true_count())
