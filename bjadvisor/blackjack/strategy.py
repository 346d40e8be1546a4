from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from bjadvisor.blackjack.action import Action, TableEntry
from bjadvisor.blackjack.constants import BLACKJACK_LIMIT
from bjadvisor.blackjack.decision_logger import DecisionRecord, decision_logger
from bjadvisor.blackjack.hand import BlackjackHand
from bjadvisor.blackjack.rules import Rules
from bjadvisor.blackjack.tables import HandShape, StrategyTables
from bjadvisor.common.card import Card


class GameError(Exception):
    """Raised when a hand is asked to do something that isn't allowed, e.g. playing a bust hand."""


class HandBustError(GameError):
    """Raised when a decision is requested for a hand whose total is over 21."""

    def __init__(self, total: int):
        super().__init__(f"Hand is bust ({total})")
        self.total = total


class StrategyLookupError(GameError):
    """Raised when a hand has no row in any of the strategy tables."""


class Strategy(ABC):
    def __init__(self, rules: Rules):
        self.rules = rules

    @abstractmethod
    def next_action(
        self, hand: BlackjackHand, dealer_up_card: Card, rules: Optional[Rules] = None
    ) -> Action:
        """Recommend the next move for the hand against the dealer's upcard."""

    def bet_amount(self) -> int:
        """
        Determine bet amount for next hand. Called BEFORE cards are dealt.
        Default implementation returns minimum bet.
        """
        return self.rules.min_bet

    def __str__(self) -> str:
        return type(self).__name__


class BasicStrategy(Strategy):
    """
    A strategy based only on the player's hand and the dealer's upcard.

    The next move is read from three tables: pairs, soft totals and hard
    totals. Table entries that depend on being able to double are resolved
    against the rules before they are returned. The bet is always the minimum
    the rules allow.
    """

    name = "Basic Strategy"

    def __init__(self, rules: Rules, tables: Optional[StrategyTables] = None):
        super().__init__(rules)
        self.tables = tables if tables is not None else StrategyTables()

    def bet_amount(self) -> int:
        amount = self.rules.min_bet
        decision_logger.log_bet_decision(self.name, None, 1, amount)
        return amount

    def next_action(
        self, hand: BlackjackHand, dealer_up_card: Card, rules: Optional[Rules] = None
    ) -> Action:
        """
        Determine the next move based upon the dealer's upcard and the player's hand.

        Raises:
            HandBustError: If the hand's total is over 21.
            StrategyLookupError: If the hand is not covered by any table.
        """
        rules = rules if rules is not None else self.rules

        total = hand.total()
        if total.total > BLACKJACK_LIMIT:
            raise HandBustError(total.total)
        if total.total == BLACKJACK_LIMIT:
            self._record(hand, dealer_up_card, None, None, Action.STAND)
            return Action.STAND

        shape, player_value = self._classify(hand)
        dealer_value = dealer_up_card.value
        entry = self.tables.lookup(shape, player_value, dealer_value)
        if entry is None:
            raise StrategyLookupError(
                f"No strategy for {shape.value} {player_value} against {dealer_up_card}"
            )
        decision_logger.log_strategy_lookup(shape.value, player_value, dealer_value, entry.value)

        action = self._resolve(entry, hand, rules)
        self._record(hand, dealer_up_card, shape, entry, action)
        return action

    @staticmethod
    def _classify(hand: BlackjackHand):
        """Pick the table for the hand and the value used to index it."""
        if hand.is_pair:
            return HandShape.PAIR, hand.cards[0].value
        total = hand.total()
        if total.soft:
            return HandShape.SOFT, total.total
        return HandShape.HARD, total.total

    @staticmethod
    def _resolve(entry: TableEntry, hand: BlackjackHand, rules: Rules) -> Action:
        if entry is TableEntry.DOUBLE_OR_HIT:
            return Action.DOUBLE_DOWN if rules.can_double_down(hand) else Action.HIT
        if entry is TableEntry.DOUBLE_OR_STAND:
            return Action.DOUBLE_DOWN if rules.can_double_down(hand) else Action.STAND
        if entry is TableEntry.HIT:
            return Action.HIT
        if entry is TableEntry.SPLIT:
            return Action.SPLIT
        # Surrender is not offered as an action; those cells stand.
        return Action.STAND

    def _record(self, hand, dealer_up_card, shape, entry, action):
        decision_logger.log_decision(
            DecisionRecord(
                timestamp=datetime.now(),
                strategy=self.name,
                hand=str(hand),
                dealer_upcard=str(dealer_up_card),
                table=shape.value if shape else None,
                entry=entry.value if entry else None,
                action=action.value,
            )
        )

    def __str__(self) -> str:
        return self.name
