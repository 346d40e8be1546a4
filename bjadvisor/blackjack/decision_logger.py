"""
Logging for the blackjack decision paths.
Tracks strategy table lookups, rule evaluations, count updates and bet sizing.
"""

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional


@dataclass
class DecisionRecord:
    """A single recommendation made by a strategy."""

    timestamp: datetime
    strategy: str
    hand: str
    dealer_upcard: str
    table: Optional[str]
    entry: Optional[str]
    action: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "strategy": self.strategy,
            "hand": self.hand,
            "dealer_up": self.dealer_upcard,
            "table": self.table,
            "entry": self.entry,
            "action": self.action,
        }


class DecisionLogger:
    """Logs all decision-making processes in blackjack."""

    def __init__(self, log_level=logging.DEBUG):
        self.logger = logging.getLogger("blackjack.decisions")
        # Check environment variable to disable logging in simulation mode
        if os.environ.get("BLACKJACK_DISABLE_LOGGING", "").lower() in (
            "1",
            "true",
            "yes",
        ):
            self.logger.setLevel(logging.ERROR)
        else:
            self.logger.setLevel(log_level)

        # Add console handler if none exists
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

        self.decision_history: List[DecisionRecord] = []

    def set_level(self, level):
        """Set the logging level."""
        self.logger.setLevel(level)

    def log_decision(self, record: DecisionRecord):
        """Log a recommendation and keep it in the history."""
        # Only store decisions if we're actually logging
        if self.logger.isEnabledFor(logging.INFO):
            self.decision_history.append(record)
            self.logger.info(
                f"{record.strategy}: {record.hand} vs dealer {record.dealer_upcard} "
                f"-> {record.action}"
            )

    def log_rule_evaluation(self, rule_name: str, result: bool, reason: str = ""):
        """Log a rule evaluation."""
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"Rule '{rule_name}': {result} {reason}".rstrip())

    def log_strategy_lookup(self, table: str, player_value: int, dealer_value: int, entry: str):
        """Log basic strategy table lookup."""
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(
                f"Strategy lookup: {table}{player_value} vs {dealer_value} -> {entry}"
            )

    def log_count_update(self, card, delta: int, running_count: int, cards_remaining: int):
        """Log a Hi-Lo count change caused by a dealt card."""
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(
                f"Counted {card}: {delta:+d} (running={running_count}, "
                f"cards_remaining={cards_remaining})"
            )

    def log_shoe_reset(self, cards_remaining: int):
        """Log the count being reset for a freshly shuffled shoe."""
        if self.logger.isEnabledFor(logging.INFO):
            self.logger.info(f"Shoe exhausted, count reset ({cards_remaining} cards)")

    def log_bet_decision(self, strategy: str, true_count: Optional[int], units: int, amount: int):
        """Log the bet a strategy settled on."""
        if self.logger.isEnabledFor(logging.INFO):
            if true_count is None:
                self.logger.info(f"{strategy} bets {amount} ({units} unit)")
            else:
                self.logger.info(
                    f"{strategy} bets {amount} ({units} units, true count {true_count})"
                )

    def get_decision_summary(self) -> Dict[str, Any]:
        """Get a summary of all decisions made."""
        summary: Dict[str, Any] = {
            "total_decisions": len(self.decision_history),
            "by_action": {},
            "by_table": {},
        }

        for decision in self.decision_history:
            summary["by_action"][decision.action] = (
                summary["by_action"].get(decision.action, 0) + 1
            )
            table = decision.table or "none"
            summary["by_table"][table] = summary["by_table"].get(table, 0) + 1

        return summary

    def clear_history(self):
        self.decision_history = []


# Global logger instance
decision_logger = DecisionLogger()
