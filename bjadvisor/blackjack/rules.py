from typing import Any, Dict

from bjadvisor.blackjack.decision_logger import decision_logger
from bjadvisor.blackjack.hand import BlackjackHand


class Rules:
    """
    The rule set of a blackjack game.

    A Rules object is created once per game and only read by the strategies.
    """

    def __init__(
        self,
        min_bet: int = 5,
        num_decks: int = 1,
        allow_surrender: bool = False,
        double_on_9_10_11_only: bool = False,
        double_on_10_11_only: bool = False,
        allow_double_after_split: bool = True,
    ):
        if isinstance(min_bet, bool) or not isinstance(min_bet, int) or min_bet < 1:
            raise ValueError(f"Minimum bet must be a positive integer, got {min_bet!r}")
        if isinstance(num_decks, bool) or not isinstance(num_decks, int) or num_decks < 1:
            raise ValueError(f"Number of decks must be at least 1, got {num_decks!r}")

        self.min_bet = min_bet
        self.num_decks = num_decks
        self.allow_surrender = allow_surrender
        self.double_on_9_10_11_only = double_on_9_10_11_only
        self.double_on_10_11_only = double_on_10_11_only
        self.allow_double_after_split = allow_double_after_split

    def to_dict(self) -> Dict[str, Any]:
        """Convert rules to a dictionary for serialization."""
        return {
            "min_bet": self.min_bet,
            "num_decks": self.num_decks,
            "allow_surrender": self.allow_surrender,
            "double_on_9_10_11_only": self.double_on_9_10_11_only,
            "double_on_10_11_only": self.double_on_10_11_only,
            "allow_double_after_split": self.allow_double_after_split,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Rules":
        """
        Build rules from a dictionary such as the one produced by `to_dict`.

        Raises:
            ValueError: If the dictionary holds a key that is not a rule.
        """
        unknown = set(data) - set(cls().to_dict())
        if unknown:
            raise ValueError(f"Unknown rule(s): {', '.join(sorted(unknown))}")
        return cls(**data)

    def can_double_down(self, hand: BlackjackHand) -> bool:
        """
        Check if the hand can be doubled down based on the rules.

        A double is only possible on the first two cards. A hand that came
        from a split may only double when doubling after a split is allowed.
        The Reno restrictions then limit the double to a total of 9/10/11 or
        10/11.

        Args:
            hand (BlackjackHand): The player's hand.

        Returns:
            bool: True if the hand can be doubled down, False otherwise.
        """
        if len(hand.cards) != 2:
            decision_logger.log_rule_evaluation("double_down", False, "hand does not hold two cards")
            return False

        if hand.is_split and not self.allow_double_after_split:
            decision_logger.log_rule_evaluation("double_down", False, "no double after split")
            return False

        total = hand.value()
        if self.double_on_9_10_11_only:
            allowed = 9 <= total <= 11
            decision_logger.log_rule_evaluation("double_on_9_10_11_only", allowed, f"total={total}")
            return allowed
        if self.double_on_10_11_only:
            # Never true: a total cannot be both 10 and 11.
            allowed = total == 10 and total == 11
            decision_logger.log_rule_evaluation("double_on_10_11_only", allowed, f"total={total}")
            return allowed

        decision_logger.log_rule_evaluation("double_down", True)
        return True

    def __eq__(self, other):
        if isinstance(other, Rules):
            return self.to_dict() == other.to_dict()
        return NotImplemented

    def __repr__(self) -> str:
        args = ", ".join(f"{key}={value!r}" for key, value in self.to_dict().items())
        return f"Rules({args})"

    def __str__(self) -> str:
        return ", ".join(f"{key}={value}" for key, value in self.to_dict().items())
