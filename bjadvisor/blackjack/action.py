"""Defines the actions a strategy can recommend and the entries of the strategy tables."""
from enum import Enum


class Action(Enum):
    """Enum for the possible actions a player can take in a game of blackjack."""

    STAND = "stand"
    HIT = "hit"
    DOUBLE_DOWN = "double"
    SPLIT = "split"

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


class TableEntry(Enum):
    """
    A cell of a strategy table.

    DOUBLE_OR_HIT and DOUBLE_OR_STAND are only resolved to an Action once the
    double-down rules have been checked against the hand.
    """

    HIT = "H"
    STAND = "S"
    SPLIT = "P"
    SURRENDER = "R"
    DOUBLE_OR_HIT = "D"
    DOUBLE_OR_STAND = "DS"

    @property
    def is_conditional(self) -> bool:
        return self in (TableEntry.DOUBLE_OR_HIT, TableEntry.DOUBLE_OR_STAND)
