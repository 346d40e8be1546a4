"""
The basic strategy chart as three lookup tables.

Each table maps a ``(HandShape, player_value, dealer_value)`` key to a
`TableEntry`:

- hard totals 5-20 and soft totals 13-20 use the hand total as player value,
- pairs use the point value of one of the paired cards (2-11),
- the dealer value is the point value of the upcard (2-11, Ace = 11).

The chart is read from ``basic_strategy.csv``, which sits next to this module.
"""

import csv
import os
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from bjadvisor.blackjack.action import TableEntry

DEALER_VALUES = range(2, 12)


class HandShape(Enum):
    """Which of the three tables a hand is looked up in."""

    HARD = "Hard"
    SOFT = "Soft"
    PAIR = "Pair"

    @property
    def player_values(self) -> range:
        return _PLAYER_VALUES[self]


_PLAYER_VALUES = {
    HandShape.HARD: range(5, 21),
    HandShape.SOFT: range(13, 21),
    HandShape.PAIR: range(2, 12),
}

TableKey = Tuple[HandShape, int, int]

DEFAULT_STRATEGY_FILE = os.path.join(os.path.dirname(__file__), "basic_strategy.csv")


def _parse_card_label(label: str) -> int:
    """Convert a chart label ("2"-"10" or "A") to a point value."""
    label = label.strip().upper()
    if label == "A":
        return 11
    return int(label)


class StrategyTables:
    """
    Immutable pairs, soft-totals and hard-totals tables.

    The tables are loaded once, when the object is built, and every key of
    every table is checked to be present.
    """

    def __init__(self, strategy_file: Optional[str] = None):
        if strategy_file is None:
            strategy_file = DEFAULT_STRATEGY_FILE
        self.strategy_file = strategy_file
        self._entries: Mapping[TableKey, TableEntry] = MappingProxyType(
            self._load_strategy(strategy_file)
        )
        self._check_complete()

    def _load_strategy(self, strategy_file: str) -> Dict[TableKey, TableEntry]:
        entries: Dict[TableKey, TableEntry] = {}
        with open(strategy_file, "r", newline="") as f:
            reader = csv.reader(f)
            header = next(reader)
            dealer_values = [_parse_card_label(label) for label in header[1:]]
            for row in reader:
                if not row:
                    continue
                hand_type = row[0].strip()
                shape = self._parse_shape(hand_type)
                player_value = _parse_card_label(hand_type[len(shape.value):])
                if player_value not in shape.player_values:
                    raise ValueError(f"Row {hand_type} is outside the {shape.value} table")
                symbols = [symbol.strip() for symbol in row[1:]]
                if len(symbols) != len(dealer_values):
                    raise ValueError(
                        f"Row {hand_type} has {len(symbols)} entries, expected {len(dealer_values)}"
                    )
                for dealer_value, symbol in zip(dealer_values, symbols):
                    if (shape, player_value, dealer_value) in entries:
                        raise ValueError(f"Duplicate entry for {hand_type} vs {dealer_value}")
                    try:
                        entries[(shape, player_value, dealer_value)] = TableEntry(symbol)
                    except ValueError as exc:
                        raise ValueError(
                            f"Unknown action symbol {symbol!r} in row {hand_type}"
                        ) from exc
        return entries

    @staticmethod
    def _parse_shape(hand_type: str) -> HandShape:
        for shape in HandShape:
            if hand_type.startswith(shape.value):
                return shape
        raise ValueError(f"Unknown hand type: {hand_type}")

    def _check_complete(self) -> None:
        missing = [key for key in self.keys() if key not in self._entries]
        if missing:
            shape, player_value, dealer_value = missing[0]
            raise ValueError(
                f"Strategy chart {self.strategy_file} is incomplete: "
                f"{len(missing)} cells missing, first is {shape.value}{player_value} "
                f"vs {dealer_value}"
            )

    @staticmethod
    def keys():
        """Every key the three tables must define."""
        for shape in HandShape:
            for player_value in shape.player_values:
                for dealer_value in DEALER_VALUES:
                    yield (shape, player_value, dealer_value)

    def lookup(self, shape: HandShape, player_value: int, dealer_value: int) -> Optional[TableEntry]:
        """Return the table entry, or None when the key is outside the tables."""
        return self._entries.get((shape, player_value, dealer_value))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key) -> bool:
        return key in self._entries
