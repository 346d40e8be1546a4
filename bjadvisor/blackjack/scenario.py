"""
Run a strategy against a snapshot of a round described in a scenario file.

A scenario file holds ``key=value`` lines (``#`` and ``!`` start comments):

    minimumBet=10
    numberOfDecks=1
    cardsAlreadyDealt=2c,3h,kd
    playerHand=5d,6d
    handCameFromSplit=false
    dealerCard=2s

``minimumBet``, ``playerHand`` and ``dealerCard`` are required. The rule flags
``surrenderAllowed``, ``doubleOn91011Only``, ``doubleOn1011Only`` and
``doubleAfterSplit`` are optional.

Cards are written as a rank (A, 2-10, J, Q, K) followed by a suit
([D]iamonds, [H]earts, [S]pades, [C]lubs), in any case.

Usage:
    bj-scenario hilo my_scenario.properties
"""

import argparse
import logging
import re
import sys
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from bjadvisor.blackjack.action import Action
from bjadvisor.blackjack.actor import Player
from bjadvisor.blackjack.decision_logger import decision_logger
from bjadvisor.blackjack.game import Game
from bjadvisor.blackjack.registry import StrategyRegistry
from bjadvisor.blackjack.rules import Rules
from bjadvisor.blackjack.strategy import GameError
from bjadvisor.common.card import Card, Rank, Suit

CARD_PATTERN = re.compile(r"(10|[2-9]|[akqj])([dhcs])", re.IGNORECASE)

PROPERTY_PATTERN = re.compile(r"([^=:\s]+)\s*[=:]\s*(.*)")

RANKS_BY_SYMBOL = {rank.value: rank for rank in Rank}

SUITS_BY_SYMBOL = {
    "D": Suit.DIAMONDS,
    "H": Suit.HEARTS,
    "S": Suit.SPADES,
    "C": Suit.CLUBS,
}

# Scenario keys for the optional rule flags, mapped to Rules arguments
RULE_FLAGS = {
    "surrenderAllowed": "allow_surrender",
    "doubleOn91011Only": "double_on_9_10_11_only",
    "doubleOn1011Only": "double_on_10_11_only",
    "doubleAfterSplit": "allow_double_after_split",
}


class ScenarioError(ValueError):
    """Raised when a scenario file or card notation can't be parsed."""


def parse_card(text: str) -> Card:
    """Parse a single card such as ``10d`` or ``Ks``."""
    match = CARD_PATTERN.fullmatch(text.strip())
    if not match:
        raise ScenarioError(f"Invalid card pattern {text!r}")
    rank, suit = match.groups()
    return Card(SUITS_BY_SYMBOL[suit.upper()], RANKS_BY_SYMBOL[rank.upper()])


def parse_cards(text: str) -> List[Card]:
    """Parse a comma separated list of cards."""
    return [parse_card(token) for token in text.split(",") if token.strip()]


def parse_properties(text: str) -> Dict[str, str]:
    """Read ``key=value`` (or ``key: value``) lines, skipping blanks and comments."""
    properties = {}
    for number, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line[0] in "#!":
            continue
        match = PROPERTY_PATTERN.fullmatch(line)
        if not match:
            raise ScenarioError(f"Line {number} is not a key=value pair: {line!r}")
        key, value = match.groups()
        properties[key] = value
    return properties


def _parse_bool(key: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("true", "yes", "1"):
        return True
    if lowered in ("false", "no", "0"):
        return False
    raise ScenarioError(f"{key} must be true or false, got {value!r}")


def _parse_int(key: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise ScenarioError(f"{key} must be a whole number, got {value!r}") from exc


@dataclass
class Scenario:
    """A snapshot of a round to run a strategy against."""

    rules: Rules
    player_hand: List[Card]
    dealer_card: Card
    cards_already_dealt: List[Card] = field(default_factory=list)
    hand_came_from_split: bool = False

    @classmethod
    def from_properties(cls, properties: Dict[str, str]) -> "Scenario":
        for key in ("minimumBet", "playerHand", "dealerCard"):
            if key not in properties:
                raise ScenarioError(f"A '{key}' must be provided in the scenario file")

        rule_args = {"min_bet": _parse_int("minimumBet", properties["minimumBet"])}
        if "numberOfDecks" in properties:
            rule_args["num_decks"] = _parse_int("numberOfDecks", properties["numberOfDecks"])
        for key, rule in RULE_FLAGS.items():
            if key in properties:
                rule_args[rule] = _parse_bool(key, properties[key])
        try:
            rules = Rules(**rule_args)
        except ValueError as exc:
            raise ScenarioError(str(exc)) from exc

        dealer_cards = parse_cards(properties["dealerCard"])
        if len(dealer_cards) != 1:
            raise ScenarioError("'dealerCard' must be exactly one card")

        return cls(
            rules=rules,
            player_hand=parse_cards(properties["playerHand"]),
            dealer_card=dealer_cards[0],
            cards_already_dealt=parse_cards(properties.get("cardsAlreadyDealt", "")),
            hand_came_from_split=_parse_bool(
                "handCameFromSplit", properties.get("handCameFromSplit", "false")
            ),
        )

    @classmethod
    def load(cls, path: str) -> "Scenario":
        with open(path, "r") as f:
            return cls.from_properties(parse_properties(f.read()))


@dataclass
class ScenarioResult:
    """What a strategy advised for a scenario."""

    strategy: str
    bet: int
    action: Action
    player_hand: str
    dealer_hand: str
    cards_already_dealt: List[Card]
    rules: Rules

    def report(self) -> str:
        return "\n".join(
            [
                f"Amount To Bet: {self.bet}",
                "",
                f"Strategy: {self.strategy}",
                f"Player Hand: {self.player_hand}",
                f"Dealer Hand: {self.dealer_hand}",
                f"Cards Already Dealt: {', '.join(str(c) for c in self.cards_already_dealt)}",
                f"Rules: {self.rules}",
                "",
                f"Next Move: {self.action}",
            ]
        )


def run_scenario(strategy_name: str, scenario: Scenario) -> ScenarioResult:
    """
    Play a scenario through a fresh game.

    Cards already dealt go to a dummy player so a counting strategy sees them.
    The bet is decided before the player's and dealer's cards are dealt.
    """
    game = Game(scenario.rules)
    player = game.add_player(Player("Player"))
    dummy = game.add_player(Player("Dummy"))
    strategy = StrategyRegistry.create(strategy_name, game, player)

    for card in scenario.cards_already_dealt:
        game.deal(card, dummy)

    bet = strategy.bet_amount()

    for card in scenario.player_hand:
        game.deal(card, player)
    player.hand.is_split = scenario.hand_came_from_split
    game.deal(scenario.dealer_card, game.dealer)

    action = strategy.next_action(player.hand, game.dealer.up_card)
    return ScenarioResult(
        strategy=str(strategy),
        bet=bet,
        action=action,
        player_hand=str(player.hand),
        dealer_hand=str(game.dealer.hand),
        cards_already_dealt=list(scenario.cards_already_dealt),
        rules=scenario.rules,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Ask a blackjack strategy for its bet and next move in a scenario."
    )
    parser.add_argument(
        "strategy",
        help=f"Strategy to use ({', '.join(StrategyRegistry.list_strategies())})",
    )
    parser.add_argument("scenario", help="Path to the scenario file")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log strategy lookups and count updates"
    )
    args = parser.parse_args(argv)

    decision_logger.set_level(
        logging.DEBUG if args.verbose else logging.WARNING
    )

    try:
        scenario = Scenario.load(args.scenario)
        result = run_scenario(args.strategy, scenario)
    except (OSError, ValueError, GameError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(result.report())
    return 0


if __name__ == "__main__":
    sys.exit(main())
