"""
Blackjack strategy engine.

This package provides the hand total calculation, the basic strategy tables,
the Hi-Lo counting strategy and the game objects that feed them dealt cards.
"""

from bjadvisor.blackjack.action import Action
from bjadvisor.blackjack.actor import Dealer, Player
from bjadvisor.blackjack.advisor import compute_action, compute_bet
from bjadvisor.blackjack.constants import InvalidRankError
from bjadvisor.blackjack.counting import CountState, HiLoStrategy
from bjadvisor.blackjack.game import CardObserver, Game
from bjadvisor.blackjack.hand import BlackjackHand, HandTotal, calculate_total
from bjadvisor.blackjack.registry import StrategyRegistry, UnknownStrategyError
from bjadvisor.blackjack.rules import Rules
from bjadvisor.blackjack.strategy import (
    BasicStrategy,
    GameError,
    HandBustError,
    Strategy,
    StrategyLookupError,
)

__all__ = [
    "Action",
    "BasicStrategy",
    "BlackjackHand",
    "CardObserver",
    "CountState",
    "Dealer",
    "Game",
    "GameError",
    "HandBustError",
    "HandTotal",
    "HiLoStrategy",
    "InvalidRankError",
    "Player",
    "Rules",
    "Strategy",
    "StrategyLookupError",
    "StrategyRegistry",
    "UnknownStrategyError",
    "calculate_total",
    "compute_action",
    "compute_bet",
]
