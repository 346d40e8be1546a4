"""Registry for the strategies a player can adopt."""

from typing import Callable, Dict, List

from bjadvisor.blackjack.actor import Player
from bjadvisor.blackjack.counting import HiLoStrategy
from bjadvisor.blackjack.game import Game
from bjadvisor.blackjack.strategy import BasicStrategy, Strategy

StrategyFactory = Callable[[Game, Player], Strategy]


class UnknownStrategyError(ValueError):
    """Raised when a strategy name has not been registered."""


class StrategyRegistry:
    """Registry for building strategies by name."""

    _strategies: Dict[str, StrategyFactory] = {}

    @classmethod
    def register(cls, name: str, factory: StrategyFactory) -> None:
        """Register a new strategy factory."""
        cls._strategies[name.lower()] = factory

    @classmethod
    def get(cls, name: str) -> StrategyFactory:
        """Get a strategy factory by name."""
        factory = cls._strategies.get(name.lower())
        if not factory:
            raise UnknownStrategyError(f"Unknown strategy: {name}")
        return factory

    @classmethod
    def create(cls, name: str, game: Game, player: Player) -> Strategy:
        """Build the named strategy for a player in a game and hand it to the player."""
        strategy = cls.get(name)(game, player)
        player.strategy = strategy
        return strategy

    @classmethod
    def list_strategies(cls) -> List[str]:
        """List all registered strategies."""
        return list(cls._strategies.keys())


StrategyRegistry.register("basic", lambda game, player: BasicStrategy(game.rules))
StrategyRegistry.register("hilo", lambda game, player: HiLoStrategy(game.rules, game=game))
