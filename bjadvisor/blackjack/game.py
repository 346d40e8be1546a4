"""
The blackjack game: players, the dealer, the rules and the dealing of cards.

Every card dealt is first added to the receiving hand and then published to
the game's card observers, in the order they registered.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from bjadvisor.blackjack.actor import Dealer, Player
from bjadvisor.blackjack.rules import Rules
from bjadvisor.common.card import Card
from bjadvisor.events import EngineEventType, EventEmitter

logger = logging.getLogger("blackjack.game")


class CardObserver(ABC):
    """An object interested in seeing every card that is dealt."""

    @abstractmethod
    def on_card_dealt(self, card: Card) -> None:
        """Called each time a card is dealt."""


class Game:
    """A game of blackjack."""

    def __init__(self, rules: Optional[Rules] = None):
        self.rules = rules if rules is not None else Rules()
        self.dealer = Dealer()
        self.players: List[Player] = []
        self.events = EventEmitter()
        self.round = 0

    def add_player(self, player: Player) -> Player:
        self.players.append(player)
        return player

    def register_observer(self, observer) -> Callable[[], None]:
        """
        Add an observer to be told about every card dealt from now on.

        Args:
            observer: A CardObserver, or any object with an on_card_dealt(card) method.

        Returns:
            A function that removes the observer again.
        """
        if not callable(getattr(observer, "on_card_dealt", None)):
            raise TypeError(f"{observer!r} has no on_card_dealt method")
        return self.events.on(EngineEventType.CARD_DEALT, observer.on_card_dealt)

    def deal(self, card: Card, player: Player) -> None:
        """
        Deal the card to the given player and notify all observers of the card dealt.

        Args:
            card: The card to deal.
            player: The player (or the dealer) receiving the card.
        """
        player.deal_card(card)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Dealt {card} to {player.name}")
        self.events.emit(EngineEventType.CARD_DEALT, card)

    def new_round(self) -> None:
        """Clear every hand ready for the next round. Card observers keep their state."""
        self.round += 1
        for player in [*self.players, self.dealer]:
            player.reset()
        self.events.emit(EngineEventType.ROUND_STARTED, self.round)
