"""
Event system for the bjadvisor package.

Game objects publish what happens at the table (cards dealt, rounds started)
and interested parties, such as a card counting strategy, subscribe to it.
Handlers run synchronously, in the order they subscribed.
"""

from collections import defaultdict
from enum import Enum
from typing import Any, Callable, Union
import logging
import threading

# Create a logger for the event system
logger = logging.getLogger("bjadvisor.events")


class EngineEventType(Enum):
    """Events published by a game."""

    CARD_DEALT = "card_dealt"
    ROUND_STARTED = "round_started"


class EventEmitter:
    """
    Event emitter with ordered subscriptions.

    Subscriptions are keyed by string or enum event types. Handler errors are
    logged and re-raised to the emitter's caller.
    """

    def __init__(self):
        self._listeners = defaultdict(list)
        self._listener_lock = threading.RLock()

    @staticmethod
    def _key(event_type: Union[str, Enum]) -> str:
        if isinstance(event_type, Enum):
            return event_type.name
        return event_type

    def on(self, event_type: Union[str, Enum], callback: Callable) -> Callable:
        """
        Subscribe to an event type.

        Args:
            event_type: The event type to subscribe to (string or enum)
            callback: Function to call when event occurs, signature: fn(event_data)

        Returns:
            Unsubscribe function that can be called to remove this subscription
        """
        event_type = self._key(event_type)
        # Wrapped so that unsubscribing removes this subscription only,
        # even when the same callback is registered twice.
        handler = [callback]

        with self._listener_lock:
            self._listeners[event_type].append(handler)

        def unsubscribe():
            with self._listener_lock:
                handlers = self._listeners[event_type]
                for i, existing in enumerate(handlers):
                    if existing is handler:
                        handlers.pop(i)
                        break

        return unsubscribe

    def emit(self, event_type: Union[str, Enum], data: Any) -> None:
        """
        Emit an event to all registered listeners.

        Args:
            event_type: The type of event to emit
            data: The data to pass to every listener
        """
        event_type = self._key(event_type)

        with self._listener_lock:
            handlers_to_call = [handler[0] for handler in self._listeners.get(event_type, [])]

        # Call handlers outside of the lock to avoid deadlocks
        for callback in handlers_to_call:
            try:
                callback(data)
            except Exception:
                logger.error(f"Error in event handler for {event_type}", exc_info=True)
                raise
