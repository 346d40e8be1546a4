"""
Event system for the bjadvisor package.

This package provides the publish/subscribe plumbing a game uses to tell
observers about every card it deals.
"""

from bjadvisor.events.emitter import EventEmitter, EngineEventType

__all__ = ["EventEmitter", "EngineEventType"]
