"""Game events and a dispatcher that routes them to subscribers by type."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import count
from typing import Callable, TypeVar

CallbackID = int

E = TypeVar("E", bound="Event")


@dataclass(frozen=True)
class Event:
    """Base class of every event."""


@dataclass(frozen=True)
class StartInteractEvent(Event):
    pass


@dataclass(frozen=True)
class StopInteractEvent(Event):
    pass


@dataclass(frozen=True)
class XAxisEvent(Event):
    val: float


@dataclass(frozen=True)
class YAxisEvent(Event):
    val: float


class EventDispatcher:
    """Calls the callbacks subscribed to an event's exact type."""

    def __init__(self) -> None:
        self._listeners: dict[type, list[tuple[CallbackID, Callable[[Event], None]]]] = {}
        self._ids = count(1)

    def subscribe(self, event_type: type[E], callback: Callable[[E], None]) -> CallbackID:
        """Register ``callback`` for ``event_type`` and return its id."""
        callback_id = next(self._ids)
        self._listeners.setdefault(event_type, []).append((callback_id, callback))
        return callback_id

    def unsubscribe(self, event_type: type, callback_id: CallbackID) -> None:
        """Remove the callback with ``callback_id``; unknown ids are ignored."""
        listeners = self._listeners.get(event_type)
        if listeners:
            self._listeners[event_type] = [
                (cid, cb) for cid, cb in listeners if cid != callback_id
            ]

    def dispatch(self, event: Event) -> None:
        """Call every callback subscribed to ``type(event)``, in subscription order."""
        for _, callback in list(self._listeners.get(type(event), ())):
            callback(event)