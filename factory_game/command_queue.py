"""Thread-safe FIFO of commands to run on the game thread."""

from __future__ import annotations

import threading
from collections import deque
from typing import Callable

from factory_game.events import Event, EventDispatcher

Command = Callable[[], None]


class CommandQueue:
    """Commands pushed from any thread, taken one at a time or all at once."""

    def __init__(self) -> None:
        self._queue: deque[Command] = deque()
        self._ready = threading.Condition()

    def push(self, command: Command) -> None:
        with self._ready:
            self._queue.append(command)
            self._ready.notify()

    def push_event(self, dispatcher: EventDispatcher, event: Event) -> None:
        """Queue a command that dispatches ``event`` through ``dispatcher``."""
        self.push(lambda: dispatcher.dispatch(event))

    def pop(self) -> Command:
        """Take the oldest command, waiting until there is one."""
        with self._ready:
            self._ready.wait_for(lambda: bool(self._queue))
            return self._queue.popleft()

    def pop_all(self) -> list[Command]:
        """Take every queued command, oldest first, leaving the queue empty."""
        with self._ready:
            commands = list(self._queue)
            self._queue.clear()
            return commands

    def __len__(self) -> int:
        with self._ready:
            return len(self._queue)