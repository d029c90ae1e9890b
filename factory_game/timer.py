"""Counts down timers and fires their callbacks."""

from __future__ import annotations

from factory_game.component_array import EntityID
from factory_game.components import TimerComponent
from factory_game.registry import Registry


class TimerSystem:
    def __init__(self, registry: Registry) -> None:
        self.registry = registry

    def update(self, dt: float) -> None:
        """Advance every timer by ``dt`` seconds, firing those that run out.

        Repeating timers restart; one-shot timers are removed from their entity.
        """

        def tick(entity: EntityID, timer: TimerComponent) -> None:
            if timer.remaining <= 0.0:
                return
            timer.remaining -= dt
            if timer.remaining <= 0.0:
                timer.on_expire()
                if timer.is_repeating:
                    timer.remaining = timer.duration
                else:
                    self.registry.remove_component(entity, TimerComponent)

        self.registry.for_each(TimerComponent, tick)