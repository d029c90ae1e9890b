"""Entity registry: hands out entity ids and owns one component array per type."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, TypeVar

from factory_game.component_array import ComponentArray, EntityID

T = TypeVar("T")

MAX_ENTITIES = 5000


class Registry:
    """Creates and destroys entities and manages their components."""

    def __init__(self, max_entities: int = MAX_ENTITIES) -> None:
        self.max_entities = max_entities
        self._available: deque[EntityID] = deque(range(max_entities))
        self._living = 0
        self._arrays: dict[type, ComponentArray[Any]] = {}

    @property
    def living_entity_count(self) -> int:
        return self._living

    def create_entity(self) -> EntityID:
        """Take the next free entity id."""
        if self._living >= self.max_entities:
            raise RuntimeError("Too many entities in existence")
        self._living += 1
        return self._available.popleft()

    def destroy_entity(self, entity: EntityID) -> None:
        """Remove every component of ``entity`` and return its id to the pool."""
        if self._living <= 0:
            raise RuntimeError("Destroying non-existent entity")
        for array in self._arrays.values():
            array.entity_destroyed(entity)
        self._available.append(entity)
        self._living -= 1

    def register_component(self, component_type: type) -> None:
        """Make ``component_type`` usable; registering again changes nothing."""
        if component_type not in self._arrays:
            self._arrays[component_type] = ComponentArray(component_type)

    def _array(self, component_type: type[T]) -> ComponentArray[T]:
        try:
            return self._arrays[component_type]
        except KeyError:
            raise KeyError(
                f"Component type {component_type.__name__} not registered before use"
            ) from None

    def add_component(self, entity: EntityID, component: Any) -> None:
        """Attach ``component``, filed under its own type."""
        self._array(type(component)).add(entity, component)

    def emplace_component(
        self, entity: EntityID, component_type: type[T], *args: Any, **kwargs: Any
    ) -> T:
        """Build a ``component_type`` from the arguments and attach it."""
        return self._array(component_type).emplace(entity, *args, **kwargs)

    def remove_component(self, entity: EntityID, component_type: type) -> None:
        self._array(component_type).remove(entity)

    def get_component(self, entity: EntityID, component_type: type[T]) -> T:
        return self._array(component_type).get(entity)

    def has_component(self, entity: EntityID, component_type: type) -> bool:
        array = self._arrays.get(component_type)
        return array is not None and entity in array

    def view(self, *args: type) -> list[EntityID]:
        """Return the entities that have every one of the given component types."""
        if not args:
            return []
        arrays = sorted((self._array(t) for t in args), key=len)
        smallest, *rest = arrays
        return [e for e in smallest.entities() if all(e in a for a in rest)]

    def for_each(
        self, component_type: type[T], func: Callable[[EntityID, T], None]
    ) -> None:
        """Call ``func(entity, component)`` for every component of the type."""
        self._array(component_type).for_each(func)