"""Densely packed storage for one component type, keyed by entity id."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, TypeVar

EntityID = int

T = TypeVar("T")


class ComponentArray(Generic[T]):
    """Stores components of one type contiguously, with O(1) add, get and remove.

    Removal moves the last component into the freed slot, so the storage
    never has holes.
    """

    def __init__(self, component_type: type[T]) -> None:
        self.component_type = component_type
        self._components: list[T] = []
        self._entities: list[EntityID] = []
        self._index_of: dict[EntityID, int] = {}

    def _store(self, entity: EntityID, component: T) -> None:
        if entity in self._index_of:
            raise ValueError(
                f"Component {self.component_type.__name__} added to entity "
                f"{entity} more than once"
            )
        self._index_of[entity] = len(self._components)
        self._entities.append(entity)
        self._components.append(component)

    def add(self, entity: EntityID, component: T) -> None:
        """Attach an existing component to ``entity``."""
        self._store(entity, component)

    def emplace(self, entity: EntityID, *args: Any, **kwargs: Any) -> T:
        """Build a component from the arguments, attach it and return it."""
        if entity in self._index_of:
            raise ValueError(
                f"Component {self.component_type.__name__} added to entity "
                f"{entity} more than once"
            )
        component = self.component_type(*args, **kwargs)
        self._store(entity, component)
        return component

    def remove(self, entity: EntityID) -> None:
        """Detach the component of ``entity``; raises KeyError if it has none."""
        try:
            removed_index = self._index_of.pop(entity)
        except KeyError:
            raise KeyError(
                f"Entity {entity} has no {self.component_type.__name__} component"
            ) from None
        last_component = self._components.pop()
        last_entity = self._entities.pop()
        if last_entity != entity:
            self._components[removed_index] = last_component
            self._entities[removed_index] = last_entity
            self._index_of[last_entity] = removed_index

    def get(self, entity: EntityID) -> T:
        """Return the component of ``entity``; raises KeyError if it has none."""
        try:
            return self._components[self._index_of[entity]]
        except KeyError:
            raise KeyError(
                f"Entity {entity} has no {self.component_type.__name__} component"
            ) from None

    def for_each(self, func: Callable[[EntityID, T], None]) -> None:
        """Call ``func(entity, component)`` for every component, last stored first.

        The callback may remove the component it is given.
        """
        for entity, component in reversed(list(zip(self._entities, self._components))):
            func(entity, component)

    def entities(self) -> list[EntityID]:
        """Return the ids of every entity that has this component."""
        return list(self._entities)

    def entity_destroyed(self, entity: EntityID) -> None:
        """Drop the component of ``entity`` if it has one."""
        if entity in self._index_of:
            self.remove(entity)

    def __contains__(self, entity: object) -> bool:
        return entity in self._index_of

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[tuple[EntityID, T]]:
        return iter(list(zip(self._entities, self._components)))