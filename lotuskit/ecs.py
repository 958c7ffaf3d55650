"""Entity-component-system store: entities, component pools, systems and prefabs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

ENTITY_MAX = (1 << 16) - 1
COMPONENT_MAX = 1 << 5
PREFAB_MAX = 1 << 6

ComponentFactory = Callable[[], Any]
System = Callable[[int], Any]


@dataclass(frozen=True)
class Prefab:
    """A reusable list of component ids, optionally extending another prefab."""

    component_ids: tuple[int, ...]
    extends: Optional[int] = None


class World:
    """Holds entities, their components, component systems and prefabs.

    A component is registered with a factory that builds its default value;
    attaching the component to an entity stores a fresh value from it.
    A system is a callable taking an entity id.
    """

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self._entity_count = 0
        self._free: list[int] = []
        self._masks: dict[int, set[int]] = {}
        self._factories: dict[int, ComponentFactory] = {}
        self._storage: dict[int, dict[int, Any]] = {}
        self._systems: dict[int, System] = {}
        self._prefabs: list[Prefab] = []

    @property
    def entity_count(self) -> int:
        """Number of entity ids ever handed out (live or recycled)."""
        return self._entity_count

    @property
    def component_count(self) -> int:
        """Number of registered components."""
        return len(self._factories)

    @property
    def prefabs(self) -> tuple[Prefab, ...]:
        """The prefabs in id order."""
        return tuple(self._prefabs)

    def entities(self) -> Iterator[int]:
        """Iterate over live entity ids in ascending order."""
        return iter(sorted(self._masks))

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._masks

    def _check_entity(self, entity_id: int) -> set[int]:
        try:
            return self._masks[entity_id]
        except KeyError:
            raise IndexError(f"entity {entity_id} does not exist") from None

    @staticmethod
    def _check_component_range(component_id: int) -> None:
        if not 0 <= component_id < COMPONENT_MAX:
            raise ValueError(f"component id {component_id} is out of range")

    def _check_component(self, component_id: int) -> None:
        self._check_component_range(component_id)
        if component_id not in self._factories:
            raise KeyError(f"component {component_id} is not registered")

    def create_entity(self) -> int:
        """Create an entity, reusing the most recently freed id if any."""
        if self._free:
            entity_id = self._free.pop()
        else:
            if self._entity_count >= ENTITY_MAX:
                raise OverflowError("maximum number of entities reached")
            entity_id = self._entity_count
            self._entity_count += 1
        self._masks[entity_id] = set()
        return entity_id

    def destroy_entity(self, entity_id: int) -> None:
        """Remove every component from an entity and free its id."""
        mask = self._check_entity(entity_id)
        for component_id in sorted(mask):
            self.remove_component(entity_id, component_id)
        del self._masks[entity_id]
        self._free.append(entity_id)

    def register_component(self, factory: ComponentFactory, component_id: int) -> None:
        """Register a component id with a factory for its default value."""
        if not callable(factory):
            raise TypeError("component factory must be callable")
        self._check_component_range(component_id)
        if component_id in self._factories:
            raise ValueError(f"component {component_id} is already registered")
        if len(self._factories) + 1 >= COMPONENT_MAX:
            raise OverflowError("maximum number of components reached")
        self._factories[component_id] = factory
        self._storage[component_id] = {}

    def unregister_component(self, component_id: int) -> None:
        """Detach a component from every entity and drop its registration."""
        self._check_component(component_id)
        for mask in self._masks.values():
            mask.discard(component_id)
        del self._storage[component_id]
        del self._factories[component_id]

    def add_component(self, entity_id: int, component_id: int) -> Any:
        """Attach a component to an entity and return its value."""
        mask = self._check_entity(entity_id)
        self._check_component(component_id)
        mask.add(component_id)
        pool = self._storage[component_id]
        if entity_id not in pool:
            pool[entity_id] = self._factories[component_id]()
        return pool[entity_id]

    def get_component(self, entity_id: int, component_id: int) -> Any:
        """Return an entity's component value, or None if it is not attached."""
        self._check_entity(entity_id)
        self._check_component(component_id)
        return self._storage[component_id].get(entity_id)

    def remove_component(self, entity_id: int, component_id: int) -> None:
        """Detach a component from an entity, discarding its value."""
        mask = self._check_entity(entity_id)
        self._check_component(component_id)
        mask.discard(component_id)
        self._storage[component_id].pop(entity_id, None)

    def has_component(self, entity_id: int, component_id: int) -> bool:
        """Return whether the entity has the component attached."""
        mask = self._masks.get(entity_id)
        if mask is None or component_id not in self._factories:
            return False
        return component_id in mask

    def register_system(self, component_id: int, system: System) -> None:
        """Set the system run for every entity holding ``component_id``."""
        if not callable(system):
            raise TypeError("system must be callable")
        self._check_component(component_id)
        self._systems[component_id] = system

    def unregister_system(self, component_id: int) -> None:
        """Remove the system of a component, if one is set."""
        self._check_component_range(component_id)
        self._systems.pop(component_id, None)

    def run_system(self, component_id: int) -> None:
        """Run the component's system on each entity holding it, by ascending id."""
        self._check_component(component_id)
        try:
            system = self._systems[component_id]
        except KeyError:
            raise KeyError(f"no system registered for component {component_id}") from None
        targets = [e for e, mask in sorted(self._masks.items()) if component_id in mask]
        for entity_id in targets:
            mask = self._masks.get(entity_id)
            if mask is not None and component_id in mask:
                system(entity_id)

    def create_prefab(
        self, component_ids: Iterable[int], parent_id: Optional[int] = None
    ) -> int:
        """Create a prefab; with a parent, its components come first. Return its id."""
        ids = tuple(int(c) for c in component_ids)
        if len(ids) > COMPONENT_MAX:
            raise ValueError("too many components for one prefab")
        if len(self._prefabs) >= PREFAB_MAX:
            raise OverflowError("maximum number of prefabs reached")
        if parent_id is not None:
            if not 0 <= parent_id < len(self._prefabs):
                raise IndexError(f"prefab {parent_id} does not exist")
            ids = self._prefabs[parent_id].component_ids + ids
        self._prefabs.append(Prefab(ids, parent_id))
        return len(self._prefabs) - 1

    def destroy_prefab(self, prefab_id: int) -> None:
        """Remove a prefab; later prefabs shift down one id."""
        if not 0 <= prefab_id < len(self._prefabs):
            raise IndexError(f"prefab {prefab_id} does not exist")
        del self._prefabs[prefab_id]

    def instance_prefab(self, prefab_id: int) -> int:
        """Create an entity holding every component of a prefab; return its id."""
        if not 0 <= prefab_id < len(self._prefabs):
            raise IndexError(f"prefab {prefab_id} does not exist")
        prefab = self._prefabs[prefab_id]
        for component_id in prefab.component_ids:
            self._check_component(component_id)
        entity_id = self.create_entity()
        for component_id in prefab.component_ids:
            self.add_component(entity_id, component_id)
        return entity_id

    def shutdown(self) -> None:
        """Drop every entity, component, system and prefab."""
        self._reset()