"""Simple dependency container for wiring service providers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .errors import DependencyNotFoundError

Factory = Callable[[], Any]


class DependencyDefinition:
    """Factory registration returned by ``ContainerBuilder.add_factory``."""

    def __init__(self, identifier: Any, factory: Factory):
        self.identifier = identifier
        self._factory = factory
        self._is_singleton = False
        self._instance: Any = None
        self._resolved = False

    def singleton(self) -> DependencyDefinition:
        """Cache the first instance produced by the factory."""
        self._is_singleton = True
        return self

    def resolve(self) -> Any:
        if not self._is_singleton:
            return self._factory()

        if not self._resolved:
            self._instance = self._factory()
            self._resolved = True
        return self._instance


class Container:
    """Resolve dependencies registered through a ``ContainerBuilder``."""

    def __init__(self, definitions: dict[Any, DependencyDefinition]):
        self._definitions = definitions

    def get(self, identifier: Any) -> Any:
        try:
            definition = self._definitions[identifier]
        except KeyError:
            raise DependencyNotFoundError(identifier) from None
        return definition.resolve()

    def has(self, identifier: Any) -> bool:
        return identifier in self._definitions


class ContainerBuilder:
    """Collect dependency factories before the container is used."""

    def __init__(self) -> None:
        self._definitions: dict[Any, DependencyDefinition] = {}

    def add_factory(self, identifier: Any, factory: Factory) -> DependencyDefinition:
        definition = DependencyDefinition(identifier, factory)
        self._definitions[identifier] = definition
        return definition

    def add_instance(self, identifier: Any, instance: Any) -> DependencyDefinition:
        return self.add_factory(identifier, lambda: instance).singleton()

    def build(self) -> Container:
        # Definitions are shared so singletons resolve once across builds
        return Container(self._definitions)


__all__ = ["Container", "ContainerBuilder", "DependencyDefinition"]
