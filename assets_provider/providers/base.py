from typing import Protocol

from ..container import Container, ContainerBuilder


class ServiceProvider(Protocol):
    def configure(self, container_builder: ContainerBuilder) -> None: ...

    def load(self, container: Container) -> None: ...
