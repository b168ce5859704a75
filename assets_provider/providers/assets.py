"""Service provider that registers configured scripts and stylesheets."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..assets.host import AssetHost
from ..assets.registry import AssetRegistry
from ..assets.script import Script
from ..assets.style import Style
from ..config import Configuration, Settings
from ..container import Container, ContainerBuilder
from ..errors import AssetRegistryNotReadyError, InvalidAssetDefinitionError
from ..hooks import ENQUEUE_ASSETS, Hooks
from ..observability.metrics import ASSETS_INVALID_DEFINITIONS, ASSETS_REGISTERED
from ..observability.tracing import get_tracer
from ..schemas.assets import (
    ScriptDefinition,
    StyleDefinition,
    parse_asset_definition,
)

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)

DEFAULT_ASSET_DIRECTORY = "/assets"
DEFAULT_ASSET_URL = "/assets"


class AssetsProvider:
    """Register assets from configuration and enqueue them on page render.

    ``configure`` resolves the asset directory and URL and exposes the
    registry as a singleton. The registry is only built in ``load``;
    resolving it earlier raises ``AssetRegistryNotReadyError``.
    """

    def __init__(self) -> None:
        self._registry: AssetRegistry | None = None
        self._root_directory = ""
        self._asset_directory = ""
        self._asset_url = ""

    @property
    def registry(self) -> AssetRegistry:
        if self._registry is None:
            raise AssetRegistryNotReadyError()
        return self._registry

    def configure(self, container_builder: ContainerBuilder) -> None:
        container = container_builder.build()

        configuration = container.get(Configuration)
        settings = container.get(Settings)

        self._root_directory = settings.root_directory
        self._asset_directory = settings.root_directory + configuration.get(
            "assetDirectory", DEFAULT_ASSET_DIRECTORY
        )
        self._asset_url = settings.root_url + configuration.get(
            "assetUrl", DEFAULT_ASSET_URL
        )

        container_builder.add_factory(AssetRegistry, self._get_registry).singleton()

    def load(self, container: Container) -> None:
        configuration = container.get(Configuration)
        definitions = configuration.get("assets", []) or []

        with tracer.start_as_current_span("assets.load") as span:
            span.set_attribute("assets.count", len(definitions))

            # Every definition is decoded before anything is registered
            parsed = [self._parse(definition) for definition in definitions]

            registry = AssetRegistry(
                self._asset_directory, self._asset_url, container.get(AssetHost)
            )
            for definition in parsed:
                self._register(registry, definition)

            self._registry = registry

        container.get(Hooks).add_action(ENQUEUE_ASSETS, registry.enqueue)

        logger.info(
            "assets.loaded",
            extra={
                "scripts": len(registry.scripts),
                "styles": len(registry.styles),
                "directory": self._asset_directory,
                "url": self._asset_url,
            },
        )

    def _get_registry(self) -> AssetRegistry:
        return self.registry

    def _parse(self, definition: Any) -> StyleDefinition | ScriptDefinition:
        try:
            return parse_asset_definition(definition)
        except InvalidAssetDefinitionError as exc:
            ASSETS_INVALID_DEFINITIONS.inc()
            handle = definition.get("handle") if isinstance(definition, Mapping) else None
            logger.error(
                "assets.invalid_definition",
                extra={"handle": handle, "error": exc.message},
            )
            raise

    def _register(
        self,
        registry: AssetRegistry,
        definition: StyleDefinition | ScriptDefinition,
    ) -> None:
        asset: Script | Style
        if isinstance(definition, StyleDefinition):
            asset = self._register_style(registry, definition)
        else:
            asset = self._register_script(registry, definition)

        asset.preload(definition.preload)

        ASSETS_REGISTERED.labels(asset.kind).inc()
        logger.debug(
            "assets.registered",
            extra={
                "type": asset.kind,
                "handle": asset.handle,
                "asset_name": asset.name,
            },
        )

    def _register_style(
        self, registry: AssetRegistry, definition: StyleDefinition
    ) -> Style:
        style = registry.register_style(definition.handle, definition.name)

        if definition.media_type is not None:
            style.for_media(definition.media_type)

        return style

    def _register_script(
        self, registry: AssetRegistry, definition: ScriptDefinition
    ) -> Script:
        script = registry.register_script(definition.handle, definition.name)

        if definition.target_location is not None:
            script.load_in(definition.target_location)

        for translation in definition.translations or []:
            path = translation.relative_path
            script.with_translation(
                translation.domain,
                f"{self._root_directory}/{path}" if path else None,
            )

        return script

