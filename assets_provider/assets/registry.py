"""Registry of configured scripts and stylesheets."""

from __future__ import annotations

import logging

from ..observability.metrics import ASSETS_ENQUEUED
from .host import AssetHost
from .metadata import AssetMetadata, load_asset_metadata
from .script import Script
from .style import Style

logger = logging.getLogger(__name__)


class AssetRegistry:
    """Hold registered assets and forward them to the host on enqueue."""

    def __init__(self, directory: str, url: str, host: AssetHost):
        self.directory = directory
        self.url = url.rstrip("/")
        self._host = host
        self._scripts: dict[str, Script] = {}
        self._styles: dict[str, Style] = {}
        self._metadata: dict[str, AssetMetadata] = {}

    @property
    def scripts(self) -> list[Script]:
        return list(self._scripts.values())

    @property
    def styles(self) -> list[Style]:
        return list(self._styles.values())

    def __len__(self) -> int:
        return len(self._scripts) + len(self._styles)

    def register_script(self, handle: str, name: str) -> Script:
        script = Script(handle, name)
        self._scripts[handle] = script
        return script

    def register_style(self, handle: str, name: str) -> Style:
        style = Style(handle, name)
        self._styles[handle] = style
        return style

    def get_script(self, handle: str) -> Script | None:
        return self._scripts.get(handle)

    def get_style(self, handle: str) -> Style | None:
        return self._styles.get(handle)

    def url_for(self, asset: Script | Style) -> str:
        return f"{self.url}/{asset.file_name}"

    def metadata_for(self, name: str) -> AssetMetadata:
        """Return build metadata for ``name``, read once per registry."""
        if name not in self._metadata:
            self._metadata[name] = load_asset_metadata(self.directory, name)
        return self._metadata[name]

    def enqueue(self) -> None:
        """Emit every registered asset to the host."""
        for style in self._styles.values():
            metadata = self.metadata_for(style.name)
            src = self.url_for(style)
            if style.preloaded:
                self._host.preload(src, style.kind)
            self._host.enqueue_style(
                style.handle,
                src,
                metadata.dependencies,
                metadata.version,
                style.media,
            )

        for script in self._scripts.values():
            metadata = self.metadata_for(script.name)
            src = self.url_for(script)
            if script.preloaded:
                self._host.preload(src, script.kind)
            self._host.register_script(
                script.handle,
                src,
                metadata.dependencies,
                metadata.version,
                script.in_footer,
            )
            for domain, path in script.translations.items():
                self._host.set_script_translations(script.handle, domain, path)
            self._host.enqueue_script(script.handle)

        ASSETS_ENQUEUED.inc()
        logger.debug(
            "assets.enqueued",
            extra={"scripts": len(self._scripts), "styles": len(self._styles)},
        )
