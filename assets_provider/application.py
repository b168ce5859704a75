"""Two-phase bootstrap of service providers."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from .assets.host import AssetHost, HtmlAssetHost, PageAssets
from .assets.registry import AssetRegistry
from .config import Configuration, Settings, get_settings
from .container import Container, ContainerBuilder
from .hooks import ENQUEUE_ASSETS, Hooks
from .providers.assets import AssetsProvider
from .providers.base import ServiceProvider

logger = logging.getLogger(__name__)


@dataclass
class Application:
    """A loaded application. Only produced by ``bootstrap``."""

    container: Container
    hooks: Hooks
    host: AssetHost
    providers: list[ServiceProvider] = field(default_factory=list)

    @property
    def registry(self) -> AssetRegistry:
        return self.container.get(AssetRegistry)

    def emit(self) -> None:
        """Fire the asset hook for one page render."""
        self.hooks.do_action(ENQUEUE_ASSETS)

    def render_assets(self) -> PageAssets:
        """Emit into the HTML host and return the page markup.

        Raises:
            TypeError: If the application was bootstrapped with another host.
        """
        if not isinstance(self.host, HtmlAssetHost):
            raise TypeError(
                f"render_assets requires HtmlAssetHost, got {type(self.host).__name__}"
            )
        # Drop anything left by an emit that failed before rendering
        self.host.reset()
        self.emit()
        return self.host.render()


def bootstrap(
    configuration: Configuration,
    settings: Settings | None = None,
    host: AssetHost | None = None,
    providers: Iterable[ServiceProvider] | None = None,
) -> Application:
    """Configure and load providers, returning the loaded application.

    Args:
        configuration: Application configuration holding the asset list.
        settings: Process settings; defaults to ``get_settings()``.
        host: Receiver of enqueued assets; defaults to ``HtmlAssetHost``.
        providers: Service providers to run; defaults to ``AssetsProvider``.
    """
    settings = settings or get_settings()
    host = host if host is not None else HtmlAssetHost()
    hooks = Hooks()
    provider_list: list[ServiceProvider] = (
        list(providers) if providers is not None else [AssetsProvider()]
    )

    builder = ContainerBuilder()
    builder.add_instance(Configuration, configuration)
    builder.add_instance(Settings, settings)
    builder.add_instance(Hooks, hooks)
    builder.add_instance(AssetHost, host)

    for provider in provider_list:
        provider.configure(builder)

    container = builder.build()

    for provider in provider_list:
        provider.load(container)

    logger.info(
        "application.loaded",
        extra={"providers": [type(p).__name__ for p in provider_list]},
    )

    return Application(
        container=container, hooks=hooks, host=host, providers=provider_list
    )
