"""Register configured scripts and stylesheets through a service provider."""

from .application import Application, bootstrap
from .assets import AssetRegistry, HtmlAssetHost, PageAssets, Script, Style
from .config import Configuration, Settings, get_settings, load_configuration
from .container import Container, ContainerBuilder
from .errors import (
    AssetMetadataError,
    AssetRegistryNotReadyError,
    AssetsError,
    ConfigurationError,
    DependencyNotFoundError,
    InvalidAssetDefinitionError,
)
from .hooks import ENQUEUE_ASSETS, Hooks
from .providers import AssetsProvider, ServiceProvider

__all__ = [
    "Application",
    "AssetMetadataError",
    "AssetRegistry",
    "AssetRegistryNotReadyError",
    "AssetsError",
    "AssetsProvider",
    "Configuration",
    "ConfigurationError",
    "Container",
    "ContainerBuilder",
    "DependencyNotFoundError",
    "ENQUEUE_ASSETS",
    "Hooks",
    "HtmlAssetHost",
    "InvalidAssetDefinitionError",
    "PageAssets",
    "Script",
    "ServiceProvider",
    "Settings",
    "Style",
    "bootstrap",
    "get_settings",
    "load_configuration",
]
