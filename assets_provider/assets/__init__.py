"""Script and stylesheet registration."""

from .host import AssetHost, HtmlAssetHost, PageAssets
from .metadata import AssetMetadata, load_asset_metadata
from .registry import AssetRegistry
from .script import Script, ScriptLocation
from .style import Style

__all__ = [
    "AssetHost",
    "AssetMetadata",
    "AssetRegistry",
    "HtmlAssetHost",
    "PageAssets",
    "Script",
    "ScriptLocation",
    "Style",
    "load_asset_metadata",
]
