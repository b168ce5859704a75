"""Schemas for asset definitions."""

from .assets import (
    AssetDefinition,
    ScriptDefinition,
    StyleDefinition,
    TranslationDefinition,
    parse_asset_definition,
    validate_asset_definition,
)

__all__ = [
    "AssetDefinition",
    "ScriptDefinition",
    "StyleDefinition",
    "TranslationDefinition",
    "parse_asset_definition",
    "validate_asset_definition",
]
