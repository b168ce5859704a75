"""Build metadata stored next to compiled assets."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from ..errors import AssetMetadataError

logger = logging.getLogger(__name__)

METADATA_SUFFIX = ".asset.json"


class AssetMetadata(BaseModel):
    """Dependencies and version emitted by the asset build."""

    dependencies: list[str] = Field(default_factory=list)
    version: str | None = None


def load_asset_metadata(directory: str | Path, name: str) -> AssetMetadata:
    """Read ``<name>.asset.json`` from the asset directory.

    A missing file yields empty metadata.

    Raises:
        AssetMetadataError: If the file exists but is not valid metadata.
    """
    path = Path(directory) / f"{name}{METADATA_SUFFIX}"
    if not path.is_file():
        return AssetMetadata()

    try:
        return AssetMetadata.model_validate(json.loads(path.read_text()))
    except (json.JSONDecodeError, ValidationError) as exc:
        logger.warning("assets.metadata_invalid", extra={"path": str(path)})
        raise AssetMetadataError(f"Invalid asset metadata in {path}: {exc}") from exc
