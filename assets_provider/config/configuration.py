"""Application configuration loader."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

_MISSING = object()


class Configuration:
    """Read-only view over a nested configuration mapping.

    Keys may be dotted to reach into nested mappings, so ``get("assets")``
    and ``get("server.port")`` both work.
    """

    def __init__(self, values: Mapping[str, Any] | None = None):
        self._values: dict[str, Any] = dict(values or {})

    def get(self, key: str, default: Any = None) -> Any:
        if key in self._values:
            return self._values[key]

        node: Any = self._values
        for part in key.split("."):
            if not isinstance(node, Mapping):
                return default
            node = node.get(part, _MISSING)
            if node is _MISSING:
                return default
        return node

    def has(self, key: str) -> bool:
        return self.get(key, _MISSING) is not _MISSING

    def to_dict(self) -> dict[str, Any]:
        return dict(self._values)


def load_configuration(path: str | Path) -> Configuration:
    """Load a configuration from a YAML file.

    Args:
        path: Location of the YAML file.

    Returns:
        Configuration wrapping the parsed document. An empty file yields an
        empty configuration.

    Raises:
        ConfigurationError: If the document root is not a mapping.
    """
    with open(path) as f:
        values = yaml.safe_load(f)

    if values is None:
        values = {}

    if not isinstance(values, Mapping):
        raise ConfigurationError(
            f"Configuration root must be a mapping, got {type(values).__name__}"
        )

    logger.info(
        "configuration.loaded",
        extra={"path": str(path), "keys": sorted(values.keys())},
    )

    return Configuration(values)
