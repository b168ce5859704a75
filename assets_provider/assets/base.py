"""Common behavior for registered assets."""

from __future__ import annotations

from typing import TypeVar

AssetT = TypeVar("AssetT", bound="Asset")


class Asset:
    """A script or stylesheet known by its handle."""

    extension = ""
    kind = ""

    def __init__(self, handle: str, name: str):
        self.handle = handle
        self.name = name
        self._preload = False

    @property
    def preloaded(self) -> bool:
        return self._preload

    @property
    def file_name(self) -> str:
        return f"{self.name}.{self.extension}"

    def preload(self: AssetT, preload: bool = True) -> AssetT:
        """Hint that the host should fetch this asset early."""
        self._preload = bool(preload)
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}(handle={self.handle!r}, name={self.name!r})"
