from __future__ import annotations

from .base import Asset

DEFAULT_MEDIA = "all"


class Style(Asset):
    """Registered stylesheet."""

    extension = "css"
    kind = "style"

    def __init__(self, handle: str, name: str):
        super().__init__(handle, name)
        self.media = DEFAULT_MEDIA

    def for_media(self, media_type: str) -> Style:
        self.media = media_type
        return self
