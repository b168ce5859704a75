from __future__ import annotations

from enum import Enum

from .base import Asset


class ScriptLocation(str, Enum):
    """Where in the document a script is inserted."""

    HEAD = "head"
    FOOTER = "footer"


DEFAULT_LOCATION = ScriptLocation.FOOTER


class Script(Asset):
    """Registered script with optional translation bindings."""

    extension = "js"
    kind = "script"

    def __init__(self, handle: str, name: str):
        super().__init__(handle, name)
        self.location = DEFAULT_LOCATION
        self._translations: dict[str, str | None] = {}

    @property
    def in_footer(self) -> bool:
        return self.location is ScriptLocation.FOOTER

    @property
    def translations(self) -> dict[str, str | None]:
        """Translation catalog paths keyed by domain."""
        return dict(self._translations)

    def load_in(self, location: str | ScriptLocation) -> Script:
        """Set the document location.

        Raises:
            ValueError: If ``location`` is neither ``head`` nor ``footer``.
        """
        self.location = ScriptLocation(location)
        return self

    def with_translation(self, domain: str, path: str | None = None) -> Script:
        # Re-binding a domain replaces the earlier path
        self._translations[domain] = path
        return self
