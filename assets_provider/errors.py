"""Exceptions raised by the assets provider."""


class AssetsError(Exception):
    """Base exception for asset errors."""

    pass


class InvalidAssetDefinitionError(AssetsError):
    """Raised when an asset definition is missing required properties."""

    DEFAULT_MESSAGE = (
        "Asset definitions must contain properties for at least: "
        "type, handle and name"
    )

    def __init__(self, message: str | None = None):
        self.message = message or self.DEFAULT_MESSAGE
        super().__init__(self.message)


class AssetRegistryNotReadyError(AssetsError, RuntimeError):
    """Raised when the asset registry is resolved before the load phase."""

    def __init__(self) -> None:
        super().__init__("Asset registry is not available before the load phase")


class DependencyNotFoundError(AssetsError, LookupError):
    """Raised when the container has no factory for an identifier."""

    def __init__(self, identifier: object):
        self.identifier = identifier
        super().__init__(f"No dependency registered for {_describe(identifier)}")


class AssetMetadataError(AssetsError):
    """Raised when an asset metadata file cannot be parsed."""

    pass


class ConfigurationError(AssetsError):
    """Raised when an asset configuration file is malformed."""

    pass


def _describe(identifier: object) -> str:
    if isinstance(identifier, type):
        return f"{identifier.__module__}.{identifier.__qualname__}"
    return repr(identifier)
