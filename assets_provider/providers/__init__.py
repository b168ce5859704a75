"""Service providers and dependency wiring."""

from .assets import AssetsProvider
from .base import ServiceProvider

__all__ = ["AssetsProvider", "ServiceProvider"]
