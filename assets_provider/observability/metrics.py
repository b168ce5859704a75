"""Prometheus metric definitions for asset registration."""

from prometheus_client import Counter

ASSETS_REGISTERED = Counter(
    "assets_provider_registered_total",
    "Assets registered from configuration",
    ["type"],
)

ASSETS_INVALID_DEFINITIONS = Counter(
    "assets_provider_invalid_definitions_total",
    "Asset definitions rejected during load",
)

ASSETS_ENQUEUED = Counter(
    "assets_provider_enqueue_total",
    "Times the registry emitted its assets to the host",
)
