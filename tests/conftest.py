"""Shared test fixtures and configuration."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest

from assets_provider.assets.host import AssetHost
from assets_provider.config import Configuration, Settings
from assets_provider.container import ContainerBuilder
from assets_provider.hooks import Hooks

ROOT_URL = "http://example.com"
FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def root_directory(tmp_path: Path) -> Path:
    (tmp_path / "assets").mkdir()
    return tmp_path


@pytest.fixture
def settings(root_directory: Path) -> Settings:
    return Settings(root_directory=str(root_directory), root_url=ROOT_URL)


@pytest.fixture
def host() -> Mock:
    return Mock(spec=AssetHost)


@pytest.fixture
def hooks() -> Hooks:
    return Hooks()


@pytest.fixture
def make_builder(
    settings: Settings, host: Mock, hooks: Hooks
) -> Callable[[dict[str, Any]], ContainerBuilder]:
    """Build a container builder seeded with the core dependencies."""

    def _make(values: dict[str, Any]) -> ContainerBuilder:
        builder = ContainerBuilder()
        builder.add_instance(Configuration, Configuration(values))
        builder.add_instance(Settings, settings)
        builder.add_instance(Hooks, hooks)
        builder.add_instance(AssetHost, host)
        return builder

    return _make


@pytest.fixture
def write_metadata(root_directory: Path) -> Callable[..., Path]:
    """Write ``<name>.asset.json`` into the asset directory."""

    def _write(name: str, **metadata: Any) -> Path:
        path = root_directory / "assets" / f"{name}.asset.json"
        path.write_text(json.dumps(metadata))
        return path

    return _write


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR
