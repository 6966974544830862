"""Loading of engines from entry points."""

from collections.abc import Mapping
from importlib.metadata import entry_points
from typing import Any

from pydantic import ValidationError

from modular_test_runner.engines.base import TestEngine
from modular_test_runner.engines.manifest import EngineManifest
from modular_test_runner.errors import CatalogueError, EngineNotFoundError

ENTRY_POINT_GROUP = "modular_test_runner.engines"


def load_engine_manifest(key: str) -> EngineManifest[Any]:
    """Load an engine manifest by key.

    Args:
        key: The engine key as registered in pyproject.toml
             (e.g., "cargo", "command")

    Returns:
        The engine manifest instance

    Raises:
        EngineNotFoundError: If no engine with the given key is found

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == key:
            manifest: EngineManifest[Any] = entry.load()
            return manifest

    available = [e.name for e in entries]
    raise EngineNotFoundError(
        f"Engine '{key}' not found. Available engines: {available}"
    )


def create_engine(key: str, config: Mapping[str, Any]) -> TestEngine:
    """Load the engine registered under key and build it from config."""
    manifest = load_engine_manifest(key)
    try:
        engine_config = manifest.config_cls(**config)
    except ValidationError as e:
        raise CatalogueError(f"Invalid configuration for engine '{key}': {e}") from e
    return manifest.engine_factory(engine_config)
