"""Cargo engine manifest."""

from modular_test_runner.engines.cargo.config import CargoConfig
from modular_test_runner.engines.cargo.engine import CargoEngine
from modular_test_runner.engines.manifest import EngineManifest

cargo_manifest = EngineManifest(
    config_cls=CargoConfig,
    engine_factory=CargoEngine.from_config,
)
