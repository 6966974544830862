"""Cargo engine module."""

from modular_test_runner.engines.cargo.config import CargoConfig
from modular_test_runner.engines.cargo.engine import CargoEngine
from modular_test_runner.engines.cargo.manifest import cargo_manifest

__all__ = ["CargoConfig", "CargoEngine", "cargo_manifest"]
