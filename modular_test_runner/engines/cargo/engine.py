"""Cargo engine implementation."""

from collections.abc import Sequence
from dataclasses import dataclass

from modular_test_runner.engines.base import TestEngine
from modular_test_runner.engines.cargo.config import CargoConfig


@dataclass(frozen=True, kw_only=True)
class CargoEngine(TestEngine):
    """Runs one module's tests with ``cargo test``, filtered by module path."""

    config: CargoConfig

    @classmethod
    def from_config(cls, config: CargoConfig) -> "CargoEngine":
        """Create engine from configuration."""
        return cls(config=config)

    def build_command(self, module_id: str, parallelism: int) -> Sequence[str]:
        """Build ``cargo test [--lib] <module> -- --test-threads=N``."""
        command = [self.config.cargo, "test"]
        if self.config.lib:
            command.append("--lib")
        if self.config.manifest_path is not None:
            command.extend(["--manifest-path", str(self.config.manifest_path)])
        if self.config.features:
            command.extend(["--features", ",".join(self.config.features)])
        command.extend(self.config.extra_args)
        command.append(module_id)
        command.extend(["--", f"--test-threads={parallelism}"])
        command.extend(self.config.test_args)
        return command
