"""Generic command engine implementation."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from modular_test_runner.engines.base import TestEngine
from modular_test_runner.engines.command.config import CommandConfig


@dataclass(frozen=True, kw_only=True)
class CommandEngine(TestEngine):
    """Runs an arbitrary argv template per module."""

    config: CommandConfig

    @classmethod
    def from_config(cls, config: CommandConfig) -> "CommandEngine":
        """Create engine from configuration."""
        return cls(config=config)

    def build_command(self, module_id: str, parallelism: int) -> Sequence[str]:
        """Substitute the module and parallelism into the command template."""
        return [
            arg.format(module=module_id, parallelism=parallelism)
            for arg in self.config.command
        ]

    def environment(self) -> Mapping[str, str]:
        """Return the configured extra environment."""
        return dict(self.config.env)
