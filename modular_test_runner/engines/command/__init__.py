"""Generic command engine module."""

from modular_test_runner.engines.command.config import CommandConfig
from modular_test_runner.engines.command.engine import CommandEngine
from modular_test_runner.engines.command.manifest import command_manifest

__all__ = ["CommandConfig", "CommandEngine", "command_manifest"]
