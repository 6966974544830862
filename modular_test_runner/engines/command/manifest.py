"""Generic command engine manifest."""

from modular_test_runner.engines.command.config import CommandConfig
from modular_test_runner.engines.command.engine import CommandEngine
from modular_test_runner.engines.manifest import EngineManifest

command_manifest = EngineManifest(
    config_cls=CommandConfig,
    engine_factory=CommandEngine.from_config,
)
