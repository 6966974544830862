"""Abstract base class for test engines."""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class TestEngine(ABC):
    """Abstract base for the external process that runs one test module.

    An engine only knows how to spell the command line; the module runner
    spawns it, captures its output and judges the exit status.
    """

    __test__ = False

    @abstractmethod
    def build_command(self, module_id: str, parallelism: int) -> Sequence[str]:
        """Return the argv that runs only the given module.

        Args:
            module_id: Module identifier from the catalogue
                (e.g., "channels::channel_mesh")
            parallelism: Hint limiting the engine's own internal parallelism

        Returns:
            Command line, executable first

        Raises:
            ValueError: If no command can be built for the module

        """

    def environment(self) -> Mapping[str, str]:
        """Return extra environment variables for the child process."""
        return {}
