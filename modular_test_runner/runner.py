"""Run a single test module as an isolated child process."""

import asyncio
import logging
import os
import signal
import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from modular_test_runner.artifacts import artifact_path
from modular_test_runner.engines.base import TestEngine
from modular_test_runner.errors import ArtifactError
from modular_test_runner.models.result import ModuleOutcome

log = logging.getLogger(__name__)


def describe_return_code(return_code: int) -> str | None:
    """Explain a non-zero return code, or None for success."""
    if return_code == 0:
        return None
    if return_code < 0:
        try:
            name = signal.Signals(-return_code).name
        except ValueError:
            name = f"signal {-return_code}"
        return f"Terminated by {name}"
    return f"Exited with status {return_code}"


@dataclass(frozen=True, kw_only=True)
class ModuleRunner:
    """Runs one module per call and captures its combined output.

    The child process is awaited to full termination before run() returns,
    so its memory is reclaimed before the next module starts.
    """

    engine: TestEngine
    log_dir: Path
    parallelism: int = 1
    working_dir: Path | None = None

    async def run(self, module_id: str) -> ModuleOutcome:
        """Run the module and classify it by its exit status.

        Args:
            module_id: Module identifier from the catalogue

        Returns:
            Outcome for the module; launch problems yield a failed outcome

        Raises:
            ArtifactError: If the log artifact cannot be written

        """
        log_path = artifact_path(self.log_dir, module_id)
        started = time.monotonic()

        try:
            log_file = log_path.open("wb")
        except OSError as e:
            raise ArtifactError(f"Cannot open log artifact {log_path}: {e}") from e

        with log_file:
            try:
                command = self.engine.build_command(module_id, self.parallelism)
                return_code = await self._spawn(command, log_file)
            except Exception as e:
                log.error("Failed to launch module %s: %s", module_id, e)
                self._write_launch_error(log_file, log_path, e)
                return ModuleOutcome(
                    module_id=module_id,
                    status="failed",
                    log_path=log_path,
                    duration=time.monotonic() - started,
                    message=f"Failed to launch: {e}",
                )

        duration = time.monotonic() - started
        log.debug(
            "Module %s finished: return_code=%d duration=%.1fs",
            module_id,
            return_code,
            duration,
        )
        return ModuleOutcome(
            module_id=module_id,
            status="passed" if return_code == 0 else "failed",
            log_path=log_path,
            duration=duration,
            return_code=return_code,
            message=describe_return_code(return_code),
        )

    async def _spawn(self, command: Sequence[str], log_file: BinaryIO) -> int:
        """Start the command with output redirected and wait for it to exit."""
        if not command:
            raise ValueError("Engine produced an empty command")

        log.debug("Spawning: %s", " ".join(command))
        env = {**os.environ, **self.engine.environment()}
        process = await asyncio.create_subprocess_exec(
            *command,
            cwd=self.working_dir,
            env=env,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=log_file,
            stderr=asyncio.subprocess.STDOUT,
        )
        return await process.wait()

    @staticmethod
    def _write_launch_error(
        log_file: BinaryIO, log_path: Path, error: Exception
    ) -> None:
        try:
            log_file.write(f"Failed to launch module: {error}\n".encode())
            log_file.flush()
        except OSError as e:
            raise ArtifactError(f"Cannot write log artifact {log_path}: {e}") from e
