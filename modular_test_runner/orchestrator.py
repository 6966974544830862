"""Module orchestrator for running a catalogue one module at a time."""

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from modular_test_runner.errors import ArtifactError
from modular_test_runner.models.result import ModuleOutcome, RunSummary
from modular_test_runner.runner import ModuleRunner

log = logging.getLogger(__name__)


class ProgressListener(Protocol):
    """Receives notifications as modules start and finish."""

    def module_started(self, module_id: str, index: int, total: int) -> None:
        """Call before the module's process is spawned."""

    def module_finished(self, outcome: ModuleOutcome) -> None:
        """Call after the module's process has terminated."""


@dataclass(frozen=True, kw_only=True)
class ModuleOrchestrator:
    """Runs every catalogue module sequentially and aggregates the outcomes.

    Modules never overlap: bounding peak memory is the reason modules run in
    separate processes at all.
    """

    runner: ModuleRunner
    progress: ProgressListener | None = None

    async def execute(self, module_ids: Sequence[str]) -> RunSummary:
        """Run all modules and return the finalized summary.

        A failing module never stops the run; only infrastructure errors
        propagate.

        Args:
            module_ids: Module identifiers in catalogue order

        Returns:
            Summary with one outcome per module

        Raises:
            ArtifactError: If the log directory or a log artifact is unusable

        """
        summary = RunSummary(total=len(module_ids))

        if not module_ids:
            log.warning("Module catalogue is empty, nothing to run")
            summary.finalize(0.0)
            return summary

        try:
            self.runner.log_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ArtifactError(
                f"Cannot create log directory {self.runner.log_dir}: {e}"
            ) from e

        log.info("Running %d module(s) sequentially...", len(module_ids))
        started = time.monotonic()

        for index, module_id in enumerate(module_ids, start=1):
            if self.progress is not None:
                self.progress.module_started(module_id, index, len(module_ids))

            outcome = await self.runner.run(module_id)
            summary.record(outcome)
            log.info(
                "Module completed: module=%s status=%s duration=%.1fs",
                module_id,
                outcome.status,
                outcome.duration,
            )

            if self.progress is not None:
                self.progress.module_finished(outcome)

        summary.finalize(time.monotonic() - started)
        log.info(
            "Run completed: %d passed, %d failed", summary.passed, summary.failed
        )
        return summary
