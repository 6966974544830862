"""Models for module execution results."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal


@dataclass(frozen=True, kw_only=True)
class ModuleOutcome:
    """Result of running one module in its own process.

    Only the process termination status decides the status; the captured
    output lives in the log artifact at log_path.
    """

    module_id: str
    status: Literal["passed", "failed"]
    log_path: Path
    duration: float
    return_code: int | None = None
    message: str | None = None

    @property
    def passed(self) -> bool:
        """Whether the module passed."""
        return self.status == "passed"


@dataclass(kw_only=True)
class RunSummary:
    """Aggregate state of a run, filled in as outcomes arrive."""

    total: int = 0
    passed: int = 0
    failed: int = 0
    failed_modules: list[str] = field(default_factory=list)
    outcomes: list[ModuleOutcome] = field(default_factory=list)
    duration: float = 0.0
    finalized: bool = False

    def record(self, outcome: ModuleOutcome) -> None:
        """Account for one module outcome."""
        if self.finalized:
            raise RuntimeError("Cannot record outcomes on a finalized summary")

        self.outcomes.append(outcome)
        if outcome.passed:
            self.passed += 1
        else:
            self.failed += 1
            self.failed_modules.append(outcome.module_id)

    def finalize(self, duration: float) -> None:
        """Freeze the summary once every module has produced an outcome."""
        if len(self.outcomes) != self.total:
            raise RuntimeError(
                f"Run incomplete: {len(self.outcomes)} of {self.total} module(s) "
                "produced an outcome"
            )
        self.duration = duration
        self.finalized = True

    @property
    def failures(self) -> Sequence[ModuleOutcome]:
        """Failed outcomes in catalogue order."""
        return [outcome for outcome in self.outcomes if not outcome.passed]
