"""Rendering of run progress and the final summary."""

from collections import deque
from pathlib import Path
from typing import Any, TextIO

from modular_test_runner.errors import MAX_FAILURE_EXIT_CODE
from modular_test_runner.models.result import ModuleOutcome, RunSummary

STATUS_SYMBOLS = {
    "passed": "✅",
    "failed": "❌",
}

RULE = "=" * 50
MODULE_RULE = "━" * 46


def exit_code_for(summary: RunSummary) -> int:
    """Exit code equal to the failed module count, capped below 255."""
    return min(summary.failed, MAX_FAILURE_EXIT_CODE)


def render(summary: RunSummary) -> tuple[str, int]:
    """Render the human-readable summary and derive the exit code."""
    lines = [
        RULE,
        "Test Suite Summary",
        RULE,
        f"Total modules: {summary.total}",
        f"Passed: {summary.passed} {STATUS_SYMBOLS['passed']}",
        f"Failed: {summary.failed} {STATUS_SYMBOLS['failed']}",
        f"Duration: {summary.duration:.1f}s",
        "",
    ]

    if failures := summary.failures:
        lines.append(f"{STATUS_SYMBOLS['failed']} Failed modules:")
        lines.extend(f"   - {outcome.module_id}" for outcome in failures)
        lines.append("")
        lines.append("View logs:")
        lines.extend(f"   cat {outcome.log_path}" for outcome in failures)
    else:
        lines.append(f"{STATUS_SYMBOLS['passed']} All modules passed!")
    lines.append(RULE)

    return "\n".join(lines), exit_code_for(summary)


def format_output(summary: RunSummary) -> dict[str, Any]:
    """Format the run summary for JSON output."""
    return {
        "total": summary.total,
        "passed": summary.passed,
        "failed": summary.failed,
        "duration": summary.duration,
        "failed_modules": list(summary.failed_modules),
        "results": [
            {
                "module": outcome.module_id,
                "status": outcome.status,
                "duration": outcome.duration,
                "return_code": outcome.return_code,
                "message": outcome.message,
                "log_path": str(outcome.log_path),
            }
            for outcome in summary.outcomes
        ],
    }


def read_tail(path: Path, lines: int) -> list[str]:
    """Return the last lines of a log artifact, empty if unreadable."""
    if lines <= 0:
        return []
    try:
        with path.open(encoding="utf-8", errors="replace") as f:
            return [line.rstrip("\n") for line in deque(f, maxlen=lines)]
    except OSError:
        return []


class ConsoleProgress:
    """Prints live per-module progress to a text stream."""

    def __init__(self, stream: TextIO, tail_lines: int = 3) -> None:
        self.stream = stream
        self.tail_lines = tail_lines

    def module_started(self, module_id: str, index: int, total: int) -> None:
        self._print(MODULE_RULE)
        self._print(f"Testing: {module_id} ({index}/{total})")
        self._print(MODULE_RULE)

    def module_finished(self, outcome: ModuleOutcome) -> None:
        for line in read_tail(outcome.log_path, self.tail_lines):
            self._print(line)

        symbol = STATUS_SYMBOLS[outcome.status]
        label = "passed" if outcome.passed else "FAILED"
        self._print(f"{symbol} {outcome.module_id} {label} ({outcome.duration:.1f}s)")
        if not outcome.passed:
            if outcome.message:
                self._print(f"   {outcome.message}")
            self._print(f"   Log saved: {outcome.log_path}")
        self._print("")

    def _print(self, text: str) -> None:
        print(text, file=self.stream, flush=True)
