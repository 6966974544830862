"""Fixtures for integration tests."""

import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

import pytest
import yaml

STUB_COLLABORATOR = """\
import os
import sys

module_id, parallelism = sys.argv[1], sys.argv[2]
failing = set(filter(None, os.environ.get("STUB_FAILING", "").split(",")))
print(f"running {module_id} with {parallelism} thread(s)", flush=True)
print(f"diagnostics for {module_id}", file=sys.stderr, flush=True)
if module_id in failing:
    print("test result: FAILED", flush=True)
    sys.exit(1)
print("test result: ok", flush=True)
"""


class WriteCatalogueFn(Protocol):
    """Protocol for catalogue writing function."""

    def __call__(self, modules: Sequence[str], *, failing: Sequence[str] = ()) -> Path:
        """Write a catalogue using the stub collaborator and return its path."""


@pytest.fixture
def stub_collaborator(tmp_path: Path) -> Path:
    """Write a test-engine stand-in that fails modules listed in STUB_FAILING."""
    script = tmp_path / "stub_collaborator.py"
    script.write_text(STUB_COLLABORATOR)
    return script


@pytest.fixture
def log_dir(tmp_path: Path) -> Path:
    """Directory for log artifacts."""
    return tmp_path / "logs"


@pytest.fixture
def write_catalogue(
    tmp_path: Path, stub_collaborator: Path, log_dir: Path
) -> WriteCatalogueFn:
    """Return a function that writes a catalogue driving the stub collaborator."""

    def _write(modules: Sequence[str], *, failing: Sequence[str] = ()) -> Path:
        path = tmp_path / "test-modules.yaml"
        catalogue = {
            "version": "1",
            "engine": {
                "key": "command",
                "config": {
                    "command": [
                        sys.executable,
                        str(stub_collaborator),
                        "{module}",
                        "{parallelism}",
                    ],
                    "env": {"STUB_FAILING": ",".join(failing)},
                },
            },
            "parallelism": 2,
            "log_dir": str(log_dir),
            "tail_lines": 1,
            "modules": list(modules),
        }
        path.write_text(yaml.safe_dump(catalogue))
        return path

    return _write
