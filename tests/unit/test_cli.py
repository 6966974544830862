"""Tests for CLI module."""

import io
import json
import sys
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from modular_test_runner.cli import main, run
from modular_test_runner.errors import (
    INFRASTRUCTURE_EXIT_CODE,
    CatalogueError,
    EngineNotFoundError,
)


class TestRun:
    """Tests for run function."""

    async def test_missing_catalogue_is_catalogue_error(self, tmp_path: Path) -> None:
        """A missing catalogue aborts with a catalogue error."""
        with pytest.raises(CatalogueError, match="Catalogue file not found"):
            await run(catalogue_path=tmp_path / "missing.yaml", stream=io.StringIO())

    async def test_invalid_catalogue_is_catalogue_error(self, tmp_path: Path) -> None:
        """A colliding catalogue aborts before any module runs."""
        path = tmp_path / "test-modules.yaml"
        path.write_text("modules: ['a::b', 'a/b']\n")

        with pytest.raises(CatalogueError, match="share a log artifact"):
            await run(catalogue_path=path, stream=io.StringIO())

    async def test_unknown_engine_is_infrastructure_error(
        self, tmp_path: Path
    ) -> None:
        """An unknown engine key aborts the run."""
        path = tmp_path / "test-modules.yaml"
        path.write_text("engine: {key: nope}\nmodules: [a]\n")

        with pytest.raises(EngineNotFoundError):
            await run(catalogue_path=path, stream=io.StringIO())

    async def test_empty_catalogue_exits_zero(self, tmp_path: Path) -> None:
        """An empty catalogue is a trivially successful run."""
        path = tmp_path / "test-modules.yaml"
        path.write_text("modules: []\n")
        json_path = tmp_path / "summary.json"
        stream = io.StringIO()

        exit_code = await run(
            catalogue_path=path, json_output=json_path, stream=stream
        )

        assert exit_code == 0
        assert "Total modules: 0" in stream.getvalue()
        output = json.loads(json_path.read_text())
        assert output["total"] == 0
        assert output["failed_modules"] == []


class TestMain:
    """Tests for main entry point."""

    def test_exits_with_run_result(self) -> None:
        """Exits with the code returned by run."""
        with (
            patch.object(sys, "argv", ["modular-test-runner"]),
            patch(
                "modular_test_runner.cli.run", new_callable=AsyncMock, return_value=3
            ),
            pytest.raises(SystemExit) as exc_info,
        ):
            main()

        assert exc_info.value.code == 3

    def test_passes_arguments(self, tmp_path: Path) -> None:
        """Forwards command-line options to run."""
        argv = [
            "modular-test-runner",
            "--catalogue",
            str(tmp_path / "c.yaml"),
            "--log-dir",
            str(tmp_path / "logs"),
            "--json-output",
            str(tmp_path / "out.json"),
        ]
        with (
            patch.object(sys, "argv", argv),
            patch(
                "modular_test_runner.cli.run", new_callable=AsyncMock, return_value=0
            ) as mock_run,
            pytest.raises(SystemExit),
        ):
            main()

        mock_run.assert_called_once_with(
            catalogue_path=tmp_path / "c.yaml",
            log_dir=tmp_path / "logs",
            json_output=tmp_path / "out.json",
        )

    def test_infrastructure_error_uses_reserved_exit_code(self) -> None:
        """Infrastructure failures exit with the reserved code."""
        with (
            patch.object(sys, "argv", ["modular-test-runner"]),
            patch(
                "modular_test_runner.cli.run",
                new_callable=AsyncMock,
                side_effect=CatalogueError("Catalogue file not found"),
            ),
            pytest.raises(SystemExit) as exc_info,
        ):
            main()

        assert exc_info.value.code == INFRASTRUCTURE_EXIT_CODE


def test_main_unexpected_error_uses_reserved_exit_code() -> None:
    """Unexpected exceptions never masquerade as a failed-module count."""
    with (
        patch.object(sys, "argv", ["modular-test-runner"]),
        patch(
            "modular_test_runner.cli.run",
            new_callable=AsyncMock,
            side_effect=AttributeError("'str' object has no attribute 'x'"),
        ),
        pytest.raises(SystemExit) as exc_info,
    ):
        main()

    assert exc_info.value.code == INFRASTRUCTURE_EXIT_CODE
