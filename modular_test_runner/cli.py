"""CLI entry point for the modular test runner."""

import argparse
import asyncio
import json
import logging
import sys
import tempfile
from pathlib import Path
from typing import TextIO

from modular_test_runner.catalogue_loader import DEFAULT_CATALOGUE_PATH, load_catalogue
from modular_test_runner.engines.loading import create_engine
from modular_test_runner.errors import (
    INFRASTRUCTURE_EXIT_CODE,
    ArtifactError,
    CatalogueError,
    InfrastructureError,
)
from modular_test_runner.orchestrator import ModuleOrchestrator
from modular_test_runner.report import ConsoleProgress, format_output, render
from modular_test_runner.runner import ModuleRunner


async def run(
    catalogue_path: Path = DEFAULT_CATALOGUE_PATH,
    log_dir: Path | None = None,
    json_output: Path | None = None,
    stream: TextIO | None = None,
) -> int:
    """Run every catalogue module and return the exit code.

    Raises:
        InfrastructureError: If the run cannot be carried out at all

    """
    log = logging.getLogger("modular_test_runner")
    out = stream if stream is not None else sys.stdout

    log.info("Loading catalogue: %s", catalogue_path)
    try:
        catalogue = await load_catalogue(catalogue_path)
    except (FileNotFoundError, ValueError) as e:
        raise CatalogueError(str(e)) from e

    engine = create_engine(catalogue.engine.key, catalogue.engine.config)
    resolved_log_dir = log_dir or catalogue.log_dir or Path(tempfile.gettempdir())
    log.info(
        "Using engine %s (parallelism=%d), logs in %s",
        catalogue.engine.key,
        catalogue.parallelism,
        resolved_log_dir,
    )

    print("Running test suite module by module", file=out)
    print("=" * 50, file=out)
    print("", file=out, flush=True)

    orchestrator = ModuleOrchestrator(
        runner=ModuleRunner(
            engine=engine,
            log_dir=resolved_log_dir,
            parallelism=catalogue.parallelism,
            working_dir=catalogue.working_dir,
        ),
        progress=ConsoleProgress(out, tail_lines=catalogue.tail_lines),
    )
    summary = await orchestrator.execute(catalogue.modules)

    text, exit_code = render(summary)
    print(text, file=out, flush=True)

    if json_output is not None:
        try:
            json_output.write_text(json.dumps(format_output(summary), indent=2))
        except OSError as e:
            raise ArtifactError(f"Cannot write JSON summary {json_output}: {e}") from e

    return exit_code


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Run a test suite module by module, each in its own process"
    )
    parser.add_argument(
        "--catalogue",
        type=Path,
        default=DEFAULT_CATALOGUE_PATH,
        help=f"Path to the module catalogue (default: {DEFAULT_CATALOGUE_PATH})",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Directory for per-module logs (overrides the catalogue)",
    )
    parser.add_argument(
        "--json-output",
        type=Path,
        default=None,
        help="Also write a JSON summary to this path",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    log = logging.getLogger("modular_test_runner")
    try:
        exit_code = asyncio.run(
            run(
                catalogue_path=args.catalogue,
                log_dir=args.log_dir,
                json_output=args.json_output,
            )
        )
    except InfrastructureError as e:
        log.error("Run aborted: %s", e)
        exit_code = INFRASTRUCTURE_EXIT_CODE
    except Exception:
        log.exception("Run aborted unexpectedly")
        exit_code = INFRASTRUCTURE_EXIT_CODE
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
