"""Load the module catalogue from a YAML file."""

import asyncio
from pathlib import Path

import yaml
from pydantic import ValidationError

from modular_test_runner.models.catalogue import Catalogue

DEFAULT_CATALOGUE_PATH = Path("test-modules.yaml")


async def load_catalogue(path: Path) -> Catalogue:
    """Load and validate a catalogue file.

    Relative log and working directories are resolved against the directory
    containing the file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid YAML or fails validation

    """
    if not path.is_file():
        raise FileNotFoundError(f"Catalogue file not found: {path}")

    content = await asyncio.to_thread(path.read_text, encoding="utf-8")

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Catalogue {path} must be a mapping, got {type(data).__name__}"
        )

    try:
        catalogue = Catalogue.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid catalogue {path}: {e}") from e

    return catalogue.with_base_dir(path.resolve().parent)
