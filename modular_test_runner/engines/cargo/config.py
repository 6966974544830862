"""Configuration for the cargo engine."""

from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel


class CargoConfig(BaseModel):
    """Configuration for the cargo engine."""

    cargo: str = "cargo"
    lib: bool = True
    manifest_path: Path | None = None
    features: Sequence[str] = ()
    extra_args: Sequence[str] = ()
    # Arguments after "--", passed to the test binary itself
    test_args: Sequence[str] = ()
