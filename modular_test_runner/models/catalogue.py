"""Models for the module catalogue loaded from test-modules.yaml."""

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator, model_validator

from modular_test_runner.artifacts import (
    MAX_ARTIFACT_NAME_BYTES,
    find_collisions,
    find_oversized,
)
from modular_test_runner.models.base import Model


class EngineSpec(Model):
    """Selects the test engine that executes each module."""

    key: str = Field(default="cargo", description="Engine entry point name")
    config: Mapping[str, Any] = Field(
        default_factory=dict, description="Engine-specific configuration"
    )


class Catalogue(Model):
    """Ordered, fixed list of test modules plus how to run them."""

    version: Literal["1"] = Field(default="1", description="Catalogue schema version")
    engine: EngineSpec = Field(default_factory=EngineSpec)
    parallelism: int = Field(
        default=2, ge=1, description="Internal parallelism hint passed to the engine"
    )
    log_dir: Path | None = Field(
        default=None, description="Directory for log artifacts (None means temp dir)"
    )
    working_dir: Path | None = Field(
        default=None, description="Working directory for engine processes"
    )
    tail_lines: int = Field(
        default=3, ge=0, description="Trailing log lines echoed after each module"
    )
    modules: Sequence[str] = Field(
        default_factory=tuple, description="Module identifiers in run order"
    )

    @field_validator("modules")
    @classmethod
    def _check_module_ids(cls, modules: Sequence[str]) -> Sequence[str]:
        seen: set[str] = set()
        for module_id in modules:
            if not module_id or module_id.strip() != module_id:
                raise ValueError(f"Invalid module identifier: {module_id!r}")
            if module_id in seen:
                raise ValueError(f"Duplicate module identifier: {module_id}")
            seen.add(module_id)
        return tuple(modules)

    @model_validator(mode="after")
    def _check_artifact_names(self) -> "Catalogue":
        if collisions := find_collisions(self.modules):
            details = "; ".join(
                f"{name} <- {', '.join(ids)}" for name, ids in collisions.items()
            )
            raise ValueError(f"Module identifiers share a log artifact: {details}")
        if oversized := find_oversized(self.modules):
            raise ValueError(
                f"Log artifact name longer than {MAX_ARTIFACT_NAME_BYTES} bytes "
                f"for module(s): {', '.join(oversized)}"
            )
        return self

    def with_base_dir(self, base_dir: Path) -> "Catalogue":
        """Resolve relative directories against base_dir."""
        updates: dict[str, Path] = {}
        if self.log_dir is not None and not self.log_dir.is_absolute():
            updates["log_dir"] = base_dir / self.log_dir
        if self.working_dir is not None and not self.working_dir.is_absolute():
            updates["working_dir"] = base_dir / self.working_dir
        return self.model_copy(update=updates) if updates else self
