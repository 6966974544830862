"""Deterministic mapping from module identifiers to log artifact paths."""

import re
from collections.abc import Mapping, Sequence
from pathlib import Path

ARTIFACT_PREFIX = "test-"
ARTIFACT_SUFFIX = ".log"
# Common file-system limit for a single path component
MAX_ARTIFACT_NAME_BYTES = 255

_SEPARATORS = re.compile(r"::|[/\\]")
_UNSAFE = re.compile(r"[^A-Za-z0-9._-]")


def escape_module_id(module_id: str) -> str:
    """Escape a module identifier into a string safe for a file name.

    Every ``::``, ``/`` and ``\\`` becomes ``__``; any other character outside
    ``[A-Za-z0-9._-]`` becomes ``_``.

    Examples:
        >>> escape_module_id("channels::channel_mesh")
        'channels__channel_mesh'
        >>> escape_module_id("tests/unit test.py")
        'tests__unit_test.py'

    """
    return _UNSAFE.sub("_", _SEPARATORS.sub("__", module_id))


def artifact_name(module_id: str) -> str:
    """Return the log file name for a module."""
    return f"{ARTIFACT_PREFIX}{escape_module_id(module_id)}{ARTIFACT_SUFFIX}"


def artifact_path(log_dir: Path, module_id: str) -> Path:
    """Return the log file path for a module inside log_dir."""
    return log_dir / artifact_name(module_id)


def find_collisions(module_ids: Sequence[str]) -> Mapping[str, Sequence[str]]:
    """Group distinct module identifiers that share an artifact name.

    Names are compared case-insensitively so logs cannot overwrite each other
    on case-insensitive file systems.

    Returns:
        Case-folded artifact name mapped to the colliding identifiers, in
        catalogue order.
        Empty when every identifier has its own artifact.

    """
    by_name: dict[str, list[str]] = {}
    for module_id in module_ids:
        ids = by_name.setdefault(artifact_name(module_id).casefold(), [])
        if module_id not in ids:
            ids.append(module_id)
    return {name: ids for name, ids in by_name.items() if len(ids) > 1}


def find_oversized(module_ids: Sequence[str]) -> Sequence[str]:
    """Return identifiers whose artifact name exceeds the file name limit."""
    return [
        module_id
        for module_id in module_ids
        if len(artifact_name(module_id).encode()) > MAX_ARTIFACT_NAME_BYTES
    ]
