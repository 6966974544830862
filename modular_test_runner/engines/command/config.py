"""Configuration for the generic command engine."""

import string
from collections.abc import Mapping, Sequence

from pydantic import BaseModel, Field, field_validator

PLACEHOLDERS = {"module": "module", "parallelism": 1}


def check_placeholders(arg: str) -> None:
    """Ensure arg only references the bare module and parallelism fields.

    Raises:
        ValueError: If a field is unknown, positional, indexed, has attribute
            access, or the argument cannot be formatted

    """
    try:
        for _, field_name, _, _ in string.Formatter().parse(arg):
            if field_name is not None and field_name not in PLACEHOLDERS:
                raise ValueError(f"unsupported field {{{field_name}}}")
        arg.format(**PLACEHOLDERS)
    except (KeyError, IndexError, ValueError, AttributeError, TypeError) as e:
        raise ValueError(f"Invalid placeholder in argument {arg!r}: {e}") from e


class CommandConfig(BaseModel):
    """Configuration for the generic command engine.

    Each argument may reference ``{module}`` and ``{parallelism}``.
    """

    command: Sequence[str] = Field(..., min_length=1)
    env: Mapping[str, str] = Field(default_factory=dict)

    @field_validator("command")
    @classmethod
    def _check_placeholders(cls, command: Sequence[str]) -> Sequence[str]:
        for arg in command:
            check_placeholders(arg)
        return tuple(command)
