"""Error message templates shared by raise sites."""

from __future__ import annotations

from enum import Enum


class Message(Enum):
    KEY_MUST_BE_NON_EMPTY_STRING = "Key must be a non-empty string."
    VALUE_SHOULD_BE_ARRAY_SCALAR_NULL_ENUM = (
        "Value should be of type 'array', 'scalar', 'null', or 'enum'; '{}' given."
    )
    ATTRIBUTES_MUST_BE_MAPPING = "Attributes must be a mapping; '{}' given."

    def format(self, *args: object) -> str:
        return self.value.format(*args)


__all__ = ["Message"]
