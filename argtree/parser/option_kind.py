# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the enums that describe how options and parameters behave during parsing.

Exports:
    - OptionKind: What an option does when it is matched.
    - ArraySyntax: How an array option collects its values.
    - ParameterKind: How many positional arguments a parameter takes.
    - Resolution: Whether parsing continues after resolving an option.

`ArraySyntax` accepts short aliases so schemas can be declared tersely:

Example:
    ArraySyntax("comma")  → ArraySyntax.COMMA_SEPARATED
    ArraySyntax("greedy") → ArraySyntax.UP_TO_NEXT_OPTION
    ArraySyntax("repeat") → ArraySyntax.REPEATED
"""
from __future__ import annotations

from enum import Enum


class OptionKind(Enum):
    """
    Defines the behavior of an option when it is encountered.

    Members:
        FLAG: Set a fixed value; no value may be given.
        VALUE: Decode and store one value, or apply a default when it is omitted.
        ARRAY: Accumulate values according to an `ArraySyntax`.
        ACTION: Run a side effect and stop parsing.
        HELP: Print help for the current command and stop parsing.
    """

    FLAG = "flag"
    VALUE = "value"
    ARRAY = "array"
    ACTION = "action"
    HELP = "help"

    @classmethod
    def choices(cls) -> list[OptionKind]:
        """Return a list of all option kinds."""
        return list(cls)

    def __str__(self) -> str:
        return self.value


class ArraySyntax(Enum):
    """
    Defines how an array option reads its elements.

    Members:
        COMMA_SEPARATED: `-name=a,b,c`; one token, split on commas.
        UP_TO_NEXT_OPTION: `-name a b c`; consumes values until the next option.
        REPEATED: `-name=a -name=b`; one element per occurrence.

    Aliases:
        - "comma" → "comma_separated"
        - "greedy" → "up_to_next_option"
        - "repeat" → "repeated"
    """

    COMMA_SEPARATED = "comma_separated"
    UP_TO_NEXT_OPTION = "up_to_next_option"
    REPEATED = "repeated"

    @classmethod
    def choices(cls) -> list[ArraySyntax]:
        """Return a list of all array syntaxes."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "comma": "comma_separated",
            "greedy": "up_to_next_option",
            "repeat": "repeated",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArraySyntax:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower().replace("-", "_")
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


class ParameterKind(Enum):
    """
    Defines how many positional arguments a parameter receives.

    Members:
        REQUIRED: Exactly one.
        OPTIONAL: Zero or one.
        REPEATING: Any number; at most one per command.
    """

    REQUIRED = "required"
    OPTIONAL = "optional"
    REPEATING = "repeating"

    def __str__(self) -> str:
        return self.value


class Resolution(Enum):
    """Outcome of resolving a single option token."""

    CONTINUE = "continue"
    TERMINATE = "terminate"

    def __str__(self) -> str:
        return self.value
