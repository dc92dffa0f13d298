# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Parameter` dataclass, the definition of one positional parameter.

Parameters are declared in order on a command and come in three kinds:
- required (`M`): takes exactly one argument,
- optional (`[M]`): takes zero or one argument,
- repeating (`[M]...`): takes any number of arguments; at most one per command.

How arguments are shared out between parameters is decided by
`argtree.parser.positional.distribute`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from argtree.exceptions import SchemaError
from argtree.parser.accessors import Dest, make_extender, make_setter
from argtree.parser.option_kind import ParameterKind
from argtree.parser.utils import decode_value


@dataclass(frozen=True)
class Parameter:
    """
    Represents a positional parameter.

    Attributes:
        metavar (str): Placeholder shown in usage lines and help tables.
        docs (str): Help text; may span multiple lines.
        kind (ParameterKind): REQUIRED, OPTIONAL or REPEATING.
        apply (Callable[[Any, str], None]): Decodes one argument and stores it on
            the record. Repeating parameters append.
    """

    metavar: str
    docs: str
    kind: ParameterKind
    apply: Callable[[Any, str], None]

    def __post_init__(self):
        if not self.metavar:
            raise SchemaError("Parameter metavar must not be empty")
        if not callable(self.apply):
            raise SchemaError(f"Parameter {self.metavar} has no apply function")

    @property
    def usage(self) -> str:
        if self.kind is ParameterKind.REQUIRED:
            return self.metavar
        if self.kind is ParameterKind.OPTIONAL:
            return f"[{self.metavar}]"
        return f"[{self.metavar}]..."

    @classmethod
    def _storing(
        cls, kind: ParameterKind, dest: Dest, metavar: str, type: Any, docs: str
    ) -> Parameter:
        setter = make_setter(dest)

        def apply(record: Any, argument: str) -> None:
            setter(record, decode_value(argument, type))

        return cls(metavar=metavar, docs=docs, kind=kind, apply=apply)

    @classmethod
    def required(cls, dest: Dest, metavar: str, type: Any = str, docs: str = "") -> Parameter:
        return cls._storing(ParameterKind.REQUIRED, dest, metavar, type, docs)

    @classmethod
    def optional(cls, dest: Dest, metavar: str, type: Any = str, docs: str = "") -> Parameter:
        return cls._storing(ParameterKind.OPTIONAL, dest, metavar, type, docs)

    @classmethod
    def repeating(cls, dest: Dest, metavar: str, type: Any = str, docs: str = "") -> Parameter:
        """Create a parameter that appends every argument it receives."""
        extend = make_extender(dest)

        def apply(record: Any, argument: str) -> None:
            extend(record, [decode_value(argument, type)])

        return cls(metavar=metavar, docs=docs, kind=ParameterKind.REPEATING, apply=apply)

    def __str__(self) -> str:
        return f"Parameter(metavar={self.metavar!r}, kind={self.kind})"
