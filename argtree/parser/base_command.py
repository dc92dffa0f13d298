# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `BaseCommand`, the abstract interface shared by every subcommand.

A command is a named child of a `Syntax` node. When its name appears as the first
positional token of its parent, the parent hands the rest of the command line to
`parse`, passing its own record as the parent record.

Subclasses:
- `Command`: a user-defined subcommand with its own options, parameters or
  nested commands, and a completion action.
- `HelpCommand`: the built-in `help [<command>]` subcommand.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from argtree.exceptions import SchemaError
from argtree.parser.help import DEFAULT_HELP_LAYOUT, HelpLayout
from argtree.parser.parse_context import ParseContext


class BaseCommand(ABC):
    """
    Abstract base for named subcommands.

    Attributes:
        name (str): Name used to select the command on the command line.
        docs (str): One-line (or multi-line) description shown in command tables.
    """

    def __init__(self, name: str, docs: str = "") -> None:
        if not isinstance(name, str) or not name:
            raise SchemaError("Command name must be a non-empty string")
        if name.startswith("-"):
            raise SchemaError(f"Command name '{name}' must not start with '-'")
        self.name = name
        self.docs = docs

    @abstractmethod
    def parse(self, context: ParseContext, parent_record: Any) -> Any:
        """Parse the remaining tokens of `context`, starting from the parent's record."""
        raise NotImplementedError("parse must be implemented by subclasses")

    @abstractmethod
    def render_help(self, tool_name: str, layout: HelpLayout = DEFAULT_HELP_LAYOUT) -> str:
        """Return the full help text for this command."""
        raise NotImplementedError("render_help must be implemented by subclasses")

    def print_help(self, context: ParseContext) -> None:
        context.print_help(self.render_help(context.tool_name, context.help_layout))

    def __str__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    def __repr__(self) -> str:
        return str(self)
