# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the concrete subcommand types: `Command` and the built-in `HelpCommand`.

`Command` wraps a named `Syntax` node together with the action run when parsing
ends inside it. Commands may declare their own subcommands, so command groups can
be nested to any depth.

`HelpCommand` implements `help [<command>]`. It is added automatically to every
node that has child commands and none named `help`. It keeps a weak reference to
the node it belongs to, used only to look up sibling commands and to print the
node's help.

Example:
    Command(
        "run",
        docs="Run selected florbs on some specific zarcks.",
        initial=RunOptions.from_global,
        options=[Option.array("florbs", "florbs", metavar="<name>")],
        parameters=[Parameter.repeating("zarcks", "<zarck>", type=int)],
        action=run,
    )
"""
from __future__ import annotations

import copy
import weakref
from typing import Any, Callable, Iterable

from argtree.exceptions import ArgtreeError, OptionError, SchemaError
from argtree.parser.base_command import BaseCommand
from argtree.parser.help import DEFAULT_HELP_LAYOUT, HelpLayout
from argtree.parser.option import Option
from argtree.parser.parameter import Parameter
from argtree.parser.parse_context import ParseContext
from argtree.parser.syntax import Syntax

HELP_COMMAND_DOCS = "Print help about a particular command."
HELP_COMMAND_PARAMETER_DOCS = (
    "The command to describe. If not given, prints general usage information."
)


class Command(BaseCommand):
    """
    A user-defined subcommand.

    Args:
        name (str): Name that selects the command.
        docs (str): Description used in the parent's command table and in help.
        initial (Callable[[Any], Any] | None): Builds this command's record from the
            parent's record. Defaults to a deep copy of the parent record.
        options (Iterable[Option]): Options accepted after the command name.
        parameters (Iterable[Parameter]): Positional parameters.
        commands (Iterable[BaseCommand]): Nested subcommands.
        action (Callable[[Any], Any] | None): Called with the final record. When
            omitted, reaching the end of the command line prints the command's help.
    """

    def __init__(
        self,
        name: str,
        docs: str = "",
        initial: Callable[[Any], Any] | None = None,
        options: Iterable[Option] = (),
        parameters: Iterable[Parameter] = (),
        commands: Iterable[BaseCommand] = (),
        action: Callable[[Any], Any] | None = None,
    ) -> None:
        super().__init__(name, docs)
        if action is not None and not callable(action):
            raise SchemaError(f"Action for command '{name}' must be callable")
        self.action = action
        self.syntax = Syntax(
            name=name,
            docs=docs,
            initial=initial if initial is not None else copy.deepcopy,
            options=options,
            parameters=parameters,
            commands=commands,
        )

    def parse(self, context: ParseContext, parent_record: Any) -> Any:
        return self.syntax.parse(context, parent_record, self.action)

    def render_help(self, tool_name: str, layout: HelpLayout = DEFAULT_HELP_LAYOUT) -> str:
        return self.syntax.render_help(tool_name, layout)


class HelpCommand(BaseCommand):
    """Built-in `help [<command>]` subcommand."""

    def __init__(self) -> None:
        super().__init__("help", HELP_COMMAND_DOCS)
        self._parent: weakref.ref[Syntax] | None = None
        self.syntax = Syntax(
            name="help",
            docs=HELP_COMMAND_DOCS,
            initial=lambda _: {"command": None},
            parameters=[
                Parameter.optional(
                    "command", "<command>", docs=HELP_COMMAND_PARAMETER_DOCS
                )
            ],
        )

    def bind(self, parent: Syntax) -> None:
        self._parent = weakref.ref(parent)

    @property
    def parent(self) -> Syntax:
        parent = self._parent() if self._parent is not None else None
        if parent is None:
            raise ArgtreeError("help command is not attached to a command")
        return parent

    def parse(self, context: ParseContext, parent_record: Any) -> None:
        def describe(record: dict[str, Any]) -> None:
            name = record["command"]
            if name is None:
                self.parent.print_help(context)
                return
            command = self.parent.commands_by_name.get(name)
            if command is None:
                raise OptionError(f"Unknown command '{name}'")
            command.print_help(context)

        self.syntax.parse(context, parent_record, describe)
        return None

    def render_help(self, tool_name: str, layout: HelpLayout = DEFAULT_HELP_LAYOUT) -> str:
        return self.syntax.render_help(tool_name, layout)
