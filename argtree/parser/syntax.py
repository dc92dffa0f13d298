# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Syntax`, one level of the recursive command schema, and its dispatcher.

A `Syntax` node holds:
- an optional name (the root node is unnamed),
- documentation,
- its options, keyed by name (a `-help` option is added if missing),
- either ordered positional parameters or named child commands, never both
  (a `help` command is added when there are children and none is named `help`),
- `initial(parent_record) -> record`, building this node's record from its parent's.

Nodes are immutable once built and may be shared by any number of independent
parses.

Dispatch:
    Tokens are consumed left to right. Options are resolved as they appear;
    action and help options end the parse immediately. The first bare token, if
    it names a child command and nothing positional was collected yet, hands the
    rest of the command line to that child. `--` switches to positional-only mode
    for the rest of this node. At the end of input the collected positionals are
    distributed among the parameters and the completion action runs with the
    record; without an action, the node prints its help instead.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Iterable

from argtree.exceptions import OptionError, SchemaError
from argtree.logger import logger
from argtree.parser.base_command import BaseCommand
from argtree.parser.help import DEFAULT_HELP_LAYOUT, HelpLayout, help_section
from argtree.parser.option import Option
from argtree.parser.option_kind import OptionKind, ParameterKind, Resolution
from argtree.parser.parameter import Parameter
from argtree.parser.parse_context import ParseContext
from argtree.parser.positional import apply_positionals
from argtree.parser.token import Token


class Syntax:
    """
    One node of a command tree.

    Attributes:
        name (str | None): Command name, or None for the root.
        docs (str): Description printed under the usage line.
        initial (Callable[[Any], Any]): Builds this node's record from the parent's.
        options (tuple[Option, ...]): Options in declaration order, `-help` included.
        options_by_name (Mapping[str, Option]): Read-only name lookup.
        parameters (tuple[Parameter, ...]): Positional parameters in order.
        commands (tuple[BaseCommand, ...]): Child commands in order, `help` included.
        commands_by_name (Mapping[str, BaseCommand]): Read-only name lookup.
    """

    def __init__(
        self,
        name: str | None,
        docs: str,
        initial: Callable[[Any], Any],
        options: Iterable[Option] = (),
        parameters: Iterable[Parameter] = (),
        commands: Iterable[BaseCommand] = (),
    ) -> None:
        if not callable(initial):
            raise SchemaError("initial must be callable")
        options = list(options)
        parameters = list(parameters)
        commands = list(commands)

        for option in options:
            if not isinstance(option, Option):
                raise SchemaError(f"Expected an Option, got {option!r}")
        for parameter in parameters:
            if not isinstance(parameter, Parameter):
                raise SchemaError(f"Expected a Parameter, got {parameter!r}")
        for command in commands:
            if not isinstance(command, BaseCommand):
                raise SchemaError(f"Expected a command, got {command!r}")

        if parameters and commands:
            raise SchemaError(
                "A command can have positional parameters or subcommands, not both"
            )
        repeating = [p for p in parameters if p.kind is ParameterKind.REPEATING]
        if len(repeating) > 1:
            raise SchemaError("A command can have at most one repeating parameter")

        if not any(option.name == "help" for option in options):
            options.append(Option.help())
        options_by_name: dict[str, Option] = {}
        for option in options:
            if option.name in options_by_name:
                raise SchemaError(f"Duplicate option name '-{option.name}'")
            options_by_name[option.name] = option

        help_command = None
        if commands and not any(command.name == "help" for command in commands):
            from argtree.parser.command import HelpCommand

            help_command = HelpCommand()
            commands.append(help_command)
        commands_by_name: dict[str, BaseCommand] = {}
        for command in commands:
            if command.name in commands_by_name:
                raise SchemaError(f"Duplicate command name '{command.name}'")
            commands_by_name[command.name] = command

        self.name = name
        self.docs = docs
        self.initial = initial
        self.options: tuple[Option, ...] = tuple(options)
        self.options_by_name = MappingProxyType(options_by_name)
        self.parameters: tuple[Parameter, ...] = tuple(parameters)
        self.commands: tuple[BaseCommand, ...] = tuple(commands)
        self.commands_by_name = MappingProxyType(commands_by_name)

        if help_command is not None:
            help_command.bind(self)

    @property
    def label(self) -> str:
        return self.name or "<root>"

    def parse(
        self,
        context: ParseContext,
        parent_record: Any,
        action: Callable[[Any], Any] | None = None,
    ) -> Any:
        """
        Consume the remaining tokens of `context` against this node.

        Args:
            context (ParseContext): The cursor for this command line.
            parent_record (Any): The parent node's record (None at the root).
            action (Callable | None): Completion action called with the final record.

        Returns:
            Any: The record passed to the completion action, or None when parsing
            ended early (action or help option) or by printing help.

        Raises:
            OptionError: If the command line does not match the schema.
        """
        record = self.initial(parent_record)
        arguments: list[str] = []
        positional_only = False
        while not context.is_at_end:
            token = context.accept()
            if token.is_option and not positional_only:
                if token.name == "-":
                    logger.debug("[%s] Positional-only mode from here on.", self.label)
                    positional_only = True
                    continue
                if self._resolve(token, context, record) is Resolution.TERMINATE:
                    logger.debug("[%s] Parsing stopped by %s", self.label, token.text)
                    return None
                continue
            if not arguments and token.text in self.commands_by_name:
                command = self.commands_by_name[token.text]
                logger.debug("[%s] Dispatching to command '%s'", self.label, command.name)
                return command.parse(context, record)
            arguments.append(token.text)

        apply_positionals(record, arguments, self.parameters)
        if action is None:
            logger.debug("[%s] No action; printing help.", self.label)
            self.print_help(context)
            return None
        logger.debug("[%s] Parsing complete; running action.", self.label)
        action(record)
        return record

    def _resolve(self, token: Token, context: ParseContext, record: Any) -> Resolution:
        option = self.options_by_name.get(token.name or "")
        if option is None:
            raise OptionError(f"Unknown option {token.text}")
        if option.kind is OptionKind.HELP:
            self.print_help(context)
            return Resolution.TERMINATE
        return option.resolve(token.inline_value, context, record)

    def usage_line(self, tool_name: str) -> str:
        usage = f"Usage: {tool_name}"
        if self.name:
            usage += f" {self.name}"
        if self.options:
            usage += " [<option>]..."
        if self.commands:
            usage += " <command> [<arg>]..."
        usage += "".join(f" {parameter.usage}" for parameter in self.parameters)
        return usage

    def render_help(self, tool_name: str, layout: HelpLayout = DEFAULT_HELP_LAYOUT) -> str:
        """Render the usage line, description and option/parameter/command tables."""
        lines = [self.usage_line(tool_name)]
        if self.docs:
            lines.extend(self.docs.split("\n"))
        lines.extend(
            help_section(
                "Options:",
                [(option.usage, option.docs) for option in self.options],
                layout,
            )
        )
        lines.extend(
            help_section(
                "Positional parameters:",
                [(parameter.usage, parameter.docs) for parameter in self.parameters],
                layout,
            )
        )
        lines.extend(
            help_section(
                "Commands:",
                [(command.name, command.docs) for command in self.commands],
                layout,
            )
        )
        return "\n".join(lines)

    def print_help(self, context: ParseContext) -> None:
        context.print_help(self.render_help(context.tool_name, context.help_layout))

    def __str__(self) -> str:
        return (
            f"Syntax(name={self.name!r}, options={len(self.options)}, "
            f"parameters={len(self.parameters)}, commands={len(self.commands)})"
        )

    def __repr__(self) -> str:
        return str(self)
