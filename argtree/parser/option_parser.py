# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionParser`, the entry point of an argtree command-line interface.

An `OptionParser` is the unnamed root of a command tree plus the action run when
parsing ends at the root. Each call to `parse` starts from a fresh deep copy of
`initial`, so one parser can be reused for any number of command lines.

Example:
    parser = OptionParser(
        docs="Do something with some options.",
        initial=Settings(),
        options=[Option.flag("verbose", "verbose", docs="Print more.")],
        parameters=[Parameter.required("path", "<path>", type=Path)],
        action=main,
    )
    parser.parse()
"""
from __future__ import annotations

import copy
import sys
from typing import Any, Callable, Iterable, Sequence

from argtree.console import print_help_text
from argtree.logger import logger
from argtree.parser.base_command import BaseCommand
from argtree.parser.help import DEFAULT_HELP_LAYOUT, HelpLayout
from argtree.parser.option import Option
from argtree.parser.parameter import Parameter
from argtree.parser.parse_context import ParseContext
from argtree.parser.syntax import Syntax


class OptionParser:
    """
    Root of a declarative command-line schema.

    Args:
        docs (str): Description printed under the usage line.
        initial (Any): Template record; deep-copied at the start of every parse.
        options (Iterable[Option]): Root options.
        parameters (Iterable[Parameter]): Root positional parameters.
        commands (Iterable[BaseCommand]): Root subcommands.
        action (Callable[[Any], Any] | None): Called with the record when parsing
            ends at the root. Without one, the root prints its help instead.
        help_layout (HelpLayout | None): Column layout for help tables.
    """

    def __init__(
        self,
        docs: str,
        initial: Any,
        options: Iterable[Option] = (),
        parameters: Iterable[Parameter] = (),
        commands: Iterable[BaseCommand] = (),
        action: Callable[[Any], Any] | None = None,
        help_layout: HelpLayout | None = None,
    ) -> None:
        self.initial = initial
        self.action = action
        if help_layout is None:
            help_layout = DEFAULT_HELP_LAYOUT
        self.help_layout = help_layout
        self.syntax = Syntax(
            name=None,
            docs=docs,
            initial=self._make_record,
            options=options,
            parameters=parameters,
            commands=commands,
        )

    def _make_record(self, _parent: None) -> Any:
        return copy.deepcopy(self.initial)

    def parse(
        self,
        arguments: Sequence[str] | None = None,
        printer: Callable[[str], None] | None = None,
    ) -> Any:
        """
        Parse a command line and run the matching action.

        Args:
            arguments (Sequence[str] | None): The full argument vector, program name
                first. Defaults to `sys.argv`.
            printer (Callable[[str], None] | None): Receives each rendered help text.
                Defaults to printing on the shared rich console.

        Returns:
            Any: The record handed to the completion action, or None if parsing
            ended with an action option or by printing help.

        Raises:
            OptionError: If the command line does not match the schema.
            ValueError: If `arguments` is empty.
        """
        if arguments is None:
            arguments = sys.argv
        if printer is None:
            printer = print_help_text
        context = ParseContext(arguments, printer, self.help_layout)
        logger.debug("Parsing %s", context)
        return self.syntax.parse(context, None, self.action)

    def render_help(self, tool_name: str) -> str:
        return self.syntax.render_help(tool_name, self.help_layout)

    def __str__(self) -> str:
        return f"OptionParser({self.syntax})"

    def __repr__(self) -> str:
        return str(self)
