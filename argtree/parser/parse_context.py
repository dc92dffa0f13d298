# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParseContext`, the cursor threaded through one parse invocation.

A context is created once per top-level `OptionParser.parse()` call and owned
exclusively by that call's recursive descent. It carries:
- the tool name (basename of argument 0) used in usage lines,
- the tokens derived from the remaining arguments,
- the current position, which only ever moves forward,
- the printer that receives rendered help text,
- the `HelpLayout` used to render that help.
"""
from __future__ import annotations

import os
from typing import Callable, Sequence

from argtree.parser.help import DEFAULT_HELP_LAYOUT, HelpLayout
from argtree.parser.token import Token


class ParseContext:
    """Forward-only cursor over the tokens of one command line."""

    def __init__(
        self,
        arguments: Sequence[str],
        printer: Callable[[str], None],
        help_layout: HelpLayout = DEFAULT_HELP_LAYOUT,
    ) -> None:
        if not arguments:
            raise ValueError("arguments must start with the program name")
        self.printer: Callable[[str], None] = printer
        self.help_layout: HelpLayout = help_layout
        self.tool_name: str = os.path.basename(arguments[0])
        self._tokens: tuple[Token, ...] = tuple(Token(text) for text in arguments[1:])
        self._index: int = 0

    @property
    def is_at_end(self) -> bool:
        return self._index == len(self._tokens)

    @property
    def position(self) -> int:
        return self._index

    def peek(self) -> Token | None:
        """Return the next token without consuming it."""
        if self.is_at_end:
            return None
        return self._tokens[self._index]

    def accept(self) -> Token:
        """Consume and return the next token."""
        if self.is_at_end:
            raise IndexError("no tokens left to accept")
        token = self._tokens[self._index]
        self._index += 1
        return token

    def print_help(self, text: str) -> None:
        self.printer(text)

    def __str__(self) -> str:
        return (
            f"ParseContext(tool={self.tool_name!r}, "
            f"position={self._index}, tokens={len(self._tokens)})"
        )

    def __repr__(self) -> str:
        return str(self)
