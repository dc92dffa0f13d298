# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Token`, the classified form of one raw command-line argument.

Classification is purely syntactic:
- `--name[=value]` (more than two characters) is a long option.
- `-name[=value]` (more than one character) is a short option.
- Everything else, including a lone `-` and the empty string, is a value.

The bare separator `--` therefore classifies as an option named `-`, which the
dispatcher interprets as the switch into positional-only mode.

Classification is computed lazily the first time it is needed and cached on the
token, so a token never changes kind once inspected.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import cached_property
from typing import NamedTuple


class TokenKind(Enum):
    """Syntactic category of a command-line argument."""

    VALUE = "value"
    OPTION = "option"

    def __str__(self) -> str:
        return self.value


class Classification(NamedTuple):
    kind: TokenKind
    name: str | None
    inline_value: str | None


def _split(text: str) -> tuple[str, str | None]:
    name, separator, value = text.partition("=")
    if not separator:
        return name, None
    return name, value


def classify(text: str) -> Classification:
    """Classify one raw argument string."""
    if text.startswith("--") and len(text) > 2:
        name, value = _split(text[2:])
        return Classification(TokenKind.OPTION, name, value)
    if text.startswith("-") and len(text) > 1:
        name, value = _split(text[1:])
        return Classification(TokenKind.OPTION, name, value)
    return Classification(TokenKind.VALUE, None, None)


@dataclass(frozen=True)
class Token:
    """
    One raw command-line argument.

    Attributes:
        text (str): The argument exactly as it appeared on the command line.
    """

    text: str

    @cached_property
    def classification(self) -> Classification:
        return classify(self.text)

    @property
    def kind(self) -> TokenKind:
        return self.classification.kind

    @property
    def is_option(self) -> bool:
        return self.classification.kind is TokenKind.OPTION

    @property
    def name(self) -> str | None:
        """Option name without its dashes, or None for values."""
        return self.classification.name

    @property
    def inline_value(self) -> str | None:
        """The text after the first `=` of an option, if any."""
        return self.classification.inline_value

    def __str__(self) -> str:
        return self.text
