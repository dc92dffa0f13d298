"""
Argtree CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .base_command import BaseCommand
from .command import Command, HelpCommand
from .help import DEFAULT_HELP_LAYOUT, HelpLayout
from .option import Option
from .option_kind import ArraySyntax, OptionKind, ParameterKind, Resolution
from .option_parser import OptionParser
from .parameter import Parameter
from .parse_context import ParseContext
from .syntax import Syntax
from .token import Token, TokenKind
from .utils import decode_value

__all__ = [
    "ArraySyntax",
    "BaseCommand",
    "Command",
    "DEFAULT_HELP_LAYOUT",
    "HelpCommand",
    "HelpLayout",
    "Option",
    "OptionKind",
    "OptionParser",
    "Parameter",
    "ParameterKind",
    "ParseContext",
    "Resolution",
    "Syntax",
    "Token",
    "TokenKind",
    "decode_value",
]
