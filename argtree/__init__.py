"""
Argtree CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .exceptions import ArgtreeError, OptionError, SchemaError
from .parser import ArraySyntax, Command, Option, OptionParser, Parameter
from .protocols import OptionValue

__all__ = [
    "ArgtreeError",
    "ArraySyntax",
    "Command",
    "Option",
    "OptionError",
    "OptionParser",
    "OptionValue",
    "Parameter",
    "SchemaError",
]
