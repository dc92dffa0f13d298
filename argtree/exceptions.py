# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by argtree.

Parse-time failures are reported with a single exception type, `OptionError`,
carrying a human-readable message. Problems with the schema itself (duplicate
names, parameters mixed with subcommands, ...) are reported when the schema is
constructed, through `SchemaError`.

All exceptions inherit from `ArgtreeError`, the base exception for the package.

Exception Hierarchy:
- ArgtreeError
    ├── OptionError
    └── SchemaError

`OptionError` is never recovered from inside the parser: it aborts the whole
dispatch chain and surfaces to the caller of `OptionParser.parse()`.
"""


class ArgtreeError(Exception):
    """Base exception for argtree."""


class OptionError(ArgtreeError):
    """Exception raised when the argument list does not match the schema."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class SchemaError(ArgtreeError):
    """Exception raised when an option, parameter or command definition is invalid."""
