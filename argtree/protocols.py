# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines structural protocols used across argtree.

This runtime-checkable `Protocol` specifies the interface for types that know how
to build themselves from a command-line string, so they can be used as the `type`
of an option or parameter without subclassing anything.

Protocols:
- OptionValue: A type exposing a `from_option_value(value)` classmethod that returns
  an instance; `ValueError` and `TypeError` are reported as invalid values.
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class OptionValue(Protocol):
    @classmethod
    def from_option_value(cls, value: str) -> Any: ...
