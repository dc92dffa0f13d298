# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Builds the record-mutation closures used by options and parameters.

A destination (`dest`) names where a decoded value is written on the record:
- a string: an attribute name on objects, or a key on mutable mappings,
- a callable: invoked as `dest(record, value)` and fully responsible for the update.

The closures are bound once, when the option or parameter is defined, so parsing
never looks fields up by path.
"""
from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any, Callable

from argtree.exceptions import SchemaError

Dest = str | Callable[[Any, Any], None]
Setter = Callable[[Any, Any], None]


def _check_dest(dest: Dest) -> None:
    if isinstance(dest, str):
        if not dest:
            raise SchemaError("dest must not be empty")
    elif not callable(dest):
        raise SchemaError(f"dest must be a field name or a callable, got {dest!r}")


def _read(record: Any, name: str) -> Any:
    if isinstance(record, MutableMapping):
        return record[name]
    return getattr(record, name)


def _write(record: Any, name: str, value: Any) -> None:
    if isinstance(record, MutableMapping):
        record[name] = value
    else:
        setattr(record, name, value)


def make_setter(dest: Dest) -> Setter:
    """Return a closure that replaces the destination with a value."""
    _check_dest(dest)
    if callable(dest):
        return dest
    name = dest

    def setter(record: Any, value: Any) -> None:
        _write(record, name, value)

    return setter


def make_extender(dest: Dest) -> Setter:
    """
    Return a closure that appends a list of values to the destination.

    String destinations must already hold a list on the record (or be absent on a
    mapping, in which case a new list is created). Callable destinations receive the
    whole list of new values in a single call.
    """
    _check_dest(dest)
    if callable(dest):
        return dest
    name = dest

    def extender(record: Any, values: list[Any]) -> None:
        if isinstance(record, MutableMapping) and name not in record:
            record[name] = []
        current = _read(record, name)
        if current is None:
            _write(record, name, list(values))
        else:
            current.extend(values)

    return extender
