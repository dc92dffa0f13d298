# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Shares the positional arguments collected by a command out among its parameters.

The policy is fixed and order-preserving:

1. Every required parameter takes exactly one argument. Too few arguments fails,
   naming the first required parameter left without one.
2. Remaining arguments go one each to optional parameters, in declaration order,
   until they run out.
3. Whatever is left goes to the repeating parameter (possibly nothing). Without a
   repeating parameter, leftovers fail, naming the first surplus argument.
4. Arguments are then applied to parameters in declaration order, each parameter
   receiving a contiguous slice in command-line order.

Example:
    A [B] [R]... C [D] with `42 on 1 2 3 string 23`
    → A=42, B=on, R=[1, 2, 3], C=string, D=23
"""
from __future__ import annotations

from typing import Any, Sequence

from argtree.exceptions import OptionError, SchemaError
from argtree.parser.option_kind import ParameterKind
from argtree.parser.parameter import Parameter


def distribute(arguments: Sequence[str], parameters: Sequence[Parameter]) -> list[int]:
    """
    Compute how many arguments each parameter receives.

    Args:
        arguments (Sequence[str]): Positional arguments, in command-line order.
        parameters (Sequence[Parameter]): Parameters, in declaration order.

    Returns:
        list[int]: One count per parameter, summing to `len(arguments)`.

    Raises:
        OptionError: If a required parameter is missing or an argument is left over.
    """
    requireds = [p for p in parameters if p.kind is ParameterKind.REQUIRED]
    if len(arguments) < len(requireds):
        raise OptionError(f"Missing argument for {requireds[len(arguments)].metavar}")

    counts = [0] * len(parameters)
    remaining = len(arguments)
    optionals: list[int] = []
    repeating: int | None = None
    for index, parameter in enumerate(parameters):
        if parameter.kind is ParameterKind.REQUIRED:
            counts[index] = 1
            remaining -= 1
        elif parameter.kind is ParameterKind.OPTIONAL:
            optionals.append(index)
        else:
            if repeating is not None:
                raise SchemaError("A command can have at most one repeating parameter")
            repeating = index

    for index in optionals[:remaining]:
        counts[index] = 1
        remaining -= 1

    if repeating is not None:
        counts[repeating] = remaining
    elif remaining:
        raise OptionError(f"Unexpected argument '{arguments[len(parameters)]}'")
    return counts


def apply_positionals(
    record: Any, arguments: Sequence[str], parameters: Sequence[Parameter]
) -> None:
    """Distribute `arguments` and apply them to `record` in declaration order."""
    counts = distribute(arguments, parameters)
    position = 0
    for parameter, count in zip(parameters, counts):
        for argument in arguments[position : position + count]:
            parameter.apply(record, argument)
        position += count
