# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Option` dataclass, the definition of one named command-line option.

Options are created through their factory classmethods, which bind the record
mutation at definition time:

- `Option.flag(name, dest, value)`: `-name` sets a fixed value.
- `Option.value(name, dest, type, default)`: `-name=<v>` decodes and stores a value;
  with a default, `-name` alone stores the default.
- `Option.array(name, dest, type, syntax)`: accumulates values in one of three syntaxes.
- `Option.action(name, callback)`: `-name` runs a side effect and stops parsing.
- `Option.help()`: `-help` prints help for the current command and stops parsing.

Every option can be given as `-name` or `--name`. The usage label shown in help
tables always starts with a single dash and the option name.

Example:
    Option.value("format", "format", type=Format, metavar="text|json",
                 docs="Output format. (Default: text)")
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from argtree.exceptions import OptionError, SchemaError
from argtree.parser.accessors import Dest, make_extender, make_setter
from argtree.parser.option_kind import ArraySyntax, OptionKind, Resolution
from argtree.parser.parse_context import ParseContext
from argtree.parser.utils import decode_value

OptionHandler = Callable[[str | None, ParseContext, Any], None]


@dataclass(frozen=True)
class Option:
    """
    Represents a named command-line option.

    Attributes:
        name (str): Option name without leading dashes; unique within a command.
        usage (str): Label shown in the help table (e.g. `-a=<int>`).
        docs (str): Help text; may span multiple lines.
        kind (OptionKind): What the option does when matched.
        handler (OptionHandler | None): Mutation for FLAG, VALUE and ARRAY options,
            called with the inline value, the parse context and the record.
        callback (Callable[[], Any] | None): Side effect for ACTION options.
    """

    name: str
    usage: str
    docs: str
    kind: OptionKind
    handler: OptionHandler | None = None
    callback: Callable[[], Any] | None = None

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise SchemaError("Option name must be a non-empty string")
        if self.name.startswith("-"):
            raise SchemaError(f"Option name '{self.name}' must not start with '-'")
        if "=" in self.name:
            raise SchemaError(f"Option name '{self.name}' must not contain '='")
        if self.kind is OptionKind.ACTION and not callable(self.callback):
            raise SchemaError(f"Action for option -{self.name} must be callable")
        if self.kind in (OptionKind.FLAG, OptionKind.VALUE, OptionKind.ARRAY) and not (
            callable(self.handler)
        ):
            raise SchemaError(f"Option -{self.name} has no handler")

    def resolve(
        self, value: str | None, context: ParseContext, record: Any
    ) -> Resolution:
        """
        Apply this option to the record.

        HELP options are rendered by the owning command; calling `resolve` on one
        is an error.

        Returns:
            Resolution: TERMINATE for ACTION options, CONTINUE otherwise.
        """
        if self.kind is OptionKind.ACTION:
            assert self.callback is not None
            self.callback()
            return Resolution.TERMINATE
        if self.kind is OptionKind.HELP:
            raise TypeError("help options are resolved by their command")
        assert self.handler is not None
        self.handler(value, context, record)
        return Resolution.CONTINUE

    @classmethod
    def flag(cls, name: str, dest: Dest, value: Any = True, docs: str = "") -> Option:
        """Create a flag that stores `value` when present."""
        setter = make_setter(dest)

        def handler(inline: str | None, context: ParseContext, record: Any) -> None:
            if inline is not None:
                raise OptionError(f"Unexpected value '{inline}' for option -{name}")
            setter(record, value)

        return cls(name=name, usage=f"-{name}", docs=docs, kind=OptionKind.FLAG, handler=handler)

    @classmethod
    def value(
        cls,
        name: str,
        dest: Dest,
        type: Any = str,
        default: Any = None,
        metavar: str = "<value>",
        docs: str = "",
    ) -> Option:
        """
        Create an option that stores one decoded value.

        When `default` is not None the value may be omitted, in which case the
        default is stored as-is.
        """
        setter = make_setter(dest)
        if default is None:
            usage = f"-{name}={metavar}"
        else:
            usage = f"-{name}[={metavar}]"

        def handler(inline: str | None, context: ParseContext, record: Any) -> None:
            if inline is not None:
                setter(record, decode_value(inline, type))
            elif default is not None:
                setter(record, default)
            else:
                raise OptionError(f"Option -{name} requires a value")

        return cls(name=name, usage=usage, docs=docs, kind=OptionKind.VALUE, handler=handler)

    @classmethod
    def array(
        cls,
        name: str,
        dest: Dest,
        type: Any = str,
        syntax: ArraySyntax | str = ArraySyntax.UP_TO_NEXT_OPTION,
        metavar: str = "<item>",
        docs: str = "",
    ) -> Option:
        """Create an option that appends decoded values to a list."""
        syntax = ArraySyntax(syntax)
        extend = make_extender(dest)
        if syntax is ArraySyntax.COMMA_SEPARATED:
            usage = f"-{name}={metavar},{metavar}..."
        elif syntax is ArraySyntax.UP_TO_NEXT_OPTION:
            usage = f"-{name} {metavar}..."
        else:
            usage = f"-{name}={metavar}"

        def handler(inline: str | None, context: ParseContext, record: Any) -> None:
            if syntax is ArraySyntax.COMMA_SEPARATED:
                if inline is None:
                    raise OptionError(f"Option -{name} requires a value")
                if not inline:
                    return
                pieces = [piece.strip() for piece in inline.split(",")]
                extend(record, [decode_value(piece, type) for piece in pieces])
            elif syntax is ArraySyntax.UP_TO_NEXT_OPTION:
                if inline is not None:
                    extend(record, [decode_value(inline, type)])
                    return
                values = []
                while (token := context.peek()) is not None and not token.is_option:
                    values.append(decode_value(context.accept().text, type))
                extend(record, values)
            else:
                if inline is None:
                    raise OptionError(f"Option -{name} requires a value")
                extend(record, [decode_value(inline, type)])

        return cls(name=name, usage=usage, docs=docs, kind=OptionKind.ARRAY, handler=handler)

    @classmethod
    def action(cls, name: str, callback: Callable[[], Any], docs: str = "") -> Option:
        """Create an option that runs `callback` and stops parsing."""
        return cls(
            name=name,
            usage=f"-{name}",
            docs=docs,
            kind=OptionKind.ACTION,
            callback=callback,
        )

    @classmethod
    def help(cls) -> Option:
        """Create the standard `-help` option."""
        return cls(
            name="help",
            usage="-help",
            docs="Print usage information and exit.",
            kind=OptionKind.HELP,
        )

    def __str__(self) -> str:
        return f"Option(name={self.name!r}, kind={self.kind}, usage={self.usage!r})"
