# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Help text layout for argtree commands.

Every help table entry is a two-column row: a usage label padded to a fixed width,
followed by its documentation. Labels longer than the column width get a line to
themselves, with the documentation starting on the next line at the doc column.
Multi-line documentation is indented to the doc column on every continuation line.

Example (default layout):

    Options:
      -a         A test flag.
      -a-flag-with-a-long-name
                 Another test flag.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HelpLayout:
    """
    Column layout used when rendering help tables.

    Attributes:
        indent (str): Prefix for every entry line.
        usage_column_width (int): Width the usage label is padded to.
        column_separator (str): Text between the label column and the docs column.
    """

    indent: str = "  "
    usage_column_width: int = 10
    column_separator: str = " "

    def __post_init__(self):
        if self.usage_column_width < 0:
            raise ValueError("usage_column_width must be non-negative")

    @property
    def doc_indent(self) -> str:
        return " " * (
            len(self.indent) + self.usage_column_width + len(self.column_separator)
        )


DEFAULT_HELP_LAYOUT = HelpLayout()


def help_entry(label: str, docs: str, layout: HelpLayout = DEFAULT_HELP_LAYOUT) -> list[str]:
    """Render one table entry as a list of lines without trailing whitespace."""
    doc_lines = docs.split("\n") if docs else []
    if len(label) > layout.usage_column_width:
        lines = [layout.indent + label]
        lines.extend(layout.doc_indent + line for line in doc_lines)
    else:
        first = doc_lines[0] if doc_lines else ""
        lines = [
            layout.indent
            + label.ljust(layout.usage_column_width)
            + layout.column_separator
            + first
        ]
        lines.extend(layout.doc_indent + line for line in doc_lines[1:])
    return [line.rstrip() for line in lines]


def help_section(
    title: str,
    entries: list[tuple[str, str]],
    layout: HelpLayout = DEFAULT_HELP_LAYOUT,
) -> list[str]:
    """Render a titled section preceded by an empty line, or nothing if empty."""
    if not entries:
        return []
    lines = ["", title]
    for label, docs in entries:
        lines.extend(help_entry(label, docs, layout))
    return lines
