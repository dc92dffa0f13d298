# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance and the default help printer for argtree."""
from rich.console import Console

console = Console()


def print_help_text(text: str) -> None:
    """Print a rendered help text verbatim.

    Markup, emoji codes and highlighting are disabled so that usage labels such
    as `[<option>]...` and docs mentioning `:name:` reach the terminal unchanged.
    """
    console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)
