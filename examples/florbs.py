import sys
from dataclasses import dataclass, field
from enum import Enum

from rich.console import Console
from rich.markup import escape

from argtree import Command, Option, OptionError, OptionParser, Parameter
from argtree.utils import setup_logging

setup_logging()

err_console = Console(stderr=True)


class Format(Enum):
    TEXT = "text"
    JSON = "json"


@dataclass
class GlobalOptions:
    format: Format = Format.TEXT


@dataclass
class RunOptions:
    global_options: GlobalOptions
    florbs: list[str] = field(default_factory=list)
    zarcks: list[int] = field(default_factory=list)


def list_florbs(record: GlobalOptions) -> None:
    names = ["alpha", "beta", "gamma"]
    if record.format is Format.JSON:
        print('["' + '", "'.join(names) + '"]')
    else:
        print("\n".join(names))


def run_florbs(record: RunOptions) -> None:
    florbs = record.florbs or ["alpha", "beta", "gamma"]
    for florb in florbs:
        print(f"{florb}: {record.zarcks or 'no zarcks'}")


parser = OptionParser(
    docs="Handle florbs, with support for zarcks.",
    initial=GlobalOptions(),
    options=[
        Option.value(
            "format",
            "format",
            type=Format,
            metavar="text|json",
            docs="Output format. (Default: text)",
        ),
        Option.action(
            "version",
            lambda: print("florbs 0.1.0"),
            docs="Print version information and exit.",
        ),
    ],
    commands=[
        Command("list", docs="List available florbs.", action=list_florbs),
        Command(
            "run",
            docs="Run selected florbs on some specific zarcks.",
            initial=RunOptions,
            options=[
                Option.array(
                    "florbs",
                    "florbs",
                    metavar="<name>",
                    docs="The florbs to run (default: all)",
                )
            ],
            parameters=[
                Parameter.repeating(
                    "zarcks",
                    "<zarck>",
                    type=int,
                    docs="The zarks on which to run the selected florbs.",
                )
            ],
            action=run_florbs,
        ),
    ],
)

if __name__ == "__main__":
    try:
        parser.parse()
    except OptionError as error:
        err_console.print(f"[bold red]error:[/] {escape(str(error))}", highlight=False)
        sys.exit(2)
