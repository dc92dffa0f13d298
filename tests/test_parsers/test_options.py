from dataclasses import dataclass, field

import pytest

from argtree.exceptions import OptionError
from argtree.parser import ArraySyntax, Option, OptionParser


@dataclass
class Record:
    a: int = 0
    b: bool = False
    c: str = ""
    d: int | None = None
    number: float | None = None


@dataclass
class ArrayRecord:
    a: list[int] = field(default_factory=list)
    b: list[bool] = field(default_factory=list)
    d: list[float] = field(default_factory=list)


def run(parser, *arguments):
    calls = []
    result = parser.parse(["tool", *arguments], printer=calls.append)
    assert calls == []
    return result


def flags_parser():
    return OptionParser(
        docs="Do something with some options.",
        initial=Record(),
        options=[
            Option.flag("a", "a", value=42, docs="A test flag."),
            Option.flag("b", "b", value=True, docs="Another test flag."),
            Option.flag(
                "a-flag-with-a-really-really-really-extremely-long-name",
                "b",
                value=True,
                docs="Another test flag.",
            ),
            Option.flag(
                "c",
                "c",
                value="YES",
                docs="Yet another test flag.\n"
                "This one is special because its documentation has multiple lines.",
            ),
        ],
        action=lambda record: None,
    )


@pytest.mark.parametrize(
    "arguments, expected",
    [
        ([], Record()),
        (["-a"], Record(a=42)),
        (["-b"], Record(b=True)),
        (["-c"], Record(c="YES")),
        (["-c", "-a", "-b"], Record(a=42, b=True, c="YES")),
        (["-a", "-a", "-b", "-a"], Record(a=42, b=True)),
        (["--a"], Record(a=42)),
        (["--b"], Record(b=True)),
        (["--c"], Record(c="YES")),
    ],
)
def test_flags(arguments, expected):
    assert run(flags_parser(), *arguments) == expected


@pytest.mark.parametrize(
    "arguments, message",
    [
        (["-d"], "Unknown option -d"),
        (["--d"], "Unknown option --d"),
        (["-a=42"], "Unexpected value '42' for option -a"),
        (["help"], "Unexpected argument 'help'"),
    ],
)
def test_flag_errors(arguments, message):
    with pytest.raises(OptionError) as exc_info:
        flags_parser().parse(["tool", *arguments], printer=lambda text: None)
    assert exc_info.value.message == message
    assert str(exc_info.value) == message


def values_parser():
    return OptionParser(
        docs="Do something with some options.",
        initial=Record(),
        options=[
            Option.value("a", "a", type=int, metavar="<int>", docs="Integer value."),
            Option.value("b", "b", type=bool, metavar="on|off", docs="Boolean value."),
            Option.value("c", "c", metavar="<string>", docs="String value."),
            Option.value("d", "d", type=int, metavar="<int>", docs="Integer value."),
            Option.value("float", "number", type=float, metavar="<value>", docs="Float value."),
        ],
        action=lambda record: None,
    )


@pytest.mark.parametrize(
    "arguments, expected",
    [
        (["-a=1"], Record(a=1)),
        (["-a=1", "-a=2", "-a=3"], Record(a=3)),
        (["--a=1"], Record(a=1)),
        (["-b=on"], Record(b=True)),
        (["-b=yes"], Record(b=True)),
        (["-b=true"], Record(b=True)),
        (["-b=y"], Record(b=True)),
        (["-b=1"], Record(b=True)),
        (["-b=on", "-b=off"], Record()),
        (["-c=1"], Record(c="1")),
        (["-c=Value"], Record(c="Value")),
        (["-c= "], Record(c=" ")),
        (["-c=-c"], Record(c="-c")),
        (["-c=a=b"], Record(c="a=b")),
        (["-d=34"], Record(d=34)),
        (["-float=0"], Record(number=0.0)),
        (["-float=-3.25"], Record(number=-3.25)),
        (["-float=+4"], Record(number=4.0)),
        (["-float=+infinity"], Record(number=float("inf"))),
        (["-float=-infinity"], Record(number=float("-inf"))),
    ],
)
def test_values(arguments, expected):
    assert run(values_parser(), *arguments) == expected


@pytest.mark.parametrize(
    "arguments, message",
    [
        (["-a"], "Option -a requires a value"),
        (["--a"], "Option -a requires a value"),
        (["-a=foo"], "Invalid integer value: 'foo'"),
        (["-b=foo"], "Invalid boolean value: 'foo'"),
        (["-d"], "Option -d requires a value"),
        (["-float=foo"], "Invalid floating point value: 'foo'"),
    ],
)
def test_value_errors(arguments, message):
    with pytest.raises(OptionError, match=f"^{message}$"):
        values_parser().parse(["tool", *arguments], printer=lambda text: None)


def defaults_parser():
    return OptionParser(
        docs="Do something with some options.",
        initial=Record(),
        options=[
            Option.value("a", "a", type=int, default=100, metavar="<int>", docs="Integer value."),
            Option.value("b", "b", type=bool, default=True, metavar="on|off", docs="Boolean value."),
            Option.value("c", "c", default="default", metavar="<string>", docs="String value."),
        ],
        action=lambda record: None,
    )


@pytest.mark.parametrize(
    "arguments, expected",
    [
        (["-a"], Record(a=100)),
        (["-a=42"], Record(a=42)),
        (["-a=42", "-a"], Record(a=100)),
        (["-b"], Record(b=True)),
        (["-c"], Record(c="default")),
        (["-a", "-b", "-c"], Record(a=100, b=True, c="default")),
        (["--a=42"], Record(a=42)),
        (["--a", "--b", "--c"], Record(a=100, b=True, c="default")),
    ],
)
def test_values_with_default(arguments, expected):
    assert run(defaults_parser(), *arguments) == expected


def test_omitted_value_equals_explicit_default():
    assert run(defaults_parser(), "-a") == run(defaults_parser(), "-a=100")


def arrays_parser():
    return OptionParser(
        docs="Do something with some options.",
        initial=ArrayRecord(),
        options=[
            Option.array(
                "a",
                "a",
                type=int,
                syntax=ArraySyntax.COMMA_SEPARATED,
                metavar="<int>",
                docs="Integer values.",
            ),
            Option.array(
                "b",
                "b",
                type=bool,
                syntax=ArraySyntax.UP_TO_NEXT_OPTION,
                metavar="on|off",
                docs="Boolean values.",
            ),
            Option.array(
                "d",
                "d",
                type=float,
                syntax="repeated",
                metavar="<int>",
                docs="Integer values.",
            ),
        ],
        action=lambda record: None,
    )


@pytest.mark.parametrize(
    "arguments, expected",
    [
        (["-a="], ArrayRecord()),
        (["-a=1"], ArrayRecord(a=[1])),
        (["-a=1,4,2"], ArrayRecord(a=[1, 4, 2])),
        (["-a=1", "-a=4,2"], ArrayRecord(a=[1, 4, 2])),
        (["-a= 1 , 4,2 "], ArrayRecord(a=[1, 4, 2])),
        (["-b=1"], ArrayRecord(b=[True])),
        (["-b=1", "-b=off", "-b=yes"], ArrayRecord(b=[True, False, True])),
        (["-b", "on", "off", "yes", "1", "0"], ArrayRecord(b=[True, False, True, True, False])),
        (["-b", "on", "off", "-a=23,42"], ArrayRecord(a=[23, 42], b=[True, False])),
        (["-b", "on", "off", "-b", "off"], ArrayRecord(b=[True, False, False])),
        (["-b"], ArrayRecord()),
        (["-d=1.0"], ArrayRecord(d=[1.0])),
        (["-d=1.0", "-d=2"], ArrayRecord(d=[1.0, 2.0])),
    ],
)
def test_arrays(arguments, expected):
    assert run(arrays_parser(), *arguments) == expected


@pytest.mark.parametrize(
    "arguments, message",
    [
        (["-a"], "Option -a requires a value"),
        (["-a", "1"], "Option -a requires a value"),
        (["-a=1,x"], "Invalid integer value: 'x'"),
        (["-b", "on", "maybe"], "Invalid boolean value: 'maybe'"),
        (["-d"], "Option -d requires a value"),
    ],
)
def test_array_errors(arguments, message):
    with pytest.raises(OptionError, match=f"^{message}$"):
        arrays_parser().parse(["tool", *arguments], printer=lambda text: None)


def test_up_to_next_option_stops_at_separator():
    seen = []
    parser = OptionParser(
        docs="",
        initial={"names": []},
        options=[Option.array("names", "names")],
        action=seen.append,
    )
    with pytest.raises(OptionError, match="^Unexpected argument 'x'$"):
        parser.parse(["tool", "-names", "a", "b", "--", "x"], printer=lambda text: None)
    assert seen == []


def test_action_option_terminates_parsing():
    fired = []
    completed = []
    parser = OptionParser(
        docs="Do something with some options.",
        initial=Record(),
        options=[Option.action("action", lambda: fired.append(True), docs="Perform an action.")],
        action=completed.append,
    )
    result = parser.parse(["tool", "-action", "-unknown", "extra"], printer=lambda text: None)
    assert result is None
    assert fired == [True]
    assert completed == []


def test_action_option_errors_propagate():
    def fail():
        raise RuntimeError("boom")

    parser = OptionParser(
        docs="",
        initial=Record(),
        options=[Option.action("explode", fail)],
        action=lambda record: None,
    )
    with pytest.raises(RuntimeError, match="boom"):
        parser.parse(["tool", "-explode"], printer=lambda text: None)


def test_options_after_positional_only_marker_are_values():
    parser = OptionParser(
        docs="",
        initial={"a": 0},
        options=[Option.flag("a", "a", value=1)],
        action=lambda record: None,
    )
    with pytest.raises(OptionError, match="^Unexpected argument '-a'$"):
        parser.parse(["tool", "--", "-a"], printer=lambda text: None)


def test_mapping_records_and_callable_destinations():
    seen = []

    def remember(record, value):
        record["log"].append(value)

    parser = OptionParser(
        docs="",
        initial={"name": None, "log": []},
        options=[
            Option.value("name", "name"),
            Option.value("note", remember),
            Option.array("tags", "tags", syntax="comma"),
        ],
        action=seen.append,
    )
    result = parser.parse(
        ["tool", "-name=x", "-note=first", "-note=second", "-tags=a,b"],
        printer=lambda text: None,
    )
    assert result == {"name": "x", "log": ["first", "second"], "tags": ["a", "b"]}
    assert seen == [result]


def test_each_parse_starts_from_a_fresh_record():
    initial = ArrayRecord()
    parser = OptionParser(
        docs="",
        initial=initial,
        options=[Option.array("a", "a", type=int, syntax="repeated")],
        action=lambda record: None,
    )
    first = parser.parse(["tool", "-a=1"], printer=lambda text: None)
    second = parser.parse(["tool", "-a=2"], printer=lambda text: None)
    assert first.a == [1]
    assert second.a == [2]
    assert initial.a == []
