"""Parser for single lines of the exposition text format.

A metric line has the shape::

    name{key="value",other="value"} 1027
    name 42.7

The scanner makes one left-to-right pass over the line with a cursor and an
explicit state. It never backtracks. Label values are taken verbatim: there
is no escape processing, so a ``\\"`` inside a value ends the value early.
"""

import re
from enum import Enum, auto

from otelpush.core.exceptions import MalformedLineError
from otelpush.core.models import (
    Attribute,
    DataPoint,
    DoubleValue,
    IntValue,
    Metric,
    NumberValue,
)

_INT_LITERAL = re.compile(r"[+-]?[0-9]+")
_FLOAT_LITERAL = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[+-]?(?:inf|infinity|nan)",
    re.IGNORECASE,
)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class _State(Enum):
    SCAN_NAME = auto()
    SCAN_LABELS = auto()
    SCAN_LABEL_KEY = auto()
    SCAN_LABEL_VALUE = auto()
    SCAN_VALUE = auto()


_END_OF_LINE_REASONS = {
    _State.SCAN_NAME: "expected '{' or ' ' after metric name but found end of line",
    _State.SCAN_LABELS: "unterminated label block",
    _State.SCAN_LABEL_KEY: "expected '=' after label key but found end of line",
    _State.SCAN_LABEL_VALUE: "unterminated label value",
}


def _describe(line: str, pos: int) -> str:
    """Describe the character at pos for error messages."""
    if pos >= len(line):
        return "end of line"
    return repr(line[pos])


def parse_number(literal: str) -> NumberValue | None:
    """Parse a numeric literal, preferring the integer representation.

    Args:
        literal: The text after the separating space.

    Returns:
        IntValue for integer literals that fit in 64 bits, DoubleValue for
        anything float() accepts in plain notation, or None if neither.
        Surrounding whitespace and underscore separators are rejected.
    """
    if _INT_LITERAL.fullmatch(literal):
        number = int(literal)
        if _INT64_MIN <= number <= _INT64_MAX:
            return IntValue(number)
    if _FLOAT_LITERAL.fullmatch(literal):
        return DoubleValue(float(literal))
    return None


def parse_metric_line(line: str) -> Metric:
    """Parse one exposition line into a Metric.

    The returned metric has a single data point with ``time_unix_nano`` left
    at zero. Stamping is the assembler's job.

    Args:
        line: A line classified as a metric line (no trailing newline).

    Returns:
        Metric with one DataPoint carrying the line's labels and value.

    Raises:
        MalformedLineError: If the line does not match the format, the name
            is empty, or the value is not a number.
    """
    state = _State.SCAN_NAME
    pos = 0
    end = len(line)
    name = ""
    key = ""
    chars: list[str] = []
    attributes: list[Attribute] = []

    while state is not _State.SCAN_VALUE:
        if pos >= end:
            raise MalformedLineError(line, _END_OF_LINE_REASONS[state])
        char = line[pos]

        if state is _State.SCAN_NAME:
            if char in "{ ":
                name = "".join(chars)
                chars = []
                if not name:
                    raise MalformedLineError(line, "empty metric name")
                if char == "{":
                    pos += 1
                    state = _State.SCAN_LABELS
                else:
                    # The space is consumed by SCAN_VALUE.
                    state = _State.SCAN_VALUE
            else:
                chars.append(char)
                pos += 1

        elif state is _State.SCAN_LABELS:
            if char in ", ":
                pos += 1
            elif char == "}":
                pos += 1
                state = _State.SCAN_VALUE
            elif char in '"=':
                raise MalformedLineError(
                    line, f"unexpected {char!r} at start of label"
                )
            else:
                state = _State.SCAN_LABEL_KEY

        elif state is _State.SCAN_LABEL_KEY:
            pos += 1
            if char != "=":
                chars.append(char)
                continue
            key = "".join(chars)
            chars = []
            if pos >= end or line[pos] != '"':
                raise MalformedLineError(
                    line, f"expected '\"' but found {_describe(line, pos)}"
                )
            pos += 1
            state = _State.SCAN_LABEL_VALUE

        else:  # SCAN_LABEL_VALUE
            pos += 1
            if char == '"':
                attributes.append(Attribute(key=key, value="".join(chars)))
                chars = []
                state = _State.SCAN_LABELS
            else:
                chars.append(char)

    if pos >= end or line[pos] != " ":
        raise MalformedLineError(
            line, f"expected ' ' but found {_describe(line, pos)}"
        )
    literal = line[pos + 1 :]
    value = parse_number(literal)
    if value is None:
        raise MalformedLineError(line, f"cannot parse value {literal!r}")

    return Metric(
        name=name,
        data_points=(DataPoint(value=value, attributes=tuple(attributes)),),
    )
