"""Line classification for exposition text."""

from enum import Enum


class LineKind(Enum):
    """Disposition of a single exposition line."""

    TYPE_COMMENT = "type_comment"
    HELP_COMMENT = "help_comment"
    METRIC_LINE = "metric_line"


def classify_line(line: str) -> LineKind:
    """Route a raw line to a comment kind or to the metric parser.

    Blank lines are classified as METRIC_LINE and fail in the parser.
    """
    if line.startswith("# TYPE"):
        return LineKind.TYPE_COMMENT
    if line.startswith("# HELP"):
        return LineKind.HELP_COMMENT
    return LineKind.METRIC_LINE
