"""Conversion of a full exposition text body into a document.

Comment lines are dropped, every other line goes through the metric line
parser. What happens on a malformed line is decided by ``skip_malformed``:
by default the whole batch is aborted.
"""

import logging
from collections.abc import Iterator

from otelpush.core.assembler import assemble
from otelpush.core.classifier import LineKind, classify_line
from otelpush.core.exceptions import MalformedLineError
from otelpush.core.models import Document, Metric
from otelpush.core.parser import parse_metric_line

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """Split text on "\\n" only, dropping one trailing "\\r" per line.

    Other Unicode line boundaries (form feed, U+2028, ...) stay inside the
    line. A trailing newline does not produce a final empty line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def iter_metric_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield (line_number, line) for every metric line in text.

    Line numbers are 1-based. Comment lines are skipped.
    """
    for line_number, line in enumerate(split_lines(text), start=1):
        kind = classify_line(line)
        if kind is not LineKind.METRIC_LINE:
            logger.debug("Skipping %s on line %d", kind.value, line_number)
            continue
        yield line_number, line


def parse_exposition(text: str, *, skip_malformed: bool = False) -> list[Metric]:
    """Parse every metric line in text.

    Args:
        text: Exposition body, one metric or comment per line.
        skip_malformed: If True, log and drop malformed lines instead of
            aborting.

    Returns:
        Parsed metrics in source-line order.

    Raises:
        MalformedLineError: On the first malformed line, tagged with its line
            number, unless skip_malformed is set.
    """
    metrics: list[Metric] = []
    for line_number, line in iter_metric_lines(text):
        try:
            metrics.append(parse_metric_line(line))
        except MalformedLineError as exc:
            error = exc.at_line(line_number)
            if not skip_malformed:
                raise error from exc
            logger.warning("Skipping malformed metric line: %s", error)
    return metrics


def convert(text: str, captured_at: int, *, skip_malformed: bool = False) -> Document:
    """Parse text and assemble the result into a timestamped document."""
    metrics = parse_exposition(text, skip_malformed=skip_malformed)
    logger.info("Parsed %d metrics", len(metrics))
    return assemble(metrics, captured_at)
