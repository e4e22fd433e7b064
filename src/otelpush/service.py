"""One-shot scrape, convert and push."""

import logging
from collections.abc import Callable

from otelpush.core.assembler import now_unix_nano
from otelpush.core.exposition import convert
from otelpush.core.models import Document
from otelpush.core.ports import PushSinkPort, ScrapeSourcePort

logger = logging.getLogger(__name__)


def run_once(
    source: ScrapeSourcePort,
    sink: PushSinkPort,
    *,
    skip_malformed: bool = False,
    clock: Callable[[], int] = now_unix_nano,
) -> Document:
    """Fetch exposition text, convert it and push the resulting document.

    The clock is read once, after the fetch, so every metric in the batch
    shares the same capture time.

    Args:
        source: Where the exposition text comes from.
        sink: Where the assembled document goes.
        skip_malformed: Drop malformed lines instead of aborting the batch.
        clock: Returns the capture time in nanoseconds since the epoch.

    Returns:
        The document that was pushed.
    """
    text = source.fetch()
    captured_at = clock()
    document = convert(text, captured_at, skip_malformed=skip_malformed)
    sink.push(document)
    logger.info("Pushed %d metrics", len(document.metrics))
    return document
