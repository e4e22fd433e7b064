"""Where exposition text comes from and where finished documents go.

run_once() talks to a ScrapeSourcePort and a PushSinkPort. HTTP, file and
in-memory adapters satisfy them structurally and never subclass them.
"""

from typing import Protocol, runtime_checkable

from otelpush.core.models import Document


@runtime_checkable
class ScrapeSourcePort(Protocol):
    """Port for obtaining exposition text.

    Examples: HTTPScrapeSource, FileScrapeSource, StaticScrapeSource.
    """

    def fetch(self) -> str:
        """Return the full exposition body."""
        ...


@runtime_checkable
class PushSinkPort(Protocol):
    """Port for delivering an assembled document.

    Examples: OTLPHTTPPushSink, InMemoryPushSink.
    """

    def push(self, document: Document) -> None:
        """Deliver the document to its destination."""
        ...
