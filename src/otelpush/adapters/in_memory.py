"""In-memory and file adapters for scrape sources and push sinks."""

from pathlib import Path

from otelpush.core.exceptions import ScrapeError
from otelpush.core.models import Document


class StaticScrapeSource:
    """ScrapeSourcePort returning a fixed body.

    Suitable for testing and for replaying a captured scrape.
    """

    def __init__(self, text: str) -> None:
        self._text = text

    def fetch(self) -> str:
        """Return the configured body."""
        return self._text


class FileScrapeSource:
    """ScrapeSourcePort reading exposition text from a file."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def fetch(self) -> str:
        """Read and return the file contents.

        Raises:
            ScrapeError: If the file cannot be read or is not UTF-8 text.
        """
        try:
            return self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ScrapeError(f"cannot read {self._path}: {exc}") from exc


class InMemoryPushSink:
    """PushSinkPort that keeps pushed documents in a list.

    Suitable for testing and dry runs where nothing should leave the
    process.
    """

    def __init__(self) -> None:
        self._documents: list[Document] = []

    def push(self, document: Document) -> None:
        """Record a pushed document."""
        self._documents.append(document)

    @property
    def documents(self) -> list[Document]:
        """Documents pushed so far, oldest first."""
        return list(self._documents)
