"""Exception hierarchy for otelpush."""


class OtelPushError(Exception):
    """Base class for all otelpush errors."""


class MalformedLineError(OtelPushError):
    """Raised when an exposition line cannot be parsed.

    Attributes:
        line: The offending line text.
        reason: Human-readable description of what went wrong.
        line_number: 1-based position of the line in its batch, if known.
    """

    def __init__(self, line: str, reason: str, line_number: int | None = None) -> None:
        self.line = line
        self.reason = reason
        self.line_number = line_number
        super().__init__(str(self))

    def __str__(self) -> str:
        location = f"line {self.line_number}: " if self.line_number is not None else ""
        return f"{location}{self.reason} in {self.line!r}"

    def at_line(self, line_number: int) -> "MalformedLineError":
        """Return a copy of this error tagged with its line number."""
        return MalformedLineError(self.line, self.reason, line_number)


class EncodingError(OtelPushError):
    """Raised when an OTLP JSON document cannot be decoded."""


class ConfigurationError(OtelPushError):
    """Raised when settings are missing or invalid."""


class TransportError(OtelPushError):
    """Base class for scrape and push failures."""


class ScrapeError(TransportError):
    """Raised when the exposition text could not be fetched."""


class PushError(TransportError):
    """Raised when a push fails or the ingestion endpoint rejects it.

    Attributes:
        status_code: HTTP status returned by the endpoint, or None when no
            response was received.
    """

    def __init__(self, message: str, status_code: int | None) -> None:
        super().__init__(message)
        self.status_code = status_code
