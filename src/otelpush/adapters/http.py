"""HTTP transport adapters for scraping exposition text and pushing OTLP JSON.

Scraping retries transport failures with exponential backoff. Pushing is a
single attempt; a rejected push is reported, not retried.
"""

import logging
import time
from collections.abc import Callable
from types import TracebackType
from typing import Self

import httpx
from tenacity import (
    RetryCallState,
    RetryError,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from otelpush.core.encoding.otlp_json import encode_document
from otelpush.core.exceptions import ConfigurationError, PushError, ScrapeError
from otelpush.core.models import Document

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


def _log_before_sleep(retry_state: RetryCallState) -> None:
    """Log a failed attempt and the upcoming wait."""
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    sleep = retry_state.next_action.sleep if retry_state.next_action else 0.0
    logger.warning("Failed to get metrics: %s", exc)
    logger.info("Waiting %.0f seconds before retrying", sleep)


class _ClientOwner:
    """Holds an httpx.Client and closes it only if it was created here."""

    def __init__(self, client: httpx.Client | None) -> None:
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=DEFAULT_TIMEOUT_SECONDS)

    def close(self) -> None:
        """Close the underlying client if this adapter created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class HTTPScrapeSource(_ClientOwner):
    """ScrapeSourcePort that GETs exposition text from an exporter.

    Args:
        url: Exporter endpoint (e.g., http://localhost:9100/metrics).
        max_attempts: Total number of GET attempts before giving up.
        backoff_multiplier: Wait after failure n is
            ``backoff_multiplier * 2 ** (n - 1)`` seconds.
        client: Optional preconfigured httpx.Client. Not closed by close().
        sleep: Sleep function used between attempts.
    """

    def __init__(
        self,
        url: str,
        *,
        max_attempts: int = 5,
        backoff_multiplier: float = 2.0,
        client: httpx.Client | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        super().__init__(client)
        self.url = url
        self.max_attempts = max_attempts
        self._retrying = Retrying(
            stop=stop_after_attempt(max_attempts),
            wait=wait_exponential(multiplier=backoff_multiplier),
            retry=retry_if_exception_type(httpx.TransportError),
            before_sleep=_log_before_sleep,
            sleep=sleep,
        )

    def _get(self) -> httpx.Response:
        return self._client.get(self.url)

    def fetch(self) -> str:
        """Fetch the exposition body.

        Returns:
            Response body decoded as text.

        Raises:
            ScrapeError: If every attempt failed at the transport level, or
                the exporter answered with a non-2xx status.
        """
        try:
            response = self._retrying(self._get)
        except RetryError as exc:
            raise ScrapeError(
                f"failed {self.max_attempts} times and gave up"
            ) from exc.last_attempt.exception()
        if not response.is_success:
            raise ScrapeError(
                f"unexpected http status code from {self.url}: "
                f"{response.status_code} {response.reason_phrase}"
            )
        return response.text


class OTLPHTTPPushSink(_ClientOwner):
    """PushSinkPort that POSTs OTLP JSON to an ingestion gateway.

    Args:
        endpoint: OTLP/HTTP metrics URL.
        api_key: Bearer token sent in the Authorization header.
        client: Optional preconfigured httpx.Client. Not closed by close().

    Raises:
        ConfigurationError: If api_key is empty.
    """

    def __init__(
        self,
        endpoint: str,
        api_key: str,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError("API key is not configured")
        super().__init__(client)
        self.endpoint = endpoint
        self._api_key = api_key

    def push(self, document: Document) -> None:
        """Send the document to the endpoint.

        Raises:
            PushError: If the request fails in transport or the endpoint does
                not answer 200 OK.
        """
        body = encode_document(document)
        request = self._client.build_request(
            "POST",
            self.endpoint,
            content=body.encode("utf-8"),
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self._api_key}",
            },
        )
        logger.debug(
            "Request:\n%s %s\nContent-Type: application/json\n"
            "Authorization: Bearer <redacted>\n\n%s",
            request.method,
            request.url,
            body,
        )

        try:
            response = self._client.send(request)
        except httpx.HTTPError as exc:
            raise PushError(
                f"failed to push metrics to {self.endpoint}: {exc}", status_code=None
            ) from exc
        logger.info(
            "Response status: %d %s", response.status_code, response.reason_phrase
        )

        if response.status_code != httpx.codes.OK:
            logger.error("Response body:\n%s", response.text)
            raise PushError(
                f"unexpected http status code: "
                f"{response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )
