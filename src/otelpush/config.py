"""Environment-driven settings for a scrape-and-push run."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from otelpush.core.exceptions import ConfigurationError

DEFAULT_ENDPOINT = "https://otlp-gateway-prod-ap-northeast-0.grafana.net/otlp/v1/metrics"
DEFAULT_SCRAPE_ATTEMPTS = 5


def _parse_positive_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
    if value < 1:
        raise ConfigurationError(f"{name} must be at least 1, got {value}")
    return value


@dataclass(frozen=True)
class Settings:
    """Settings for one scrape-and-push run.

    Attributes:
        scrape_url: Exporter URL to fetch exposition text from.
        endpoint: OTLP/HTTP metrics URL to push to.
        api_key: Bearer token for the endpoint. Empty if not configured.
        scrape_attempts: Number of GET attempts before giving up.
        log_level: Root logging level name.
    """

    scrape_url: str
    endpoint: str = DEFAULT_ENDPOINT
    api_key: str = ""
    scrape_attempts: int = DEFAULT_SCRAPE_ATTEMPTS
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Load settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Raises:
            ConfigurationError: If no scrape target is configured or a
                numeric variable is invalid.
        """
        env = os.environ if environ is None else environ
        scrape_url = env.get("OTELPUSH_SCRAPE_URL", "").strip()
        if not scrape_url:
            port = env.get("EXPORTER_PORT", "").strip()
            if not port:
                raise ConfigurationError(
                    "EXPORTER_PORT or OTELPUSH_SCRAPE_URL must be set"
                )
            scrape_url = f"http://localhost:{port}/metrics"
        return cls(
            scrape_url=scrape_url,
            endpoint=env.get("OTELPUSH_ENDPOINT", "").strip() or DEFAULT_ENDPOINT,
            api_key=env.get("GRAFANA_API_KEY", ""),
            scrape_attempts=_parse_positive_int(
                env, "OTELPUSH_SCRAPE_ATTEMPTS", DEFAULT_SCRAPE_ATTEMPTS
            ),
            log_level=env.get("OTELPUSH_LOG_LEVEL", "").strip() or "INFO",
        )
