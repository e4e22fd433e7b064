"""Typer CLI for converting and pushing exposition metrics."""

from pathlib import Path

import typer

from otelpush.adapters.http import HTTPScrapeSource, OTLPHTTPPushSink
from otelpush.adapters.in_memory import FileScrapeSource, InMemoryPushSink
from otelpush.config import Settings
from otelpush.core.assembler import now_unix_nano
from otelpush.core.encoding.otlp_json import encode_document
from otelpush.core.exceptions import OtelPushError
from otelpush.core.logs import configure_logging, log_exception
from otelpush.service import run_once

app = typer.Typer(
    name="otelpush",
    help="Convert Prometheus-style exposition text to OTLP JSON and push it.",
    add_completion=False,
)

_SKIP_MALFORMED = typer.Option(
    False,
    "--skip-malformed",
    help="Log and drop malformed lines instead of aborting the batch.",
)


@app.command()
def push(
    skip_malformed: bool = _SKIP_MALFORMED,
    log_level: str | None = typer.Option(
        None, "--log-level", help="Overrides OTELPUSH_LOG_LEVEL."
    ),
) -> None:
    """Scrape the exporter once and push the metrics to the OTLP endpoint."""
    try:
        settings = Settings.from_env()
        configure_logging(log_level or settings.log_level)
        with HTTPScrapeSource(
            settings.scrape_url, max_attempts=settings.scrape_attempts
        ) as source, OTLPHTTPPushSink(settings.endpoint, settings.api_key) as sink:
            run_once(source, sink, skip_malformed=skip_malformed)
    except OtelPushError:
        log_exception("Scrape and push failed")
        raise typer.Exit(code=1) from None


@app.command()
def convert(
    path: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="Exposition file."
    ),
    timestamp: int | None = typer.Option(
        None, "--timestamp", help="Capture time in ns since the epoch. Defaults to now."
    ),
    skip_malformed: bool = _SKIP_MALFORMED,
    log_level: str = typer.Option("INFO", "--log-level"),
) -> None:
    """Print the OTLP JSON document for a local exposition file."""
    configure_logging(log_level)
    sink = InMemoryPushSink()
    clock = now_unix_nano if timestamp is None else (lambda: timestamp)
    try:
        document = run_once(
            FileScrapeSource(path), sink, skip_malformed=skip_malformed, clock=clock
        )
    except OtelPushError:
        log_exception(f"Failed to convert {path}")
        raise typer.Exit(code=1) from None
    typer.echo(encode_document(document))
