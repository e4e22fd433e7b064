"""Scrape source and push sink adapters implementing core ports."""

from otelpush.adapters.http import HTTPScrapeSource, OTLPHTTPPushSink
from otelpush.adapters.in_memory import (
    FileScrapeSource,
    InMemoryPushSink,
    StaticScrapeSource,
)

__all__ = [
    "FileScrapeSource",
    "HTTPScrapeSource",
    "InMemoryPushSink",
    "OTLPHTTPPushSink",
    "StaticScrapeSource",
]
