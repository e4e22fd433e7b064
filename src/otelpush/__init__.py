"""otelpush: Prometheus-style exposition text to OTLP JSON."""

from otelpush.core.assembler import assemble, now_unix_nano
from otelpush.core.classifier import LineKind, classify_line
from otelpush.core.encoding.otlp_json import decode_document, encode_document
from otelpush.core.exceptions import (
    ConfigurationError,
    EncodingError,
    MalformedLineError,
    OtelPushError,
    PushError,
    ScrapeError,
    TransportError,
)
from otelpush.core.exposition import convert, parse_exposition
from otelpush.core.models import (
    Attribute,
    DataPoint,
    Document,
    DoubleValue,
    IntValue,
    Metric,
    ResourceMetrics,
    ScopeMetrics,
)
from otelpush.core.parser import parse_metric_line

__all__ = [
    "Attribute",
    "ConfigurationError",
    "DataPoint",
    "Document",
    "DoubleValue",
    "EncodingError",
    "IntValue",
    "LineKind",
    "MalformedLineError",
    "Metric",
    "OtelPushError",
    "PushError",
    "ResourceMetrics",
    "ScopeMetrics",
    "ScrapeError",
    "TransportError",
    "assemble",
    "classify_line",
    "convert",
    "decode_document",
    "encode_document",
    "now_unix_nano",
    "parse_exposition",
    "parse_metric_line",
]
