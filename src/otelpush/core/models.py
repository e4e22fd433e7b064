"""Core domain models for converted metric data."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Attribute:
    """A label pair attached to a data point.

    Attributes:
        key: Label name as written in the source line (may be empty).
        value: Label value, unescaped text between the quotes.
    """

    key: str
    value: str


@dataclass(frozen=True)
class IntValue:
    """An exact integer measurement."""

    value: int


@dataclass(frozen=True)
class DoubleValue:
    """A floating-point measurement."""

    value: float


NumberValue = IntValue | DoubleValue


@dataclass(frozen=True)
class DataPoint:
    """A single gauge measurement.

    Attributes:
        value: Either an IntValue or a DoubleValue, never both.
        time_unix_nano: Capture time in nanoseconds since the epoch.
            Zero until the point is stamped by the assembler.
        attributes: Label pairs in source order. Duplicates are kept.
    """

    value: NumberValue
    time_unix_nano: int = 0
    attributes: tuple[Attribute, ...] = ()


@dataclass(frozen=True)
class Metric:
    """A named gauge metric with its data points.

    Attributes:
        name: Metric name (e.g., http_requests_total).
        unit: Unit string. Not populated by the parser.
        description: Description string. Not populated by the parser.
        data_points: Measurements for this metric.
    """

    name: str
    unit: str = ""
    description: str = ""
    data_points: tuple[DataPoint, ...] = ()


@dataclass(frozen=True)
class ScopeMetrics:
    """Metrics produced by a single instrumentation scope."""

    metrics: tuple[Metric, ...] = ()


@dataclass(frozen=True)
class ResourceMetrics:
    """Scope groups produced by a single resource."""

    scope_metrics: tuple[ScopeMetrics, ...] = ()


@dataclass(frozen=True)
class Document:
    """Top-level container in the shape the ingestion endpoint expects."""

    resource_metrics: tuple[ResourceMetrics, ...] = ()

    @property
    def metrics(self) -> tuple[Metric, ...]:
        """All metrics in the document, flattened in order."""
        return tuple(
            metric
            for resource in self.resource_metrics
            for scope in resource.scope_metrics
            for metric in scope.metrics
        )
