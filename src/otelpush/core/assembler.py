"""Assembly of parsed metrics into a timestamped document."""

import time
from collections.abc import Iterable
from dataclasses import replace

from otelpush.core.models import Document, Metric, ResourceMetrics, ScopeMetrics


def now_unix_nano() -> int:
    """Return the current wall-clock time in nanoseconds since the epoch."""
    return time.time_ns()


def stamp(metric: Metric, captured_at: int) -> Metric:
    """Return a copy of metric with every data point set to captured_at."""
    return replace(
        metric,
        data_points=tuple(
            replace(point, time_unix_nano=captured_at) for point in metric.data_points
        ),
    )


def assemble(metrics: Iterable[Metric], captured_at: int) -> Document:
    """Fold metrics into a single-resource, single-scope document.

    Every data point is stamped with the same capture time so that all
    metrics from one scrape are co-timed. Input order is preserved.

    Args:
        metrics: Parsed metrics, in source order.
        captured_at: Capture time in nanoseconds since the epoch,
            read once per batch by the caller.

    Returns:
        Document containing exactly one ResourceMetrics with exactly one
        ScopeMetrics.
    """
    stamped = tuple(stamp(metric, captured_at) for metric in metrics)
    return Document(
        resource_metrics=(
            ResourceMetrics(scope_metrics=(ScopeMetrics(metrics=stamped),)),
        )
    )
