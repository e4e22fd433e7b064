"""Tests for document assembly."""

import time

import pytest

from otelpush.core.assembler import assemble, now_unix_nano, stamp
from otelpush.core.models import Attribute, DataPoint, DoubleValue, IntValue, Metric


def _metric(name: str, value: int = 1) -> Metric:
    return Metric(name=name, data_points=(DataPoint(value=IntValue(value)),))


class TestAssemble:
    """Tests for assemble()."""

    @pytest.mark.core
    def test_single_resource_and_scope(self, captured_at: int) -> None:
        """Assembled documents have exactly one resource and one scope group."""
        document = assemble([_metric("a"), _metric("b")], captured_at)
        assert len(document.resource_metrics) == 1
        assert len(document.resource_metrics[0].scope_metrics) == 1

    @pytest.mark.core
    def test_preserves_order(self, captured_at: int) -> None:
        """Metrics keep their input order."""
        document = assemble([_metric("b"), _metric("a"), _metric("c")], captured_at)
        assert [metric.name for metric in document.metrics] == ["b", "a", "c"]

    @pytest.mark.core
    def test_stamps_every_point_with_same_time(self, captured_at: int) -> None:
        """All data points share the batch capture time."""
        document = assemble([_metric("a"), _metric("b")], captured_at)
        stamps = {
            point.time_unix_nano
            for metric in document.metrics
            for point in metric.data_points
        }
        assert stamps == {captured_at}

    @pytest.mark.core
    def test_does_not_mutate_input(self, captured_at: int) -> None:
        """Input metrics keep their zero timestamp."""
        metric = _metric("a")
        assemble([metric], captured_at)
        assert metric.data_points[0].time_unix_nano == 0

    @pytest.mark.core
    def test_empty_input(self, captured_at: int) -> None:
        """No metrics still yields the nested shell."""
        document = assemble([], captured_at)
        assert len(document.resource_metrics[0].scope_metrics) == 1
        assert document.metrics == ()

    @pytest.mark.core
    def test_accepts_generator(self, captured_at: int) -> None:
        """Any iterable of metrics is accepted."""
        document = assemble((_metric(name) for name in "xyz"), captured_at)
        assert len(document.metrics) == 3


class TestStamp:
    """Tests for stamp()."""

    @pytest.mark.core
    def test_keeps_value_and_attributes(self) -> None:
        """Only the timestamp changes."""
        metric = Metric(
            name="m",
            data_points=(
                DataPoint(value=DoubleValue(2.5), attributes=(Attribute("k", "v"),)),
            ),
        )
        stamped = stamp(metric, 42)
        assert stamped.data_points[0] == DataPoint(
            value=DoubleValue(2.5), time_unix_nano=42, attributes=(Attribute("k", "v"),)
        )
        assert stamped.name == "m"


class TestNowUnixNano:
    """Tests for now_unix_nano()."""

    @pytest.mark.core
    def test_reads_time_ns(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The clock reads time.time_ns()."""
        monkeypatch.setattr(time, "time_ns", lambda: 1702300000123456789)
        assert now_unix_nano() == 1702300000123456789
