"""OTLP JSON encoder and decoder for metric documents.

Only the gauge subset of the OTLP metrics data model is produced. Each data
point carries exactly one of ``asInt`` or ``asDouble``; the other key is
omitted rather than written as null or zero.
"""

import json
import math
from typing import Any

from otelpush.core.exceptions import EncodingError
from otelpush.core.models import (
    Attribute,
    DataPoint,
    Document,
    DoubleValue,
    IntValue,
    Metric,
    NumberValue,
    ResourceMetrics,
    ScopeMetrics,
)

# proto3 JSON mapping for non-finite doubles
_NON_FINITE_NAMES = {"NaN": math.nan, "Infinity": math.inf, "-Infinity": -math.inf}


def _encode_double(value: float) -> float | str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return value


def _decode_double(raw: Any) -> float:
    if isinstance(raw, str):
        if raw in _NON_FINITE_NAMES:
            return _NON_FINITE_NAMES[raw]
        try:
            return float(raw)
        except ValueError as exc:
            raise EncodingError(f"invalid asDouble value: {raw!r}") from exc
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise EncodingError(f"invalid asDouble value: {raw!r}")
    return float(raw)


def _decode_int(raw: Any, field: str = "asInt") -> int:
    # int64 fields may arrive as JSON strings
    if isinstance(raw, bool):
        raise EncodingError(f"invalid {field} value: {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw)
        except ValueError as exc:
            raise EncodingError(f"invalid {field} value: {raw!r}") from exc
    raise EncodingError(f"invalid {field} value: {raw!r}")


def _data_point_to_dict(point: DataPoint) -> dict[str, Any]:
    obj: dict[str, Any] = {}
    if isinstance(point.value, IntValue):
        obj["asInt"] = point.value.value
    else:
        obj["asDouble"] = _encode_double(point.value.value)
    obj["timeUnixNano"] = point.time_unix_nano
    obj["attributes"] = [
        {"key": attribute.key, "value": {"stringValue": attribute.value}}
        for attribute in point.attributes
    ]
    return obj


def _metric_to_dict(metric: Metric) -> dict[str, Any]:
    return {
        "name": metric.name,
        "unit": metric.unit,
        "description": metric.description,
        "gauge": {
            "dataPoints": [_data_point_to_dict(point) for point in metric.data_points]
        },
    }


def document_to_dict(document: Document) -> dict[str, Any]:
    """Convert a document to its OTLP JSON object form.

    Args:
        document: The assembled document.

    Returns:
        Dict ready for json.dumps, rooted at ``resourceMetrics``.
    """
    return {
        "resourceMetrics": [
            {
                "scopeMetrics": [
                    {"metrics": [_metric_to_dict(metric) for metric in scope.metrics]}
                    for scope in resource.scope_metrics
                ]
            }
            for resource in document.resource_metrics
        ]
    }


def encode_document(document: Document) -> str:
    """Encode a document to an OTLP JSON string.

    Args:
        document: The assembled document.

    Returns:
        Strict JSON text (no NaN or Infinity literals).
    """
    return json.dumps(document_to_dict(document), allow_nan=False)


def _value_from_dict(obj: dict[str, Any]) -> NumberValue:
    has_int = "asInt" in obj
    has_double = "asDouble" in obj
    if has_int == has_double:
        raise EncodingError("data point must have exactly one of asInt or asDouble")
    if has_int:
        return IntValue(_decode_int(obj["asInt"]))
    return DoubleValue(_decode_double(obj["asDouble"]))


def _attribute_from_dict(obj: dict[str, Any]) -> Attribute:
    try:
        return Attribute(key=obj["key"], value=obj["value"]["stringValue"])
    except (KeyError, TypeError) as exc:
        raise EncodingError(f"invalid attribute: {obj!r}") from exc


def _data_point_from_dict(obj: dict[str, Any]) -> DataPoint:
    return DataPoint(
        value=_value_from_dict(obj),
        time_unix_nano=_decode_int(obj.get("timeUnixNano", 0), "timeUnixNano"),
        attributes=tuple(
            _attribute_from_dict(attribute) for attribute in obj.get("attributes") or []
        ),
    )


def _metric_from_dict(obj: dict[str, Any]) -> Metric:
    try:
        points = obj["gauge"]["dataPoints"]
        name = obj["name"]
    except (KeyError, TypeError) as exc:
        raise EncodingError(f"invalid gauge metric: {obj!r}") from exc
    return Metric(
        name=name,
        unit=obj.get("unit", ""),
        description=obj.get("description", ""),
        data_points=tuple(_data_point_from_dict(point) for point in points or []),
    )


def document_from_dict(data: dict[str, Any]) -> Document:
    """Build a document from its OTLP JSON object form.

    Raises:
        EncodingError: If the structure does not match the gauge subset.
    """
    try:
        return Document(
            resource_metrics=tuple(
                ResourceMetrics(
                    scope_metrics=tuple(
                        ScopeMetrics(
                            metrics=tuple(
                                _metric_from_dict(metric)
                                for metric in scope.get("metrics") or []
                            )
                        )
                        for scope in resource.get("scopeMetrics") or []
                    )
                )
                for resource in data.get("resourceMetrics") or []
            )
        )
    except AttributeError as exc:
        raise EncodingError("malformed OTLP JSON document") from exc


def decode_document(text: str) -> Document:
    """Decode an OTLP JSON string into a document.

    Raises:
        EncodingError: If text is not JSON or not a gauge metrics document.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise EncodingError(f"invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise EncodingError("OTLP JSON document must be an object")
    return document_from_dict(data)
