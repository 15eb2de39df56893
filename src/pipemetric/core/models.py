"""Core domain models for metric records."""

from dataclasses import dataclass
from enum import Enum


class ValueKind(Enum):
    """Semantic type of a measurement.

    Carried by a Metric for downstream stages; the record itself never
    interprets it.
    """

    UNTYPED = 0
    COUNTER = 1
    GAUGE = 2
    SUMMARY = 3
    HISTOGRAM = 4


@dataclass
class Tag:
    """A string dimension attached to a metric.

    Attributes:
        key: Tag key (unique within a metric).
        value: Tag value.
    """

    key: str
    value: str


@dataclass
class Field:
    """A numeric measurement datum attached to a metric.

    Attributes:
        key: Field key (unique within a metric).
        value: Normalized value, or None when the input was unconvertible.
    """

    key: str
    value: float | None
