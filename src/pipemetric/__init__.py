"""pipemetric: the metric record passed between telemetry pipeline stages."""

from pipemetric.adapters.logging import LoggingTracker
from pipemetric.adapters.storage import InMemoryMetricStorage, RingBufferMetricStorage
from pipemetric.core.hashing import fnv1a_64, hash_id
from pipemetric.core.metric import Metric
from pipemetric.core.models import Field, Tag, ValueKind
from pipemetric.core.normalize import normalize, parse_float
from pipemetric.core.ports import (
    DeliveryTracker,
    MetricPort,
    MetricStoragePort,
    ReadableMetric,
)
from pipemetric.core.tracking import NOOP_TRACKER, NoopTracker

__all__ = [
    "NOOP_TRACKER",
    "DeliveryTracker",
    "Field",
    "InMemoryMetricStorage",
    "LoggingTracker",
    "Metric",
    "MetricPort",
    "MetricStoragePort",
    "NoopTracker",
    "ReadableMetric",
    "RingBufferMetricStorage",
    "Tag",
    "ValueKind",
    "fnv1a_64",
    "hash_id",
    "normalize",
    "parse_float",
]
