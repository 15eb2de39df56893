"""Port interfaces for metric records and the stages that handle them.

These protocols define the contracts pipeline stages program against. The
core Metric satisfies all record ports; stages and adapters depend only on
these interfaces, not on the concrete class.
"""

from collections.abc import AsyncIterable
from datetime import datetime
from typing import Protocol, runtime_checkable

from pipemetric.core.models import Field, Tag, ValueKind


@runtime_checkable
class DeliveryTracker(Protocol):
    """Port for delivery acknowledgment.

    A tracker is told the fate of a metric once a stage has finished with
    it. Examples: NoopTracker, LoggingTracker.
    """

    def accept(self, metric: "ReadableMetric") -> None:
        """The metric was delivered successfully."""
        ...

    def reject(self, metric: "ReadableMetric") -> None:
        """The metric could not be delivered."""
        ...

    def drop(self, metric: "ReadableMetric") -> None:
        """The metric was discarded without a delivery attempt."""
        ...


@runtime_checkable
class ReadableMetric(Protocol):
    """Read surface of a metric record.

    Anything implementing this protocol can be copied into a Metric with
    Metric.from_metric().
    """

    def name(self) -> str: ...

    def tags(self) -> dict[str, str]: ...

    def tag_list(self) -> list[Tag]:
        """Tags sorted ascending by key."""
        ...

    def fields(self) -> dict[str, float | None]: ...

    def field_list(self) -> list[Field]:
        """Fields in first-insertion order."""
        ...

    def time(self) -> datetime: ...

    def type(self) -> ValueKind: ...

    def is_aggregate(self) -> bool: ...

    def hash_id(self) -> int: ...


@runtime_checkable
class MetricPort(ReadableMetric, Protocol):
    """Full record surface: read, mutate and acknowledge."""

    def set_name(self, name: str) -> None: ...

    def add_prefix(self, prefix: str) -> None: ...

    def add_suffix(self, suffix: str) -> None: ...

    def add_tag(self, key: str, value: str) -> None: ...

    def has_tag(self, key: str) -> bool: ...

    def get_tag(self, key: str) -> tuple[str, bool]: ...

    def remove_tag(self, key: str) -> None: ...

    def add_field(self, key: str, value: object) -> None: ...

    def has_field(self, key: str) -> bool: ...

    def get_field(self, key: str) -> tuple[float | None, bool]: ...

    def remove_field(self, key: str) -> None: ...

    def set_time(self, tm: datetime) -> None: ...

    def set_aggregate(self, aggregate: bool) -> None: ...

    def copy(self) -> "MetricPort": ...

    def accept(self) -> None: ...

    def reject(self) -> None: ...

    def drop(self) -> None: ...


@runtime_checkable
class MetricStoragePort(Protocol):
    """Port for hand-off buffers between pipeline stages.

    Examples: InMemoryMetricStorage, RingBufferMetricStorage.
    """

    async def write(self, metric: MetricPort) -> None:
        """Take ownership of a metric."""
        ...

    def scrape(self) -> AsyncIterable[MetricPort]:
        """Yield all buffered metrics, oldest first."""
        ...
