"""Shared test fixtures for all test modules."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

import pytest

from pipemetric.core.metric import Metric
from pipemetric.core.ports import ReadableMetric

# 2024-01-01T00:00:00Z
FIXED_TIME = datetime(2024, 1, 1, tzinfo=UTC)
FIXED_TIME_NS = 1_704_067_200_000_000_000


@dataclass
class RecordingTracker:
    """DeliveryTracker that records every notification it receives."""

    events: list[tuple[str, str]] = field(default_factory=list)

    def accept(self, metric: ReadableMetric) -> None:
        self.events.append(("accept", metric.name()))

    def reject(self, metric: ReadableMetric) -> None:
        self.events.append(("reject", metric.name()))

    def drop(self, metric: ReadableMetric) -> None:
        self.events.append(("drop", metric.name()))


@pytest.fixture
def fixed_time() -> datetime:
    """Provide a fixed, timezone-aware measurement time."""
    return FIXED_TIME


@pytest.fixture
def make_metric():
    """Factory fixture for creating metrics with sensible defaults.

    Usage:
        def test_something(make_metric):
            m = make_metric(tags={"host": "a"}, fields={"value": 1})
    """

    def _make(
        name: str = "cpu",
        tags: dict[str, str] | None = None,
        fields: dict[str, object] | None = None,
        tm: datetime = FIXED_TIME,
        **kwargs,
    ) -> Metric:
        return Metric(name, tags, fields, tm, **kwargs)

    return _make


@pytest.fixture
def recording_tracker() -> RecordingTracker:
    """Fixture providing an empty RecordingTracker."""
    return RecordingTracker()
