"""In-memory hand-off storage for metrics."""

from collections.abc import AsyncIterable

from pipemetric.core.metric import Metric
from pipemetric.core.ports import MetricPort


class InMemoryMetricStorage:
    """In-memory implementation of MetricStoragePort.

    Stores an independent copy of every written metric in a list and
    acknowledges the original. Suitable for testing and for stages that
    batch records before passing them on.
    """

    def __init__(self) -> None:
        self._metrics: list[Metric] = []

    async def write(self, metric: MetricPort) -> None:
        """Store a copy of the metric and accept the original."""
        self._metrics.append(Metric.from_metric(metric))
        metric.accept()

    async def scrape(self) -> AsyncIterable[Metric]:
        """Yield all stored metrics in write order."""
        for metric in self._metrics:
            yield metric

    def __len__(self) -> int:
        return len(self._metrics)
