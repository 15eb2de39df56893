"""Ring buffer hand-off storage for metrics.

Provides bounded in-memory storage that automatically evicts the oldest
metric when the buffer is full. Useful for stages that need predictable
memory usage under bursty input.
"""

import logging
from collections import deque
from collections.abc import AsyncIterable

from pipemetric.core.ports import MetricPort

logger = logging.getLogger(__name__)


class RingBufferMetricStorage:
    """Ring buffer implementation of MetricStoragePort.

    Stores metric copies in a fixed-size circular buffer. Copies keep the
    delivery tracker of the written metric and are left unacknowledged for
    the consumer to accept or reject after scraping. When the buffer is
    full, the oldest metric is evicted and dropped.

    Args:
        max_size: Maximum number of metrics to store.

    Raises:
        ValueError: If max_size is less than 1.
    """

    def __init__(self, max_size: int) -> None:
        if max_size < 1:
            raise ValueError(f"max_size must be >= 1, got {max_size}")
        self._buffer: deque[MetricPort] = deque()
        self._max_size = max_size

    async def write(self, metric: MetricPort) -> None:
        """Store a copy of the metric, evicting the oldest if full."""
        if len(self._buffer) >= self._max_size:
            evicted = self._buffer.popleft()
            logger.debug(
                "ring buffer full, evicting metric %s",
                evicted.name(),
                extra={"metric_name": evicted.name(), "max_size": self._max_size},
            )
            evicted.drop()
        self._buffer.append(metric.copy())

    async def scrape(self) -> AsyncIterable[MetricPort]:
        """Yield buffered metrics, oldest first."""
        for metric in self._buffer:
            yield metric

    def __len__(self) -> int:
        return len(self._buffer)
