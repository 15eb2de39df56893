"""Delivery tracker adapter for Python's logging module.

This adapter reports the fate of each acknowledged metric through the
standard library logging module, so delivery outcomes show up wherever the
application already routes its logs.
"""

import logging

from pipemetric.core.ports import ReadableMetric

logger = logging.getLogger(__name__)


class LoggingTracker:
    """DeliveryTracker that writes one log record per acknowledgment.

    Example:
        ```python
        from pipemetric import LoggingTracker, Metric

        metric = Metric("cpu", {}, {"usage": 1.0}, now).with_tracker(LoggingTracker())
        metric.reject()  # logs "metric rejected: cpu" at WARNING
        ```
    """

    def __init__(
        self,
        target: logging.Logger | None = None,
        accept_level: int = logging.DEBUG,
        reject_level: int = logging.WARNING,
        drop_level: int = logging.INFO,
    ) -> None:
        """Initialize the tracker.

        Args:
            target: Logger to write to. Defaults to this module's logger.
            accept_level: Level for accepted metrics (default: DEBUG).
            reject_level: Level for rejected metrics (default: WARNING).
            drop_level: Level for dropped metrics (default: INFO).
        """
        self._logger = target or logger
        self._levels = {
            "accepted": accept_level,
            "rejected": reject_level,
            "dropped": drop_level,
        }

    def accept(self, metric: ReadableMetric) -> None:
        self._emit("accepted", metric)

    def reject(self, metric: ReadableMetric) -> None:
        self._emit("rejected", metric)

    def drop(self, metric: ReadableMetric) -> None:
        self._emit("dropped", metric)

    def _emit(self, outcome: str, metric: ReadableMetric) -> None:
        level = self._levels[outcome]
        if not self._logger.isEnabledFor(level):
            return
        self._logger.log(
            level,
            "metric %s: %s",
            outcome,
            metric.name(),
            extra={
                "metric_name": metric.name(),
                "metric_hash_id": metric.hash_id(),
                "outcome": outcome,
            },
        )
