"""Default delivery tracking.

Metrics delegate accept/reject/drop to an attached DeliveryTracker. A
metric without a tracker of its own uses NOOP_TRACKER, so acknowledging it
has no observable effect.
"""

from pipemetric.core.ports import ReadableMetric


class NoopTracker:
    """DeliveryTracker that ignores every notification."""

    def accept(self, metric: ReadableMetric) -> None:
        pass

    def reject(self, metric: ReadableMetric) -> None:
        pass

    def drop(self, metric: ReadableMetric) -> None:
        pass

    def __repr__(self) -> str:
        return "NoopTracker()"


NOOP_TRACKER = NoopTracker()
