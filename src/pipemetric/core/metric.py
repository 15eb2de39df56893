"""The Metric record passed between pipeline stages."""

from collections.abc import Mapping
from datetime import UTC, datetime

from pipemetric.core.hashing import hash_id
from pipemetric.core.models import Field, Tag, ValueKind
from pipemetric.core.normalize import normalize
from pipemetric.core.ports import DeliveryTracker, ReadableMetric
from pipemetric.core.tracking import NOOP_TRACKER

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def _unix_nanos(tm: datetime) -> int:
    # Naive datetimes are taken as UTC
    if tm.tzinfo is None:
        tm = tm.replace(tzinfo=UTC)
    delta = tm - _EPOCH
    return (delta.days * 86_400 + delta.seconds) * 1_000_000_000 + delta.microseconds * 1_000


class Metric:
    """A named, timestamped measurement with tags and fields.

    Tags are kept sorted ascending by key. Fields keep first-insertion order
    and hold normalized values: a float, or None when the input had no
    numeric form.

    A Metric has no internal locking. Concurrent mutation must be
    synchronized by the caller; use copy() or from_metric() to hand an
    independent record to another stage.

    Example:
        ```python
        from datetime import UTC, datetime
        from pipemetric import Metric

        m = Metric("cpu", {"host": "a"}, {"usage": "12.5"}, datetime.now(UTC))
        m.get_field("usage")  # (12.5, True)
        ```
    """

    def __init__(
        self,
        name: str,
        tags: Mapping[str, str] | None,
        fields: Mapping[str, object] | None,
        tm: datetime,
        tp: ValueKind = ValueKind.UNTYPED,
    ) -> None:
        """Build a metric from raw maps.

        Never raises for bad field values: fields whose value cannot be
        normalized are left out of the record.

        Args:
            name: Measurement name.
            tags: Tag mapping; sorted by key on construction.
            fields: Raw field values; normalized on construction.
            tm: Measurement time.
            tp: Value kind (default: ValueKind.UNTYPED).
        """
        self._name = name
        self._tags: list[Tag] = []
        self._fields: list[Field] = []
        self._time = tm
        self._type = tp
        self._aggregate = False
        self._tracker: DeliveryTracker = NOOP_TRACKER

        if tags:
            self._tags = sorted(
                (Tag(key=k, value=v) for k, v in tags.items()), key=lambda t: t.key
            )

        if fields:
            for key, raw in fields.items():
                value = normalize(raw)
                if value is None:
                    continue
                self.add_field(key, value)

    @classmethod
    def from_metric(cls, other: ReadableMetric) -> "Metric":
        """Deep-copy any readable metric, discarding its tracking state.

        Args:
            other: Source record.

        Returns:
            An independent Metric with the default no-op tracker.
        """
        m = cls.__new__(cls)
        m._name = other.name()
        m._tags = [Tag(key=t.key, value=t.value) for t in other.tag_list()]
        m._fields = [Field(key=f.key, value=f.value) for f in other.field_list()]
        m._time = other.time()
        m._type = other.type()
        m._aggregate = other.is_aggregate()
        m._tracker = NOOP_TRACKER
        return m

    def __str__(self) -> str:
        return f"{self._name} {self.tags()} {self.fields()} {_unix_nanos(self._time)}"

    def __repr__(self) -> str:
        return (
            f"Metric(name={self._name!r}, tags={self.tags()!r}, "
            f"fields={self.fields()!r}, time={self._time!r}, type={self._type})"
        )

    # Read surface

    def name(self) -> str:
        return self._name

    def tags(self) -> dict[str, str]:
        return {tag.key: tag.value for tag in self._tags}

    def tag_list(self) -> list[Tag]:
        """Return the live tag list, sorted ascending by key."""
        return self._tags

    def fields(self) -> dict[str, float | None]:
        return {f.key: f.value for f in self._fields}

    def field_list(self) -> list[Field]:
        """Return the live field list in first-insertion order."""
        return self._fields

    def time(self) -> datetime:
        return self._time

    def type(self) -> ValueKind:
        return self._type

    def is_aggregate(self) -> bool:
        return self._aggregate

    def hash_id(self) -> int:
        """Return the 64-bit identity hash over name and tags."""
        return hash_id(self._name, self._tags)

    # Name

    def set_name(self, name: str) -> None:
        self._name = name

    def add_prefix(self, prefix: str) -> None:
        self._name = prefix + self._name

    def add_suffix(self, suffix: str) -> None:
        self._name = self._name + suffix

    # Tags

    def add_tag(self, key: str, value: str) -> None:
        """Set a tag, overwriting an existing key or inserting in key order."""
        for i, tag in enumerate(self._tags):
            if key > tag.key:
                continue

            if key == tag.key:
                tag.value = value
                return

            self._tags.insert(i, Tag(key=key, value=value))
            return

        self._tags.append(Tag(key=key, value=value))

    def has_tag(self, key: str) -> bool:
        return any(tag.key == key for tag in self._tags)

    def get_tag(self, key: str) -> tuple[str, bool]:
        for tag in self._tags:
            if tag.key == key:
                return tag.value, True
        return "", False

    def remove_tag(self, key: str) -> None:
        for i, tag in enumerate(self._tags):
            if tag.key == key:
                del self._tags[i]
                return

    # Fields

    def add_field(self, key: str, value: object) -> None:
        """Set a field, replacing an existing key in place or appending.

        Unlike construction, an unconvertible value is still stored: the key
        is kept with a None value.
        """
        normalized = normalize(value)
        for i, f in enumerate(self._fields):
            if f.key == key:
                self._fields[i] = Field(key=key, value=normalized)
                return
        self._fields.append(Field(key=key, value=normalized))

    def has_field(self, key: str) -> bool:
        return any(f.key == key for f in self._fields)

    def get_field(self, key: str) -> tuple[float | None, bool]:
        for f in self._fields:
            if f.key == key:
                return f.value, True
        return None, False

    def remove_field(self, key: str) -> None:
        for i, f in enumerate(self._fields):
            if f.key == key:
                del self._fields[i]
                return

    # Time and flags

    def set_time(self, tm: datetime) -> None:
        self._time = tm

    def set_aggregate(self, aggregate: bool) -> None:
        # Always marks the metric as aggregated; the argument is ignored.
        self._aggregate = True

    def copy(self) -> "Metric":
        """Return a deep copy sharing no tags or fields with this metric.

        The copy keeps the same delivery tracker.
        """
        m = Metric.from_metric(self)
        m._tracker = self._tracker
        return m

    # Delivery tracking

    @property
    def tracker(self) -> DeliveryTracker:
        return self._tracker

    def with_tracker(self, tracker: DeliveryTracker) -> "Metric":
        """Attach a delivery tracker and return this metric."""
        self._tracker = tracker
        return self

    def accept(self) -> None:
        self._tracker.accept(self)

    def reject(self) -> None:
        self._tracker.reject(self)

    def drop(self) -> None:
        self._tracker.drop(self)
