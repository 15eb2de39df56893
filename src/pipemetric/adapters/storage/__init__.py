"""Storage adapters implementing core ports."""

from pipemetric.adapters.storage.in_memory import InMemoryMetricStorage
from pipemetric.adapters.storage.ring_buffer import RingBufferMetricStorage

__all__ = [
    "InMemoryMetricStorage",
    "RingBufferMetricStorage",
]
