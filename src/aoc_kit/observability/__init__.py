from . import names
from .base import InMemoryMetricsHook, MetricRecord, MetricsHook, NoOpMetricsHook

__all__ = [
    "InMemoryMetricsHook",
    "MetricRecord",
    "MetricsHook",
    "NoOpMetricsHook",
    "names",
]
