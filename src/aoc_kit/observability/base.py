from dataclasses import dataclass, field
from typing import Literal, Protocol

MetricKind = Literal["latency", "counter", "gauge"]


class MetricsHook(Protocol):
    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def record_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        pass


@dataclass(frozen=True)
class MetricRecord:
    kind: MetricKind
    name: str
    value: float
    labels: dict[str, str] = field(default_factory=dict)


class InMemoryMetricsHook:
    """
    Keeps every recorded metric in call order.

    Useful for tests and for dumping a run summary from the CLI.
    """

    def __init__(self) -> None:
        self.records: list[MetricRecord] = []

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self.records.append(MetricRecord("latency", name, value_ms, dict(labels or {})))

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self.records.append(MetricRecord("counter", name, value, dict(labels or {})))

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        self.records.append(MetricRecord("gauge", name, value, dict(labels or {})))

    def named(self, name: str) -> list[MetricRecord]:
        return [r for r in self.records if r.name == name]

    def total(self, name: str) -> float:
        """Sum of all counter increments recorded under `name`."""
        return sum(r.value for r in self.named(name) if r.kind == "counter")
