# src/docs_kit/observability/base.py

from dataclasses import dataclass, field
from typing import Protocol


class MetricsHook(Protocol):
    """Sink for docs-kit measurements.

    ``AnnotatedSourceParser.parse`` reports parse duration, source line
    count, sections, resolved REFs and orphan CLOSE markers.
    ``CommentRenderer.render`` reports render duration and comment count.
    Implementations forward to whatever backend the caller runs
    (Prometheus, StatsD, logs); docs-kit itself never imports one.
    """

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
    """Default hook for the parser and renderer; discards everything."""

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


@dataclass
class InMemoryMetricsHook:
    """Keeps every measurement in memory.

    Handy in tests and in the CLI's ``--stats`` output.
    """

    latencies: dict[str, list[float]] = field(default_factory=dict)
    counters: dict[str, int] = field(default_factory=dict)
    gauges: dict[str, float] = field(default_factory=dict)

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self.latencies.setdefault(name, []).append(value_ms)

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self.counters[name] = self.counters.get(name, 0) + value

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        self.gauges[name] = value
