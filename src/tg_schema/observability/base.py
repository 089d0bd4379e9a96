from typing import Protocol


class MetricsHook(Protocol):
    """Receives parse timings and counters from every pipeline stage.

    Names come from `tg_schema.observability.names`. Section timings carry
    a ``section`` label, orphan counts a ``tag`` label.
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


class NoOpMetricsHook:
    """Default hook for callers that do not collect metrics."""

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass
