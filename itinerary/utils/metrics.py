"""Prometheus metrics for engine operations."""

from prometheus_client import Counter, Histogram

# Engine operation metrics
engine_latency_ms = Histogram(
    "itinerary_engine_latency_ms",
    "Engine operation latency in milliseconds",
    ["operation", "outcome"],
    buckets=[0.1, 0.5, 1, 5, 10, 50, 100, 500],
)

sequence_violations_total = Counter(
    "itinerary_sequence_violations_total",
    "Total rejected destination sequences",
    ["code"],
)

activity_conflicts_total = Counter(
    "itinerary_activity_conflicts_total",
    "Total activities found in a scheduling conflict",
)

duplicate_days_total = Counter(
    "itinerary_duplicate_days_total",
    "Total day records classified as duplicates",
)


class PrometheusEngineMetrics:
    """Prometheus-based engine metrics implementation."""

    def record_latency(self, operation: str, outcome: str, latency_ms: float) -> None:
        """Record operation latency."""
        engine_latency_ms.labels(operation=operation, outcome=outcome).observe(latency_ms)

    def inc_violation(self, code: str) -> None:
        """Increment rejected sequence counter."""
        sequence_violations_total.labels(code=code).inc()

    def inc_conflicts(self, count: int) -> None:
        """Add conflicting activities."""
        if count:
            activity_conflicts_total.inc(count)

    def inc_duplicates(self, count: int) -> None:
        """Add duplicate day records."""
        if count:
            duplicate_days_total.inc(count)
