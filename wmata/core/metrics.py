from __future__ import annotations

from prometheus_client import Counter, Histogram

WMATA_REQUESTS = Counter(
    "wmata_requests_total",
    "Outbound WMATA API requests.",
    labelnames=("endpoint", "result"),
)
WMATA_REQUEST_LATENCY = Histogram(
    "wmata_request_seconds",
    "Latency of outbound WMATA API requests.",
    labelnames=("endpoint",),
)


def observe_wmata_request(
    endpoint: str, result: str, duration_seconds: float
) -> None:
    """Record WMATA request result and latency."""
    WMATA_REQUESTS.labels(endpoint=endpoint, result=result).inc()
    WMATA_REQUEST_LATENCY.labels(endpoint=endpoint).observe(duration_seconds)
