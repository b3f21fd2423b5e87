"""Prometheus metrics for monitoring penalty computations and request latency"""

from prometheus_client import Counter, Histogram

# Computation metrics
computation_counter = Counter(
    "penalty_computation_total",
    "Total penalty computations",
    ["outcome"],  # computed | InvalidStartDate | NothingToClear
)

penalty_total_histogram = Histogram(
    "penalty_total_amount",
    "Total penalty charged per computation",
    buckets=[0, 50, 100, 250, 500, 1000, 2500, 5000, 10000],
)

penalty_lines_histogram = Histogram(
    "penalty_lines_per_computation",
    "Dues cleared per computation",
    buckets=[0, 1, 2, 3, 6, 12, 24],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_computation(line_count: int, total_penalty: float) -> None:
    """Record a successful penalty computation"""
    computation_counter.labels(outcome="computed").inc()
    penalty_total_histogram.observe(total_penalty)
    penalty_lines_histogram.observe(line_count)


def record_rejection(reason: str) -> None:
    """Record a computation refused for missing or invalid input"""
    computation_counter.labels(outcome=reason).inc()
