"""Prometheus metrics for gateway calls"""

from typing import Optional

from prometheus_client import Counter, Histogram

# Outcome of every exchange with the gateway
gateway_request_counter = Counter(
    "one_two_pay_requests_total",
    "Total requests sent to the payout gateway",
    ["endpoint", "outcome"],  # success | gateway_error | malformed | transport_error
)

gateway_status_counter = Counter(
    "one_two_pay_status_codes_total",
    "Status codes returned by the payout gateway",
    ["endpoint", "status"],
)

gateway_latency_histogram = Histogram(
    "one_two_pay_request_latency_seconds",
    "Payout gateway response time",
    ["endpoint"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)


def record_exchange(endpoint: str, outcome: str, status_code: Optional[int]) -> None:
    """Record the outcome and, when the gateway sent one, the status code"""
    gateway_request_counter.labels(endpoint=endpoint, outcome=outcome).inc()
    if status_code is not None:
        gateway_status_counter.labels(endpoint=endpoint, status=str(status_code)).inc()
