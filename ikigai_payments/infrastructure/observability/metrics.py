"""Prometheus metrics for scheduled payments, form validation and payment API health"""

from typing import Iterable

from prometheus_client import Counter, Histogram

# Payment metrics
payments_scheduled_counter = Counter(
    "ikigai_payments_scheduled_total",
    "Payments confirmed and added to history",
    ["schedule"],  # one_time | recurring
)

validation_failure_counter = Counter(
    "ikigai_payment_validation_failures_total",
    "Payment form field errors",
    ["field"],
)

history_mutation_counter = Counter(
    "ikigai_payment_history_mutations_total",
    "Edit/cancel/settle operations on payment history",
    ["operation", "outcome"],  # applied | ignored
)

# Payment API metrics
payment_api_latency_histogram = Histogram(
    "payment_api_latency_seconds",
    "Payment API response time",
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

payment_api_failures_counter = Counter(
    "payment_api_failures_total",
    "Failed payment submissions",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_payment_scheduled(is_recurring: bool) -> None:
    schedule = "recurring" if is_recurring else "one_time"
    payments_scheduled_counter.labels(schedule=schedule).inc()


def record_validation_failures(fields: Iterable[str]) -> None:
    """One increment per failing field"""
    for field in fields:
        validation_failure_counter.labels(field=field).inc()


def record_history_mutation(operation: str, applied: bool) -> None:
    outcome = "applied" if applied else "ignored"
    history_mutation_counter.labels(operation=operation, outcome=outcome).inc()
