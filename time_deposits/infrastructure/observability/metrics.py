"""Prometheus metrics for monitoring interest accrual runs"""

from decimal import Decimal

from prometheus_client import Counter, Histogram

# Accrual metrics
accrual_counter = Counter(
    "time_deposit_accruals_total",
    "Deposits processed by the accrual engine",
    ["plan_type", "outcome"],  # accrued | skipped
)

interest_cents_counter = Counter(
    "time_deposit_interest_cents_total",
    "Interest credited to balances, in cents",
    ["plan_type"],
)

balance_update_runs_counter = Counter(
    "balance_update_runs_total",
    "Balance update runs",
    ["status"],  # success | failure
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_accrual(plan_type: str, interest: Decimal) -> None:
    """Record one deposit's accrual outcome"""
    if interest > 0:
        accrual_counter.labels(plan_type=plan_type, outcome="accrued").inc()
        interest_cents_counter.labels(plan_type=plan_type).inc(int(interest * 100))
    else:
        accrual_counter.labels(plan_type=plan_type, outcome="skipped").inc()
