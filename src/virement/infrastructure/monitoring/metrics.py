"""
Prometheus metrics collection.
"""

from prometheus_client import Counter, Histogram

# ============================================================
# HTTP Metrics
# ============================================================

http_requests_total = Counter(
    "virement_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "virement_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)

# ============================================================
# Transfer Action Metrics
# ============================================================

transfer_actions_total = Counter(
    "virement_transfer_actions_total",
    "Transfer action outcomes",
    ["outcome"],
)

# ============================================================
# Ledger Metrics
# ============================================================

ledger_calls_total = Counter(
    "virement_ledger_calls_total",
    "Total ledger RPC calls",
    ["method", "status"],
)

ledger_call_duration_seconds = Histogram(
    "virement_ledger_call_duration_seconds",
    "Ledger RPC call duration in seconds",
    ["method"],
    buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)
