"""
Prometheus metrics collection.
"""

from prometheus_client import Counter, Gauge, Histogram

# ============================================================
# HTTP Metrics
# ============================================================

http_requests_total = Counter(
    "abonnement_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "abonnement_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

http_errors_total = Counter(
    "abonnement_http_errors_total",
    "Total HTTP errors",
    ["method", "endpoint", "error_type"],
)

# ============================================================
# Database Metrics
# ============================================================

db_queries_total = Counter(
    "abonnement_db_queries_total",
    "Total database queries",
    ["operation", "outcome"],
)

db_query_duration_seconds = Histogram(
    "abonnement_db_query_duration_seconds",
    "Database query duration in seconds",
    ["operation"],
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
)

db_pool_size = Gauge(
    "abonnement_db_pool_size",
    "Database connection pool size",
)

db_pool_checked_out = Gauge(
    "abonnement_db_pool_checked_out",
    "Database connections currently checked out",
)

# ============================================================
# Business Metrics
# ============================================================

subscriptions_mutations_total = Counter(
    "abonnement_subscriptions_mutations_total",
    "Successful subscription mutations by operation",
    ["operation"],
)
