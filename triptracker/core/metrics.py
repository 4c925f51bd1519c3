"""
Metrics instrumentation for observability.
The resource server exposes these in Prometheus format at /metrics.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Outgoing resource API calls
api_requests = Counter(
    'triptracker_api_requests_total',
    'Resource API requests issued by the client',
    ['method', 'outcome']  # outcome: status code or "transport_error"
)

api_latency = Histogram(
    'triptracker_api_latency_seconds',
    'Resource API request latency',
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0]
)

# Session/auth
auth_attempts = Counter(
    'triptracker_auth_attempts_total',
    'Register/login attempts',
    ['operation', 'result']  # register/login, success/<error code>
)

# Trip collection
trip_mutations = Counter(
    'triptracker_trip_mutations_total',
    'Trip mutations round-tripped through the resource API',
    ['operation', 'result']  # add/update/delete/..., success/failure
)


def metrics_endpoint() -> Response:
    """
    Prometheus metrics endpoint.

    Usage:
        @app.get("/metrics")
        def metrics():
            return metrics_endpoint()
    """
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_api_request(method: str, outcome: str, duration: float):
    """Record one transport round trip."""
    api_requests.labels(method=method, outcome=outcome).inc()
    api_latency.observe(duration)


def record_auth_attempt(operation: str, result: str):
    """Record auth attempt. Result: success or an AuthError value"""
    auth_attempts.labels(operation=operation, result=result).inc()


def record_trip_mutation(operation: str, success: bool):
    result = "success" if success else "failure"
    trip_mutations.labels(operation=operation, result=result).inc()
