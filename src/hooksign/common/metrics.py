"""Prometheus metrics for webhook verification."""

from prometheus_client import CONTENT_TYPE_LATEST, Counter, generate_latest
from starlette.requests import Request
from starlette.responses import Response

# === Counters ===

WEBHOOK_VERIFICATIONS_TOTAL = Counter(
    "hooksign_webhook_verifications_total",
    "Total webhook signature verifications",
    ["outcome"],  # outcome: valid, missing_signature, invalid_header, invalid_timestamp, invalid_signature, invalid_json, misconfigured
)


# === Helper Functions ===


def record_verification(outcome: str) -> None:
    """Record a webhook verification outcome."""
    WEBHOOK_VERIFICATIONS_TOTAL.labels(outcome=outcome).inc()


# === HTTP Endpoint ===


async def metrics_endpoint(_request: Request) -> Response:
    """Expose the default registry in Prometheus text format."""
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
