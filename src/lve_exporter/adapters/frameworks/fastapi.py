"""FastAPI adapter for the LVE metrics endpoint."""

from fastapi import APIRouter, Response
from fastapi.responses import HTMLResponse
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest

from lve_exporter.adapters.frameworks.asgi import LANDING_PAGE, METRICS_PATH


def create_lve_router(registry: CollectorRegistry) -> APIRouter:
    """Create a FastAPI router with the metrics and landing page routes.

    Args:
        registry: Registry rendered on every request to /metrics.

    Returns:
        APIRouter with "/" and "/metrics" configured.
    """
    router = APIRouter()

    @router.get(METRICS_PATH, include_in_schema=False)
    def get_metrics() -> Response:
        """Return metrics in Prometheus text format."""
        return Response(content=generate_latest(registry), media_type=CONTENT_TYPE_LATEST)

    @router.get("/", include_in_schema=False)
    def get_landing_page() -> HTMLResponse:
        return HTMLResponse(LANDING_PAGE)

    return router
