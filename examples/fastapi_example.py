"""Example FastAPI application exposing LVE statistics next to other routes.

Run with:
    uvicorn examples.fastapi_example:app

Endpoints:
    /metrics   - Prometheus text format (one cloudlinux-statistics run per scrape)
    /          - Landing page
    /health    - Liveness probe
"""

from fastapi import FastAPI

from lve_exporter import CloudLinuxStatisticsSource, LveStatsEngine, build_registry
from lve_exporter.adapters.frameworks.fastapi import create_lve_router

engine = LveStatsEngine(CloudLinuxStatisticsSource())

app = FastAPI(title="LVE Exporter Example")
app.include_router(create_lve_router(build_registry(engine)))


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
