"""Wiring of catalog, engine, registry and HTTP front."""

from lve_exporter.adapters.frameworks.asgi import (
    AccessLogMiddleware,
    ASGIApp,
    create_asgi_app,
)
from lve_exporter.adapters.prometheus import build_registry
from lve_exporter.adapters.source.cloudlinux import CloudLinuxStatisticsSource
from lve_exporter.core.catalog import MetricCatalog, build_catalog
from lve_exporter.core.engine import LveStatsEngine
from lve_exporter.core.ports import StatsSourcePort


def create_app(
    source: StatsSourcePort | None = None,
    catalog: MetricCatalog | None = None,
) -> ASGIApp:
    """Build the exporter's ASGI application.

    Args:
        source: Statistics source (default: CloudLinuxStatisticsSource()).
        catalog: Metric catalog (default: build_catalog()).

    Returns:
        ASGI app serving /metrics and the landing page, wrapped in
        access logging.
    """
    engine = LveStatsEngine(
        source if source is not None else CloudLinuxStatisticsSource(),
        catalog if catalog is not None else build_catalog(),
    )
    return AccessLogMiddleware(create_asgi_app(build_registry(engine)))
