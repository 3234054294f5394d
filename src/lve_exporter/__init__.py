"""Prometheus exporter for CloudLinux LVE statistics."""

from lve_exporter.adapters.prometheus import LveCollector, build_registry
from lve_exporter.adapters.source.cloudlinux import CloudLinuxStatisticsSource
from lve_exporter.adapters.source.static import StaticStatsSource
from lve_exporter.core.catalog import MetricCatalog, build_catalog
from lve_exporter.core.encoding.lvestats import decode_snapshot
from lve_exporter.core.engine import LveStatsEngine
from lve_exporter.core.errors import (
    ConfigError,
    DecodeFailure,
    LveExporterError,
    SubprocessFailure,
)
from lve_exporter.core.logs import configure_logging, get_logger
from lve_exporter.core.models import (
    MeasurementSet,
    MetricIdentity,
    MetricSample,
    PrincipalRecord,
    ResourceReading,
    Snapshot,
)

__version__ = "1.0.0"

__all__ = [
    "CloudLinuxStatisticsSource",
    "ConfigError",
    "DecodeFailure",
    "LveCollector",
    "LveExporterError",
    "LveStatsEngine",
    "MeasurementSet",
    "MetricCatalog",
    "MetricIdentity",
    "MetricSample",
    "PrincipalRecord",
    "ResourceReading",
    "Snapshot",
    "StaticStatsSource",
    "SubprocessFailure",
    "__version__",
    "build_catalog",
    "build_registry",
    "configure_logging",
    "decode_snapshot",
    "get_logger",
]
