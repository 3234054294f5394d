"""Statistics source adapters."""

from lve_exporter.adapters.source.cloudlinux import (
    DEFAULT_COMMAND,
    CloudLinuxStatisticsSource,
)
from lve_exporter.adapters.source.static import StaticStatsSource

__all__ = [
    "DEFAULT_COMMAND",
    "CloudLinuxStatisticsSource",
    "StaticStatsSource",
]
