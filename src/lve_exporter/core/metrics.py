"""Metric helper functions for creating MetricSample objects."""

import time

from lve_exporter.core.models import MetricIdentity, MetricSample


def gauge(
    identity: MetricIdentity,
    value: float,
    labels: dict[str, str] | None = None,
    timestamp: float | None = None,
) -> MetricSample:
    """Create a gauge metric sample for a catalog entry.

    Args:
        identity: Catalog entry the sample belongs to
        value: Current gauge value
        labels: Optional dimension labels
        timestamp: Sample time (default: now)

    Returns:
        MetricSample named after the identity
    """
    return MetricSample(
        name=identity.name,
        timestamp=time.time() if timestamp is None else timestamp,
        value=float(value),
        labels=labels or {},
        identity=identity,
    )
