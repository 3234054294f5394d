"""prometheus_client bridge for the LVE statistics engine."""

from collections.abc import Iterable, Iterator

from prometheus_client import CollectorRegistry
from prometheus_client.core import GaugeMetricFamily, Metric

from lve_exporter.core.engine import LveStatsEngine
from lve_exporter.core.models import MetricIdentity, MetricSample


def _family(identity: MetricIdentity) -> GaugeMetricFamily:
    return GaugeMetricFamily(
        identity.name, identity.help, labels=list(identity.label_names)
    )


def to_metric_families(
    identities: Iterable[MetricIdentity],
    samples: Iterable[MetricSample],
) -> list[GaugeMetricFamily]:
    """Group samples into one gauge family per identity.

    Families follow the order of `identities`; samples keep their relative
    order inside each family. Samples without a known identity are dropped.

    Args:
        identities: Catalog entries, in exposition order.
        samples: Samples produced by the engine.

    Returns:
        One GaugeMetricFamily per identity, possibly without samples.
    """
    families = {identity.name: (identity, _family(identity)) for identity in identities}
    for sample in samples:
        entry = families.get(sample.name)
        if entry is None:
            continue
        identity, family = entry
        family.add_metric(
            [sample.labels.get(label, "") for label in identity.label_names],
            sample.value,
        )
    return [family for _, family in families.values()]


class LveCollector:
    """Custom collector that runs one engine scrape per collect().

    describe() never touches the statistics source, so registering the
    collector does not run the subprocess.
    """

    def __init__(self, engine: LveStatsEngine) -> None:
        self._engine = engine

    def describe(self) -> Iterator[Metric]:
        for identity in self._engine.describe():
            yield _family(identity)

    def collect(self) -> Iterator[Metric]:
        samples = self._engine.collect()
        yield from to_metric_families(self._engine.describe(), samples)


def build_registry(engine: LveStatsEngine) -> CollectorRegistry:
    """Create a dedicated registry holding only the LVE collector.

    Args:
        engine: Engine serving every scrape of the registry.

    Returns:
        A new CollectorRegistry; the process-wide default registry is not used.
    """
    registry = CollectorRegistry(auto_describe=True)
    registry.register(LveCollector(engine))
    return registry
