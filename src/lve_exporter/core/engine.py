"""Acquisition and mapping of LVE statistics into gauge samples.

Each call to collect() runs the statistics source once, decodes the output
and flattens every user's readings into one sample per catalog entry.
Nothing is cached between calls.
"""

from lve_exporter.core.catalog import USERNAME_LABEL, MetricCatalog, build_catalog
from lve_exporter.core.encoding.lvestats import decode_snapshot
from lve_exporter.core.errors import DecodeFailure
from lve_exporter.core.logs import get_logger
from lve_exporter.core.metrics import gauge
from lve_exporter.core.models import MetricIdentity, MetricSample, Snapshot
from lve_exporter.core.ports import StatsSourcePort

logger = get_logger(__name__)


class LveStatsEngine:
    """Turns one statistics acquisition into a list of gauge samples.

    The engine holds no per-scrape state, so one instance may serve
    concurrent scrapes.
    """

    def __init__(
        self,
        source: StatsSourcePort,
        catalog: MetricCatalog | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            source: Adapter implementing StatsSourcePort.
            catalog: Metric catalog (default: build_catalog()).
        """
        self._source = source
        self._catalog = catalog if catalog is not None else build_catalog()

    @property
    def catalog(self) -> MetricCatalog:
        return self._catalog

    def describe(self) -> list[MetricIdentity]:
        """Return the fixed metric identities in emission order."""
        return list(self._catalog)

    def acquire(self) -> Snapshot:
        """Fetch and decode one snapshot.

        Output that cannot be decoded is logged and replaced by an empty
        Snapshot.
        """
        raw = self._source.fetch()
        try:
            return decode_snapshot(raw)
        except DecodeFailure as e:
            logger.warning(
                "Discarding undecodable statistics output: %s",
                e,
                extra={"payload_size": e.payload_size},
            )
            return Snapshot()

    def samples_for(self, snapshot: Snapshot) -> list[MetricSample]:
        """Flatten a snapshot into gauge samples.

        Users are visited in source order; for each user one sample is
        emitted per catalog entry, in catalog order. Sample timestamps are
        the snapshot's capture time.

        Args:
            snapshot: Decoded statistics.

        Returns:
            len(snapshot.users) * len(catalog) samples.
        """
        samples: list[MetricSample] = []
        for user in snapshot.users:
            labels = {USERNAME_LABEL: user.username}
            for identity in self._catalog:
                reading = user.category(identity.category).reading(identity.resource)
                samples.append(
                    gauge(
                        identity,
                        reading.lve,
                        labels=dict(labels),
                        timestamp=snapshot.timestamp,
                    )
                )
        return samples

    def collect(self) -> list[MetricSample]:
        """Run one full acquisition and return its samples."""
        snapshot = self.acquire()
        samples = self.samples_for(snapshot)
        logger.debug(
            "Collected LVE statistics",
            extra={"users": len(snapshot.users), "samples": len(samples)},
        )
        return samples
