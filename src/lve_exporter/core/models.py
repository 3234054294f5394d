"""Core domain models for LVE statistics and the metrics derived from them."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ResourceReading:
    """A single reading for one resource dimension.

    Attributes:
        lve: Value measured in the LVE scope.
    """

    lve: float = 0.0


@dataclass(frozen=True)
class MeasurementSet:
    """Readings for the seven tracked resource dimensions.

    Attributes:
        cpu: CPU speed.
        ep: Entry processes.
        vmem: Virtual memory.
        pmem: Physical memory.
        nproc: Number of processes.
        io: IO throughput.
        iops: IO operations per second.
    """

    cpu: ResourceReading = field(default_factory=ResourceReading)
    ep: ResourceReading = field(default_factory=ResourceReading)
    vmem: ResourceReading = field(default_factory=ResourceReading)
    pmem: ResourceReading = field(default_factory=ResourceReading)
    nproc: ResourceReading = field(default_factory=ResourceReading)
    io: ResourceReading = field(default_factory=ResourceReading)
    iops: ResourceReading = field(default_factory=ResourceReading)

    def reading(self, resource: str) -> ResourceReading:
        """Return the reading for a resource key (e.g. "cpu", "iops")."""
        value = getattr(self, resource, None)
        if not isinstance(value, ResourceReading):
            raise KeyError(resource)
        return value


@dataclass(frozen=True)
class PrincipalRecord:
    """One LVE user as reported by cloudlinux-statistics.

    Attributes:
        id: Numeric LVE identifier.
        username: Account name, used as the metric label value.
        domain: Primary domain of the account.
        reseller: Owning reseller.
        usage: Current consumption.
        limits: Configured ceilings.
        faults: Number of times a limit was hit.
    """

    id: float = 0.0
    username: str = ""
    domain: str = ""
    reseller: str = ""
    usage: MeasurementSet = field(default_factory=MeasurementSet)
    limits: MeasurementSet = field(default_factory=MeasurementSet)
    faults: MeasurementSet = field(default_factory=MeasurementSet)

    def category(self, name: str) -> MeasurementSet:
        """Return the measurement set for "usage", "limits" or "faults"."""
        value = getattr(self, name, None)
        if not isinstance(value, MeasurementSet):
            raise KeyError(name)
        return value


@dataclass(frozen=True)
class Snapshot:
    """Decoded result of one cloudlinux-statistics run.

    Attributes:
        result: Status string reported by the utility (e.g. "success").
        timestamp: Capture time as a Unix timestamp.
        users: Per-user records in source order.
        resellers: Reseller entries, kept as decoded.
        mysql_gov: MySQL governor status string.
    """

    result: str = ""
    timestamp: float = 0.0
    users: tuple[PrincipalRecord, ...] = ()
    resellers: tuple[Any, ...] = ()
    mysql_gov: str = ""


@dataclass(frozen=True)
class MetricIdentity:
    """Name, help text and label schema of one exported gauge family."""

    name: str
    help: str
    resource: str
    category: str
    label_names: tuple[str, ...] = ("username",)


@dataclass(frozen=True)
class MetricSample:
    """A single metric measurement.

    Attributes:
        name: Metric name (e.g., LVE_CPU_USAGE).
        timestamp: Unix timestamp in seconds.
        value: The metric value.
        labels: Key-value pairs for metric dimensions.
        identity: Catalog entry the sample was emitted for.
    """

    name: str
    timestamp: float
    value: float
    labels: dict[str, str] = field(default_factory=dict)
    identity: MetricIdentity | None = None
