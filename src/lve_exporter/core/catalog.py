"""Fixed catalog of the gauge families exported for every LVE user."""

from collections.abc import Iterator

from lve_exporter.core.models import MetricIdentity

# (payload key, metric name component) in emission order
RESOURCES: tuple[tuple[str, str], ...] = (
    ("cpu", "CPU"),
    ("pmem", "PMEM"),
    ("vmem", "VMEM"),
    ("nproc", "NPROC"),
    ("io", "IO"),
    ("iops", "IOPS"),
    ("ep", "EP"),
)

# (PrincipalRecord attribute, metric name component) in emission order
CATEGORIES: tuple[tuple[str, str], ...] = (
    ("usage", "USAGE"),
    ("limits", "LIMIT"),
    ("faults", "FAULTS"),
)

USERNAME_LABEL = "username"

_HELP: dict[tuple[str, str], str] = {
    ("cpu", "usage"): "CPU usage per user in LVE",
    ("cpu", "limits"): "CPU limit per user in LVE",
    ("cpu", "faults"): "CPU faults per user in LVE",
    ("pmem", "usage"): "Physical memory usage per user in LVE",
    ("pmem", "limits"): "Physical memory limit per user in LVE",
    ("pmem", "faults"): "Physical memory faults per user in LVE",
    ("vmem", "usage"): "Virtual memory usage per user in LVE",
    ("vmem", "limits"): "Virtual memory limit per user in LVE",
    ("vmem", "faults"): "Virtual memory faults per user in LVE",
    ("nproc", "usage"): "Number of processes per LVE user",
    ("nproc", "limits"): "Limit for number of processes per LVE user",
    ("nproc", "faults"): "Faults for number of processes per LVE user",
    ("io", "usage"): "IO per LVE user",
    ("io", "limits"): "IO Limit per LVE user",
    ("io", "faults"): "IO Faults per LVE user",
    ("iops", "usage"): "IOPS per LVE user",
    ("iops", "limits"): "IOPS Limit per LVE user",
    ("iops", "faults"): "IOPS Faults per LVE user",
    ("ep", "usage"): "Entry Processes per LVE user",
    ("ep", "limits"): "Entry Processes Limit per LVE user",
    ("ep", "faults"): "Entry Processes Faults per LVE user",
}


def metric_name(resource_component: str, category_component: str) -> str:
    """Build a metric name such as LVE_CPU_USAGE."""
    return f"LVE_{resource_component}_{category_component}"


class MetricCatalog:
    """Immutable, ordered set of MetricIdentity records.

    Iteration yields resources in RESOURCES order, and for each resource
    the categories in CATEGORIES order. The catalog is never mutated after
    construction, so a single instance can be read from any number of
    concurrent scrapes.
    """

    __slots__ = ("_entries", "_index")

    def __init__(self, entries: tuple[MetricIdentity, ...]) -> None:
        index = {(e.resource, e.category): e for e in entries}
        if len(index) != len(entries):
            raise ValueError("duplicate (resource, category) pair in catalog")
        if len({e.name for e in entries}) != len(entries):
            raise ValueError("duplicate metric name in catalog")
        self._entries = entries
        self._index = index

    def __iter__(self) -> Iterator[MetricIdentity]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[MetricIdentity, ...]:
        return self._entries

    def lookup(self, resource: str, category: str) -> MetricIdentity:
        """Return the identity for a (resource, category) pair.

        Raises:
            KeyError: If the pair is not part of the catalog.
        """
        return self._index[(resource, category)]

    def names(self) -> list[str]:
        return [entry.name for entry in self._entries]


def build_catalog() -> MetricCatalog:
    """Create the 21 gauge identities (7 resources x 3 categories)."""
    entries = tuple(
        MetricIdentity(
            name=metric_name(resource_component, category_component),
            help=_HELP[(resource, category)],
            resource=resource,
            category=category,
            label_names=(USERNAME_LABEL,),
        )
        for resource, resource_component in RESOURCES
        for category, category_component in CATEGORIES
    )
    return MetricCatalog(entries)
