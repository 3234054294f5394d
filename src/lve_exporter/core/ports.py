"""Port interfaces for statistics sources.

The engine depends only on these protocols, not on the subprocess adapter.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class StatsSourcePort(Protocol):
    """Port for acquiring raw LVE statistics.

    Adapters implementing this protocol return the utility's raw output.
    Examples: CloudLinuxStatisticsSource, StaticStatsSource.
    """

    def fetch(self) -> bytes:
        """Run one acquisition and return the captured output.

        Returns:
            Raw bytes, possibly empty. Implementations must not raise for
            acquisition failures; they log them and return what they have.
        """
        ...
