"""Statistics source returning a fixed payload."""


class StaticStatsSource:
    """StatsSourcePort implementation that replays a fixed payload.

    Suitable for testing and for serving a captured statistics dump
    without access to cloudlinux-statistics.
    """

    def __init__(self, payload: bytes | str = b"") -> None:
        self._payload = payload.encode() if isinstance(payload, str) else payload
        self.calls = 0

    def fetch(self) -> bytes:
        """Return the stored payload."""
        self.calls += 1
        return self._payload
