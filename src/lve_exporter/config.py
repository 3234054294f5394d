"""Runtime settings for the exporter."""

from dataclasses import dataclass, field

from lve_exporter.core.errors import ConfigError

DEFAULT_LISTEN_ADDRESS = ":9119"
DEFAULT_LOG_LEVEL = "INFO"
ALL_INTERFACES = "0.0.0.0"


def parse_listen_address(value: str) -> tuple[str, int]:
    """Split a "[host]:port" listen address.

    An empty host listens on all interfaces. IPv6 hosts must be
    bracketed, e.g. "[::1]:9119".

    Args:
        value: Address such as ":9119", "127.0.0.1:9119" or "[::]:9119".

    Returns:
        (host, port) tuple.

    Raises:
        ConfigError: If the address has no port or the port is invalid.
    """
    value = value.strip()
    if value.startswith("["):
        host, sep, rest = value[1:].partition("]")
        if not sep or not rest.startswith(":"):
            raise ConfigError(f"invalid listen address {value!r}")
        port_text = rest[1:]
    else:
        host, sep, port_text = value.rpartition(":")
        if not sep:
            raise ConfigError(f"listen address {value!r} is missing a port")
        if ":" in host:
            raise ConfigError(f"IPv6 address must be bracketed in {value!r}")

    try:
        port = int(port_text)
    except ValueError:
        raise ConfigError(f"invalid port {port_text!r} in {value!r}") from None
    if not 0 < port < 65536:
        raise ConfigError(f"port {port} out of range in {value!r}")

    return host or ALL_INTERFACES, port


@dataclass(frozen=True)
class Settings:
    """Exporter settings.

    Attributes:
        listen_address: Address to listen on for the web interface.
        log_level: Level name for the exporter's own logs.
    """

    listen_address: str = DEFAULT_LISTEN_ADDRESS
    log_level: str = DEFAULT_LOG_LEVEL
    _bind: tuple[str, int] = field(
        init=False, repr=False, compare=False, default=("", 0)
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "_bind", parse_listen_address(self.listen_address))

    @property
    def host(self) -> str:
        return self._bind[0]

    @property
    def port(self) -> int:
        return self._bind[1]
