"""Serve a captured cloudlinux-statistics dump instead of running the utility.

Useful for checking dashboards on a machine without CloudLinux.

Run with:
    sudo cloudlinux-statistics --json > dump.json
    python examples/static_dump.py dump.json
"""

import sys
from pathlib import Path

import uvicorn

from lve_exporter import StaticStatsSource, configure_logging
from lve_exporter.app import create_app
from lve_exporter.config import Settings


def main() -> None:
    payload = Path(sys.argv[1]).read_bytes()
    settings = Settings(listen_address=":9119")
    configure_logging(settings.log_level)
    uvicorn.run(
        create_app(StaticStatsSource(payload)),
        host=settings.host,
        port=settings.port,
        lifespan="off",
        log_config=None,
    )


if __name__ == "__main__":
    main()
