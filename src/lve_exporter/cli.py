"""Command line entry point.

Run with:
    lve-exporter --web.listen-address=:9119

Endpoints:
    /metrics   - Prometheus text format, one scrape of cloudlinux-statistics
    /          - Landing page linking to /metrics
"""

import argparse
from collections.abc import Sequence

import uvicorn

from lve_exporter import __version__
from lve_exporter.app import create_app
from lve_exporter.config import DEFAULT_LISTEN_ADDRESS, DEFAULT_LOG_LEVEL, Settings
from lve_exporter.core.errors import ConfigError
from lve_exporter.core.logs import configure_logging, get_logger

logger = get_logger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lve-exporter",
        description="Prometheus exporter for CloudLinux LVE statistics.",
    )
    parser.add_argument(
        "--web.listen-address",
        dest="listen_address",
        default=DEFAULT_LISTEN_ADDRESS,
        help="Address to listen on for web interface and telemetry "
        f"(default: {DEFAULT_LISTEN_ADDRESS})",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        type=str.upper,
        choices=LOG_LEVELS,
        help=f"Exporter log level (default: {DEFAULT_LOG_LEVEL})",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def parse_settings(argv: Sequence[str] | None = None) -> Settings:
    """Parse command line arguments into Settings.

    Invalid listen addresses are reported through argparse, which exits
    with status 2.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return Settings(listen_address=args.listen_address, log_level=args.log_level)
    except ConfigError as e:
        parser.error(str(e))


def main(argv: Sequence[str] | None = None) -> None:
    settings = parse_settings(argv)
    configure_logging(settings.log_level)
    logger.info(
        "Starting lve_exporter",
        extra={"version": __version__, "listen_address": settings.listen_address},
    )
    uvicorn.run(
        create_app(),
        host=settings.host,
        port=settings.port,
        lifespan="off",
        log_config=None,
        access_log=False,
    )
