"""Statistics source that shells out to cloudlinux-statistics."""

import subprocess

from lve_exporter.core.errors import SubprocessFailure
from lve_exporter.core.logs import get_logger

logger = get_logger(__name__)

DEFAULT_COMMAND: tuple[str, ...] = (
    "sudo",
    "/usr/sbin/cloudlinux-statistics",
    "--json",
)


def run_command(command: tuple[str, ...]) -> bytes:
    """Execute the command and return its stdout.

    subprocess.run drains both pipes and waits for the child on every
    path, so repeated scrapes leave no descriptors or zombies behind.

    Raises:
        SubprocessFailure: If the process cannot be started or exits
            non-zero. Captured stdout is attached to the exception.
    """
    try:
        completed = subprocess.run(
            list(command),
            stdin=subprocess.DEVNULL,
            capture_output=True,
            check=False,
        )
    except OSError as e:
        raise SubprocessFailure(
            f"failed to start {command[0]}: {e}", command=command
        ) from e

    if completed.returncode != 0:
        raise SubprocessFailure(
            f"{' '.join(command)} exited with status {completed.returncode}",
            command=command,
            returncode=completed.returncode,
            stderr=completed.stderr.decode("utf-8", errors="replace").strip(),
            stdout=completed.stdout,
        )
    return completed.stdout


class CloudLinuxStatisticsSource:
    """StatsSourcePort implementation backed by a subprocess.

    Every fetch() spawns exactly one process. Failures are logged, never
    raised: the caller receives whatever stdout was captured, possibly b"".
    """

    def __init__(self, command: tuple[str, ...] = DEFAULT_COMMAND) -> None:
        self._command = tuple(command)

    @property
    def command(self) -> tuple[str, ...]:
        return self._command

    def fetch(self) -> bytes:
        """Run the utility once and return its standard output."""
        try:
            output = run_command(self._command)
        except SubprocessFailure as e:
            logger.error(
                "LVE statistics command failed: %s",
                e,
                extra={
                    "returncode": -1 if e.returncode is None else e.returncode,
                    "stderr": e.stderr,
                },
            )
            return e.stdout

        if not output:
            logger.warning(
                "LVE statistics command produced no output",
                extra={"command": " ".join(self._command)},
            )
        return output
