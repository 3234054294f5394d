"""Exceptions raised by the LVE exporter."""


class LveExporterError(Exception):
    """Base class for all lve_exporter errors."""


class SubprocessFailure(LveExporterError):
    """The statistics utility could not be started or exited non-zero.

    Attributes:
        command: The argument vector that was executed.
        returncode: Exit status, or None if the process never started.
        stderr: Captured standard error, decoded leniently.
        stdout: Whatever standard output was captured before the failure.
    """

    def __init__(
        self,
        message: str,
        command: tuple[str, ...],
        returncode: int | None = None,
        stderr: str = "",
        stdout: bytes = b"",
    ) -> None:
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        self.stdout = stdout


class DecodeFailure(LveExporterError):
    """Captured output is not a JSON object at all."""

    def __init__(self, message: str, payload_size: int = 0) -> None:
        super().__init__(message)
        self.payload_size = payload_size


class ConfigError(LveExporterError):
    """Invalid command line configuration."""
