"""
Error hierarchy shared by every phase of a run.

Each class names the *phase* it belongs to so the CLI can prefix the message
(``failed to load script: …``) without knowing where it was raised.
"""
from __future__ import annotations


class SqlLoaderError(RuntimeError):
    """Base class for any user‑visible failure."""

    phase: str | None = None

    def describe(self) -> str:
        return f"failed to {self.phase}: {self}" if self.phase else str(self)


class ConfigurationError(SqlLoaderError):
    """Missing or invalid setting (CLI flag, env var, config file)."""


class EmptyPathError(ConfigurationError):
    phase = "load script"


class InvalidConfigError(ConfigurationError):
    phase = "connect to database"


class ReadError(SqlLoaderError):
    """The script file could not be opened, read or decoded."""

    phase = "load script"

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class DatabaseConnectError(SqlLoaderError):
    phase = "connect to database"


class OpenError(DatabaseConnectError):
    """The driver rejected the driver name or the DSN before any I/O."""


class UnreachableError(DatabaseConnectError):
    """
    The connection could not be established or did not answer the ping.

    ``close_error`` holds the failure of the cleanup close, if any, so it
    never hides the original problem.
    """

    def __init__(self, message: str, close_error: BaseException | None = None) -> None:
        if close_error is not None:
            message = f"{message} (close error: {close_error})"
        super().__init__(message)
        self.close_error = close_error


class StatementExecutionError(SqlLoaderError):
    phase = "execute script"

    def __init__(self, position: int, statement: str, cause: BaseException) -> None:
        super().__init__(f"statement #{position} failed: {cause}\n  {statement}")
        self.position = position
        self.statement = statement


class CloseError(SqlLoaderError):
    """Releasing the connection failed; reported as a warning only."""
