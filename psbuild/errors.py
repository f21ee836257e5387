"""Exception hierarchy for psbuild.

Only fatal conditions are represented here. Best-effort steps (revision
lookup, cachebuster hashing) never raise; they return a fallback instead.
"""

from __future__ import annotations


class BuildError(Exception):
    """Base class for errors that abort a build."""


class ConfigError(BuildError, ValueError):
    """A required input file is missing or malformed."""


class CompileError(BuildError):
    """The compiler collaborator failed on a task."""

    def __init__(
        self,
        message: str,
        *,
        command: list[str] | None = None,
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.command = command or []
        self.returncode = returncode
        self.stderr = stderr
