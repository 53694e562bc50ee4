"""Console progress and warning output for content builds."""

from __future__ import annotations

import sys
import typing as typ


class BuildReporter:
    """Print progress lines to stdout and warnings to stderr.

    Warnings are also retained on :attr:`warnings` so callers and tests can
    inspect every degraded-output condition without scraping the console.
    """

    def __init__(
        self,
        *,
        stdout: typ.TextIO | None = None,
        stderr: typ.TextIO | None = None,
    ) -> None:
        self._stdout = stdout
        self._stderr = stderr
        self.warnings: list[str] = []

    def info(self, message: str) -> None:
        """Print a progress line."""
        print(message, file=self._stdout or sys.stdout)

    def warn(self, message: str) -> None:
        """Record and print a non-fatal warning."""
        self.warnings.append(message)
        print(f"warning: {message}", file=self._stderr or sys.stderr)
