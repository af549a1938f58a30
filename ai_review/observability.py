"""Run telemetry models and logging helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(slots=True)
class RunTelemetry:
    """Counters for one review run."""

    report_path: Path
    files_discovered: int = 0
    files_reviewed: int = 0
    files_failed: int = 0
    summaries_extracted: int = 0

    def describe(self) -> str:
        """Return a one-line human readable summary."""
        return (
            f"Reviewed {self.files_reviewed} of {self.files_discovered} file(s) "
            f"({self.files_failed} failed); {self.summaries_extracted} summary table(s) "
            f"extracted. Report written to {self.report_path.as_posix()}."
        )


def configure_logging(*, verbose: bool = False) -> None:
    """Send package log records to stderr at INFO (verbose) or WARNING."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
