"""Data contracts passed between review pipeline stages."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ReviewStatus(StrEnum):
    """Outcome of reviewing one file."""

    OK = "ok"
    ERROR = "error"


class ReviewTarget(BaseModel):
    """Source file discovered for review."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: Path

    @property
    def label(self) -> str:
        """Return the path as shown in the report."""
        return self.path.as_posix()


class ReviewResult(BaseModel):
    """Feedback or failure recorded for one reviewed file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str = Field(min_length=1)
    status: ReviewStatus
    feedback_text: str | None = None
    error_message: str | None = None

    @model_validator(mode="after")
    def validate_outcome(self) -> ReviewResult:
        """Validate that the payload matches the status."""
        if self.status is ReviewStatus.OK:
            if self.feedback_text is None or self.error_message is not None:
                raise ValueError("ok results carry feedback_text and no error_message")
        elif self.error_message is None or self.feedback_text is not None:
            raise ValueError("error results carry error_message and no feedback_text")
        return self

    @classmethod
    def success(cls, path: str, feedback_text: str) -> ReviewResult:
        return cls(path=path, status=ReviewStatus.OK, feedback_text=feedback_text)

    @classmethod
    def failure(cls, path: str, error_message: str) -> ReviewResult:
        return cls(path=path, status=ReviewStatus.ERROR, error_message=error_message)


class SummaryEntry(BaseModel):
    """Summary table extracted from one file's feedback."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str = Field(min_length=1)
    table: str = Field(min_length=1)


class ReviewReport(BaseModel):
    """Assembled report for a whole run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    results: tuple[ReviewResult, ...] = ()
    summaries: tuple[SummaryEntry, ...] = ()
    markdown: str
