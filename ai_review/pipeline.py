"""Review orchestration: discover, review each file, assemble and write the report."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ai_review.config import ReviewConfig
from ai_review.discovery import discover_review_targets
from ai_review.observability import RunTelemetry
from ai_review.output import render_markdown_report
from ai_review.reviewer import TextGenerator, review_file
from ai_review.schema import ReviewReport, ReviewResult, ReviewStatus, ReviewTarget, SummaryEntry
from ai_review.summary import extract_summary_table

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReviewRun:
    """Report produced by a run together with its telemetry."""

    report: ReviewReport
    telemetry: RunTelemetry


def review_target(target: ReviewTarget, *, generate: TextGenerator, model: str) -> ReviewResult:
    """Review one target, converting per-file failures into an error result."""
    try:
        feedback = review_file(target.path, generate=generate, model=model)
    except Exception as error:
        message = str(error) or type(error).__name__
        logger.warning("Review failed for %s: %s", target.label, message)
        return ReviewResult.failure(target.label, message)
    return ReviewResult.success(target.label, feedback)


def build_report(
    targets: tuple[ReviewTarget, ...],
    *,
    generate: TextGenerator,
    model: str,
) -> ReviewReport:
    """Review targets one at a time in discovery order and assemble the report."""
    results: list[ReviewResult] = []
    summaries: list[SummaryEntry] = []

    for index, target in enumerate(targets, start=1):
        logger.info("Reviewing %s (%d/%d)", target.label, index, len(targets))
        result = review_target(target, generate=generate, model=model)
        results.append(result)
        if result.status is not ReviewStatus.OK:
            continue

        table = extract_summary_table(result.feedback_text)
        if table is None:
            logger.info("No summary table found in feedback for %s", target.label)
            continue
        summaries.append(SummaryEntry(path=result.path, table=table))

    return ReviewReport(
        results=tuple(results),
        summaries=tuple(summaries),
        markdown=render_markdown_report(results, summaries),
    )


def write_report(output_path: Path, markdown: str) -> Path:
    """Write the report, replacing any previous content."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(markdown, encoding="utf-8")
    return output_path


def run_review(config: ReviewConfig, *, generate: TextGenerator) -> ReviewRun:
    """Run the whole review pipeline and write the report to config.output_path."""
    targets = discover_review_targets(
        config.root_dir,
        excluded_dir_names=config.excluded_dir_names,
        excluded_paths=(config.output_path.parent,),
        file_extension=config.file_extension,
    )
    logger.info("Discovered %d file(s) under %s", len(targets), config.root_dir.as_posix())
    config.output_path.parent.mkdir(parents=True, exist_ok=True)

    report = build_report(targets, generate=generate, model=config.model)
    write_report(config.output_path, report.markdown)

    failed = sum(1 for result in report.results if result.status is ReviewStatus.ERROR)
    telemetry = RunTelemetry(
        report_path=config.output_path,
        files_discovered=len(targets),
        files_reviewed=len(report.results) - failed,
        files_failed=failed,
        summaries_extracted=len(report.summaries),
    )
    logger.info(telemetry.describe())
    return ReviewRun(report=report, telemetry=telemetry)
