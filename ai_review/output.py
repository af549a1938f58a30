"""Markdown report rendering."""

from __future__ import annotations

from collections.abc import Sequence

from ai_review.schema import ReviewResult, ReviewStatus, SummaryEntry

REPORT_TITLE = "# AI Code Review Report (Gemini)"
SUMMARY_HEADING = "## 📊 Problem Summary by File"
SUMMARY_INTRO = (
    "This is the summary of problems extracted automatically from the detailed feedback "
    "for each file. Use it to prioritize fixes:"
)
NO_SUMMARIES_PLACEHOLDER = (
    "No source files were found for analysis, or no summary tables could be extracted."
)


def render_file_section(result: ReviewResult) -> str:
    """Render one file's feedback, or its error, as a report section."""
    if result.status is ReviewStatus.OK:
        body = result.feedback_text
    else:
        body = f"**Error analyzing**: {result.error_message}"
    return f"## File: {result.path}\n\n{body}\n\n"


def render_summary_section(summaries: Sequence[SummaryEntry]) -> str:
    """Render the consolidated summary of extracted tables."""
    lines = [SUMMARY_HEADING, ""]
    if not summaries:
        lines.extend([NO_SUMMARIES_PLACEHOLDER, "", ""])
        return "\n".join(lines)

    lines.extend([SUMMARY_INTRO, ""])
    section = "\n".join(lines) + "\n"
    return section + "\n".join(
        f"### File Summary: `{entry.path}`\n{entry.table}\n" for entry in summaries
    )


def render_markdown_report(
    results: Sequence[ReviewResult],
    summaries: Sequence[SummaryEntry],
) -> str:
    """Render the full report: title, file sections, then the summary."""
    parts = [f"{REPORT_TITLE}\n\n"]
    parts.extend(render_file_section(result) for result in results)
    parts.append("\n---\n\n")
    parts.append(render_summary_section(summaries))
    return "".join(parts)
