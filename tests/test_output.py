"""Tests for markdown report rendering."""

from __future__ import annotations

import pytest

from ai_review.output import (
    NO_SUMMARIES_PLACEHOLDER,
    REPORT_TITLE,
    render_file_section,
    render_markdown_report,
    render_summary_section,
)
from ai_review.schema import ReviewResult, SummaryEntry


@pytest.mark.unit
def test_success_section_contains_path_and_full_feedback() -> None:
    result = ReviewResult.success("src/app.js", "Line one.\nLine two.")

    assert render_file_section(result) == "## File: src/app.js\n\nLine one.\nLine two.\n\n"


@pytest.mark.unit
def test_failure_section_contains_error_message() -> None:
    result = ReviewResult.failure("src/app.js", "status 500")

    assert render_file_section(result) == "## File: src/app.js\n\n**Error analyzing**: status 500\n\n"


@pytest.mark.unit
def test_summary_section_lists_entries_in_order() -> None:
    summaries = [
        SummaryEntry(path="src/b.js", table="| Main Problem | L |\n|---|---|\n| b | 1 |"),
        SummaryEntry(path="src/a.js", table="| Main Problem | L |\n|---|---|\n| a | 2 |"),
    ]

    section = render_summary_section(summaries)

    assert section.startswith("## 📊 Problem Summary by File\n\n")
    assert section.index("### File Summary: `src/b.js`") < section.index(
        "### File Summary: `src/a.js`"
    )
    assert "### File Summary: `src/b.js`\n| Main Problem | L |\n|---|---|\n| b | 1 |\n" in section
    assert NO_SUMMARIES_PLACEHOLDER not in section


@pytest.mark.unit
def test_summary_section_placeholder_when_empty() -> None:
    section = render_summary_section([])

    assert section == f"## 📊 Problem Summary by File\n\n{NO_SUMMARIES_PLACEHOLDER}\n\n"


@pytest.mark.unit
def test_report_for_zero_files_has_no_file_sections() -> None:
    report = render_markdown_report([], [])

    assert report.startswith(f"{REPORT_TITLE}\n\n")
    assert "## File:" not in report
    assert "\n---\n" in report
    assert report.endswith(f"{NO_SUMMARIES_PLACEHOLDER}\n\n")


@pytest.mark.unit
def test_report_places_summary_after_all_file_sections() -> None:
    results = [
        ReviewResult.success("src/a.js", "ok"),
        ReviewResult.failure("src/b.js", "boom"),
    ]

    report = render_markdown_report(results, [])

    assert report.index("## File: src/a.js") < report.index("## File: src/b.js")
    assert report.index("## File: src/b.js") < report.index("---")
    assert report.index("---") < report.index("## 📊 Problem Summary by File")
