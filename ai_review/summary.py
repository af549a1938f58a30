"""Best-effort extraction of the summary table from review feedback."""

from __future__ import annotations

import re

from ai_review.prompt import MAIN_PROBLEM_COLUMN

SUMMARY_TABLE_MARKER = f"| {MAIN_PROBLEM_COLUMN}"
# Two or more consecutive lines starting with "|"; the first other line ends the block.
TABLE_BLOCK_PATTERN = re.compile(r"(?:\|[^\n]*\n)+\|[^\n]*")


def extract_summary_table(feedback_text: object) -> str | None:
    """Return the summary table found in feedback text, or None.

    The block starts at the first occurrence of the table marker and spans
    the header row, the separator row and every contiguous data row. A blank
    line inside the table truncates it there.
    """
    if not isinstance(feedback_text, str):
        return None

    table_start = feedback_text.find(SUMMARY_TABLE_MARKER)
    if table_start == -1:
        return None

    match = TABLE_BLOCK_PATTERN.match(feedback_text, table_start)
    if match is None:
        return None

    table = match.group(0).strip()
    return table or None
