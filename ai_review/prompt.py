"""Review prompt construction."""

from __future__ import annotations

SOURCE_LANGUAGE = "JavaScript"
CODE_FENCE_LANGUAGE = "js"
MAIN_PROBLEM_COLUMN = "Main Problem"
LOCATION_COLUMN = "Suggested Location/Line"
NO_SERIOUS_PROBLEMS_ROW = "No serious problems found"


def build_review_prompt(code: str) -> str:
    """Embed source code in the fixed review instructions."""
    instructions = "\n".join(
        [
            "You are a code reviewer who analyzes best practices, readability, security and "
            f"structure of {SOURCE_LANGUAGE} code.",
            "Analyze the code below and provide comments:",
            "",
            "1.  **Strengths** and **Improvement Suggestions** (in detailed, flowing prose).",
            "2.  **AT THE END OF YOUR DETAILED REVIEW,** create a **summary table** in Markdown "
            f'format with two columns: **"{MAIN_PROBLEM_COLUMN}"** and **"{LOCATION_COLUMN}"**.',
            "    * If there are no serious problems, the table must have a single row saying "
            f'"{NO_SERIOUS_PROBLEMS_ROW}" in the "{MAIN_PROBLEM_COLUMN}" column.',
            "",
            "Code:",
            f"```{CODE_FENCE_LANGUAGE}",
        ]
    )
    return f"{instructions}\n{code}\n```".strip()
