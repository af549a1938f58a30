"""Shared pytest fixtures and test-run configuration."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest

WELL_FORMED_FEEDBACK = "\n".join(
    [
        "**Strengths**: small, readable functions.",
        "",
        "**Improvement Suggestions**: validate inputs before use.",
        "",
        "| Main Problem | Suggested Location/Line |",
        "| --- | --- |",
        "| Missing input validation | line 3 |",
        "| Unused variable | line 7 |",
        "",
        "Overall the module is in good shape.",
    ]
)


def pytest_addoption(parser: pytest.Parser) -> None:
    """Add custom pytest options for integration test execution."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked as integration (live Gemini API).",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip integration tests unless explicitly enabled."""
    run_integration = config.getoption("--run-integration")
    env_enabled = os.getenv("RUN_INTEGRATION_TESTS") == "1"
    if run_integration or env_enabled:
        return

    skip_marker = pytest.mark.skip(
        reason=(
            "Integration tests are disabled by default. "
            "Use --run-integration or set RUN_INTEGRATION_TESTS=1."
        )
    )
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_marker)


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Create files under tmp_path/src from a {relative_path: content} mapping."""

    def _make(files: dict[str, str]) -> Path:
        root = tmp_path / "src"
        root.mkdir(exist_ok=True)
        for relative_path, content in files.items():
            file_path = root / relative_path
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def well_formed_feedback() -> str:
    """Feedback text ending in a two-row summary table followed by prose."""
    return WELL_FORMED_FEEDBACK
