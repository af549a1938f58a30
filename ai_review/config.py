"""Run configuration and secret resolution."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_ROOT_DIR = Path("src")
DEFAULT_OUTPUT_PATH = Path("reports/ai-code-review.md")
EXCLUDED_DIR_NAMES = frozenset({"node_modules", "tests", "reports"})
SOURCE_FILE_EXTENSION = ".js"
REVIEW_MODEL = "gemini-2.5-flash"
GEMINI_API_KEY_ENV_VAR = "GEMINI_API_KEY"
DEFAULT_TIMEOUT_SECONDS = 120


class GeminiAuthError(RuntimeError):
    """Raised when the review service API key is missing."""


@dataclass(frozen=True, slots=True)
class ReviewConfig:
    """Settings for one review run."""

    api_key: str
    root_dir: Path = DEFAULT_ROOT_DIR
    output_path: Path = DEFAULT_OUTPUT_PATH
    excluded_dir_names: frozenset[str] = EXCLUDED_DIR_NAMES
    file_extension: str = SOURCE_FILE_EXTENSION
    model: str = REVIEW_MODEL
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    trust_env: bool = True


def get_gemini_api_key() -> str:
    """Read the Gemini API key from environment and fail fast if missing."""
    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    api_key = (os.getenv(GEMINI_API_KEY_ENV_VAR) or "").strip()
    if api_key:
        return api_key

    message = (
        f"Missing Gemini API key. Set {GEMINI_API_KEY_ENV_VAR} in the environment "
        "that invokes the review (for example a CI secret)."
    )
    raise GeminiAuthError(message)


def build_review_config(
    *,
    root_dir: Path | str = DEFAULT_ROOT_DIR,
    output_path: Path | str = DEFAULT_OUTPUT_PATH,
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
    trust_env: bool = True,
) -> ReviewConfig:
    """Resolve the API key and build the run configuration."""
    api_key = get_gemini_api_key()
    return ReviewConfig(
        api_key=api_key,
        root_dir=Path(root_dir),
        output_path=Path(output_path),
        timeout_seconds=timeout_seconds,
        trust_env=trust_env,
    )
