"""Single-file review against the text generation service."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from ai_review.prompt import build_review_prompt


class EmptyFeedbackError(RuntimeError):
    """Raised when the service answers with no feedback text."""


class TextGenerator(Protocol):
    """Callable that turns a prompt into generated text."""

    def __call__(self, *, model: str, prompt: str) -> str:
        """Generate text for the prompt with the named model."""


def review_file(path: Path, *, generate: TextGenerator, model: str) -> str:
    """Read one file, request its review and return the feedback verbatim."""
    code = path.read_text(encoding="utf-8")
    prompt = build_review_prompt(code)
    feedback = generate(model=model, prompt=prompt)
    if not isinstance(feedback, str) or not feedback.strip():
        raise EmptyFeedbackError(f"Review service returned no feedback for '{path.as_posix()}'.")
    return feedback
