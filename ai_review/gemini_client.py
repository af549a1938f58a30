"""Gemini generateContent API wrapper."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx

GEMINI_API_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
GEMINI_API_KEY_HEADER = "x-goog-api-key"


class GeminiApiError(RuntimeError):
    """Raised when a Gemini API request fails."""

    def __init__(self, message: str, *, status_code: int, endpoint: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.endpoint = endpoint


class GeminiResponseError(GeminiApiError):
    """Raised when a successful Gemini response carries no usable text."""


def _generate_endpoint(model: str) -> str:
    """Build the generateContent endpoint path for a model."""
    model_id = model.strip()
    if not model_id:
        raise ValueError("Model identifier must be a non-empty string.")
    return f"/models/{quote(model_id, safe='')}:generateContent"


def _ensure_mapping(value: object, *, context: str) -> dict[str, Any]:
    """Ensure a response fragment is a JSON object."""
    if not isinstance(value, dict):
        raise GeminiResponseError(
            f"Expected JSON object for {context}.",
            status_code=500,
            endpoint=context,
        )
    return value


def _raise_http_error(response: httpx.Response, endpoint: str) -> None:
    """Raise a typed error for a non-success Gemini API response."""
    message = f"Gemini API request failed with status {response.status_code} for '{endpoint}'."
    detail = _error_detail(response)
    if detail:
        message = f"{message} {detail}"
    raise GeminiApiError(
        message,
        status_code=response.status_code,
        endpoint=endpoint,
    )


def _error_detail(response: httpx.Response) -> str | None:
    """Read the error message Google APIs put in the response body, if any."""
    try:
        payload = response.json()
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"]
    return None


def _extract_candidate_text(payload: dict[str, Any], *, endpoint: str) -> str:
    """Join the text parts of the first candidate."""
    prompt_feedback = payload.get("promptFeedback")
    if isinstance(prompt_feedback, dict) and prompt_feedback.get("blockReason"):
        raise GeminiResponseError(
            f"Gemini blocked the prompt: {prompt_feedback['blockReason']}.",
            status_code=200,
            endpoint=endpoint,
        )

    candidates = payload.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        raise GeminiResponseError(
            "Gemini response contained no candidates.",
            status_code=200,
            endpoint=endpoint,
        )

    candidate = _ensure_mapping(candidates[0], context=endpoint)
    content = candidate.get("content")
    parts = content.get("parts") if isinstance(content, dict) else None
    texts: list[str] = []
    if isinstance(parts, list):
        for part in parts:
            if isinstance(part, dict) and isinstance(part.get("text"), str):
                texts.append(part["text"])

    text = "".join(texts)
    if not text.strip():
        finish_reason = candidate.get("finishReason") or "unknown"
        raise GeminiResponseError(
            f"Gemini returned an empty response (finish reason: {finish_reason}).",
            status_code=200,
            endpoint=endpoint,
        )
    return text


def generate_text(*, client: httpx.Client, model: str, prompt: str) -> str:
    """Send one prompt to Gemini and return the raw response text."""
    endpoint = _generate_endpoint(model)
    body = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}
    response = client.post(endpoint, json=body)
    if response.status_code >= 400:
        _raise_http_error(response, endpoint)

    try:
        payload = response.json()
    except ValueError as error:
        raise GeminiResponseError(
            "Gemini response body is not valid JSON.",
            status_code=response.status_code,
            endpoint=endpoint,
        ) from error
    return _extract_candidate_text(_ensure_mapping(payload, context=endpoint), endpoint=endpoint)


def build_gemini_client(
    *,
    api_key: str,
    timeout_seconds: int = 120,
    trust_env: bool = True,
) -> httpx.Client:
    """Build an authenticated Gemini HTTP client."""
    headers = {
        "Content-Type": "application/json",
        GEMINI_API_KEY_HEADER: api_key,
    }
    return httpx.Client(
        base_url=GEMINI_API_BASE_URL,
        headers=headers,
        timeout=timeout_seconds,
        trust_env=trust_env,
    )
