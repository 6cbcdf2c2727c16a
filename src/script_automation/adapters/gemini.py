"""
IScriptGenerator adapter for the Gemini REST API (generateContent).
All provider envelope handling lives here; callers only see GenerationResult values.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

import requests

from script_automation import config
from script_automation.domain.errors import (
    ConfigurationError,
    EmptyResponseError,
    ProviderProtocolError,
    ScriptGenerationError,
    TransportError,
)
from script_automation.domain.models import GenerationResult, ScriptText
from script_automation.ports.interfaces import IScriptGenerator

logger = logging.getLogger(__name__)

# Statuses that mean the key itself was rejected rather than a transport problem
_AUTH_STATUSES = (401, 403)


def parse_response(payload: Any) -> str:
    """
    Extract the script text from a generateContent response body.

    Joins the text of every part of the first candidate and strips outer
    whitespace; internal line breaks are kept as-is. Raises
    ProviderProtocolError for unexpected shapes and EmptyResponseError when
    the envelope is fine but carries no text.
    """
    if not isinstance(payload, dict):
        raise ProviderProtocolError(f"Expected JSON object, got {type(payload).__name__}")

    candidates = payload.get("candidates")
    if candidates is None:
        feedback = payload.get("promptFeedback")
        if isinstance(feedback, dict):
            raise EmptyResponseError(
                f"Prompt blocked (blockReason: {feedback.get('blockReason', 'UNKNOWN')})",
                finish_reason=feedback.get("blockReason"),
            )
        raise ProviderProtocolError(f"No candidates in response (keys: {sorted(payload)})")
    if not isinstance(candidates, list):
        raise ProviderProtocolError("'candidates' is not a list")
    if not candidates:
        raise EmptyResponseError("Response has no candidates")

    candidate = candidates[0]
    if not isinstance(candidate, dict):
        raise ProviderProtocolError("Candidate is not an object")
    finish_reason = candidate.get("finishReason")

    content = candidate.get("content", {})
    if not isinstance(content, dict):
        raise ProviderProtocolError("Candidate 'content' is not an object")
    parts = content.get("parts", [])
    if not isinstance(parts, list):
        raise ProviderProtocolError("Content 'parts' is not a list")

    chunks = []
    for part in parts:
        if not isinstance(part, dict):
            raise ProviderProtocolError("Content part is not an object")
        text = part.get("text")
        if text is None:
            continue
        if not isinstance(text, str):
            raise ProviderProtocolError("Part 'text' is not a string")
        chunks.append(text)

    text = "".join(chunks).strip()
    if not text:
        raise EmptyResponseError(
            f"Gemini returned no text (finishReason: {finish_reason or 'UNKNOWN'})",
            finish_reason=finish_reason,
        )
    if finish_reason == "MAX_TOKENS":
        logger.warning("Response hit token limit (finishReason: MAX_TOKENS); script may be truncated")
    return text


def _error_details(response: requests.Response) -> Dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {"message": response.text[:500]}
    error = body.get("error") if isinstance(body, dict) else None
    return error if isinstance(error, dict) else {"message": str(body)[:500]}


def _is_invalid_key(status_code: int, error: Dict[str, Any]) -> bool:
    if status_code in _AUTH_STATUSES:
        return True
    if status_code != 400:
        return False
    details = error.get("details")
    if not isinstance(details, list):
        details = []
    for detail in details:
        if isinstance(detail, dict) and detail.get("reason") == "API_KEY_INVALID":
            return True
    return "api key not valid" in str(error.get("message", "")).lower()


class GeminiScriptGenerator(IScriptGenerator):
    """Single-shot Gemini client. No retry: re-invoking is the caller's decision."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_output_tokens: Optional[int] = None,
        timeout: Optional[float] = None,
        base_url: Optional[str] = None,
    ):
        self.gemini_config = {
            "api_key": (api_key if api_key is not None else config.GEMINI_API_KEY) or "",
            "model": model or config.GEMINI_MODEL,
            "temperature": temperature if temperature is not None else config.GEMINI_TEMPERATURE,
            "max_output_tokens": max_output_tokens or config.GEMINI_MAX_OUTPUT_TOKENS,
            "timeout": timeout or config.GEMINI_TIMEOUT,
            "base_url": (base_url or config.GEMINI_BASE_URL).rstrip("/"),
        }

    def describe(self) -> str:
        """Log-safe summary of the client configuration (no credential)."""
        return f"{self.gemini_config['model']} @ {self.gemini_config['base_url']}"

    async def generate(self, prompt: str) -> GenerationResult:
        try:
            self._require_api_key()
            payload = await asyncio.to_thread(self._post, prompt)
            text = parse_response(payload)
        except ScriptGenerationError as e:
            logger.error("Gemini generation failed [%s]: %s", e.kind.value, e)
            return e.to_failure()
        except (TypeError, KeyError, AttributeError) as e:
            error = ProviderProtocolError(f"Unexpected response structure: {e}")
            logger.error("Gemini generation failed [%s]: %s", error.kind.value, error)
            return error.to_failure()
        logger.info("Got script from Gemini (%d characters)", len(text))
        return ScriptText(text)

    def _require_api_key(self) -> None:
        if not self.gemini_config["api_key"].strip():
            raise ConfigurationError("GEMINI_API_KEY is not set; please configure your .env")

    def _post(self, prompt: str) -> Any:
        """Blocking request; returns the decoded JSON body of a 200 response."""
        url = f"{self.gemini_config['base_url']}/{self.gemini_config['model']}:generateContent"
        data = {
            "contents": [
                {
                    "role": "user",
                    "parts": [{"text": prompt}],
                }
            ],
            "generationConfig": {
                "temperature": self.gemini_config["temperature"],
                "maxOutputTokens": self.gemini_config["max_output_tokens"],
            },
        }
        headers = {
            "x-goog-api-key": self.gemini_config["api_key"],
            "Content-Type": "application/json",
        }

        logger.info("Sending request to Gemini (%s)", self.describe())
        try:
            response = requests.post(
                url, headers=headers, json=data, timeout=self.gemini_config["timeout"]
            )
        except requests.exceptions.Timeout as e:
            raise TransportError(
                f"Gemini request timed out after {self.gemini_config['timeout']} seconds"
            ) from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Gemini request failed: {e}") from e

        logger.debug("Received response (status: %s)", response.status_code)
        if response.status_code != 200:
            error = _error_details(response)
            message = error.get("message", "Unknown error")
            if _is_invalid_key(response.status_code, error):
                raise ConfigurationError(
                    f"Gemini rejected the API key (status {response.status_code}): {message}"
                )
            raise TransportError(
                f"Gemini API returned status {response.status_code}: {message}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise ProviderProtocolError(f"Response body is not valid JSON: {e}") from e
