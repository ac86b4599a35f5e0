from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Dict, List, Optional

import requests

from app import config
from app.llm.persona import ACKNOWLEDGEMENT, persona_prompt
from app.providers.base import ConfigurationError, GenerationError, GenerationProvider, UpstreamError

logger = logging.getLogger(__name__)


def build_contents(messages: List[Dict[str, Any]], today: Optional[date] = None) -> List[Dict[str, Any]]:
    """
    Transcript -> Gemini `contents`.
    System turns are dropped, assistant -> model, user -> user. The persona
    instruction and its acknowledgement lead the list, but only when at least
    one non-system turn remains.
    """
    contents = [
        {
            "role": "model" if m.get("role") == "assistant" else "user",
            "parts": [{"text": m.get("content") or ""}],
        }
        for m in messages or []
        if m.get("role") != "system"
    ]
    if not contents:
        return contents

    preamble = [
        {"role": "user", "parts": [{"text": persona_prompt(today)}]},
        {"role": "model", "parts": [{"text": ACKNOWLEDGEMENT}]},
    ]
    return preamble + contents


def extract_text(data: Any) -> str:
    """First candidate's first text part; "" for any other shape."""
    if not isinstance(data, dict):
        return ""
    candidates = data.get("candidates") or []
    if not isinstance(candidates, list) or not candidates:
        return ""
    content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
    parts = (content or {}).get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        return ""
    text = parts[0].get("text")
    return text if isinstance(text, str) else ""


class GeminiProvider(GenerationProvider):
    """
    Direct generateContent call (non-streaming).
    The API key is read per call so a missing key fails the request, not the process.
    """

    def __init__(
        self,
        model: str = config.GEMINI_MODEL,
        base_url: str = config.GEMINI_API_BASE,
        timeout: float = config.GEMINI_TIMEOUT,
        api_key: Callable[[], Optional[str]] = config.gemini_api_key,
    ):
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._api_key = api_key

    def _payload(self, messages: List[Dict[str, Any]]) -> Dict[str, Any]:
        return {
            "contents": build_contents(messages),
            "generationConfig": {
                "temperature": config.TEMPERATURE,
                "maxOutputTokens": config.MAX_OUTPUT_TOKENS,
            },
        }

    def generate(self, messages: List[Dict[str, Any]]) -> str:
        key = self._api_key()
        if not key:
            raise ConfigurationError("Missing Gemini API key")

        url = f"{self.base_url}/{self.model}:generateContent"
        try:
            r = requests.post(
                url,
                params={"key": key},
                json=self._payload(messages),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning("Gemini request failed: %s", e)
            raise GenerationError(f"Failed to process request: {e}", status=502) from e

        if not r.ok:
            logger.error("Gemini API error %s: %s", r.status_code, r.text[:200])
            raise UpstreamError(r.status_code, r.text)

        try:
            data = r.json()
        except ValueError:
            logger.warning("Gemini returned a non-JSON body, using empty reply")
            return ""

        text = extract_text(data)
        if not text:
            logger.info("Gemini response had no text part")
        return text
