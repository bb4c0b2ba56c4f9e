# bfhl/clients/gemini.py
"""
Minimal client for the Gemini generateContent endpoint.

Only what the "AI" operation needs: send one prompt, pull the first word out
of the first candidate's text.
"""

import logging
from typing import Any, Dict, Optional

import requests

from bfhl.config import GEMINI_BASE_URL, GEMINI_MODEL, Settings

logger = logging.getLogger(__name__)

UNKNOWN_ANSWER = "Unknown"


class GeminiConfigError(RuntimeError):
    pass


def first_word(response: Any) -> str:
    """
    candidates[0].content.parts[0].text, cut at the first space.

    Any missing piece of that path (or an empty first word) yields "Unknown".
    A text field that is present but not a string raises TypeError.
    """
    try:
        text = response["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return UNKNOWN_ANSWER
    if text is None:
        return UNKNOWN_ANSWER
    if not isinstance(text, str):
        raise TypeError(f"candidate text is {type(text).__name__}, not a string")
    return text.split(" ")[0] or UNKNOWN_ANSWER


class GeminiClient:
    def __init__(
        self,
        api_key: str,
        model: str = GEMINI_MODEL,
        base_url: str = GEMINI_BASE_URL,
        timeout: Optional[float] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiClient":
        return cls(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            base_url=settings.gemini_base_url,
            timeout=settings.gemini_timeout,
        )

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def generate(self, prompt: str) -> Dict[str, Any]:
        if not self.api_key:
            raise GeminiConfigError("GEMINI_API_KEY is not configured")

        logger.debug("POST %s (%d prompt chars)", self.endpoint, len(prompt))
        # key goes in a header so it never shows up in URLs or error messages
        response = requests.post(
            self.endpoint,
            json={"contents": [{"parts": [{"text": prompt}]}]},
            headers={"x-goog-api-key": self.api_key},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()

    def ask(self, prompt: str) -> str:
        return first_word(self.generate(prompt))
