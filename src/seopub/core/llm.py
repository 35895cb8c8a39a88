"""Chat-completion client used by every LLM-backed step"""

import logging

from openai import OpenAI

from seopub.errors import LLMError


logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"


class CompletionClient:
    """Single-prompt text completion over the OpenAI chat API.

    The client is created lazily so a missing key only fails the calls that
    need it, not service startup.
    """

    def __init__(self, api_key: str, model: str = DEFAULT_MODEL):
        self.api_key = (api_key or "").strip()
        self.model = model
        self._client = OpenAI(api_key=self.api_key) if self.api_key else None

    def complete(self, prompt: str, max_tokens: int = 4000, temperature: float = 0.7) -> str:
        """Send prompt as a single user message and return the reply text ('' if empty)."""
        if self._client is None:
            raise LLMError("OpenAI API key is missing. Please set OPENAI_API_KEY environment variable.")
        response = self._client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=temperature,
            max_tokens=max_tokens,
        )
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""
