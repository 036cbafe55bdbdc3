"""
LLM gateway backed by the Groq chat completions API.
"""
import logging
from typing import Optional

import groq
from groq import Groq

from csbot.gateways.errors import LLMGatewayError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a helpful assistant providing information about a Computer Science "
    "department. Answer concisely and accurately."
)


def _error_code(exc: Exception) -> Optional[str]:
    body = getattr(exc, "body", None)
    if not isinstance(body, dict):
        return None
    if isinstance(body.get("error"), dict):
        body = body["error"]
    return body.get("code")


class LLMGateway:
    """
    Thin wrapper around the Groq client.

    One instance is built per application and shared by all requests;
    pass ``client`` to substitute the underlying SDK client.
    """

    def __init__(self, api_key: str, model: str, max_tokens: int = 4096,
                 temperature: float = 0.7, timeout: float = 30, client=None):
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self._api_key = api_key
        self._timeout = timeout
        self._client = client

    @property
    def client(self):
        # Built lazily so the app can start without an API key configured
        if self._client is None:
            if not self._api_key:
                raise LLMGatewayError("GROQ_API_KEY is not configured")
            self._client = Groq(api_key=self._api_key, timeout=self._timeout)
        return self._client

    def complete(self, question: str) -> str:
        """
        Ask the model a question about the department.

        Returns:
            The trimmed completion text

        Raises:
            LLMGatewayError: on any provider or transport failure
        """
        try:
            completion = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": question},
                ],
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except groq.NotFoundError as e:
            model_missing = _error_code(e) == "model_not_found"
            logger.error(f"Groq model lookup failed for {self.model}: {e}")
            raise LLMGatewayError(str(e), model_unavailable=model_missing) from e
        except groq.APIError as e:
            logger.error(f"Groq error: {e}")
            raise LLMGatewayError(str(e)) from e

        if not completion.choices:
            raise LLMGatewayError("Groq returned no choices")
        content = completion.choices[0].message.content or ""
        return content.strip()
