from __future__ import annotations
import logging
import httpx
from dataclasses import dataclass
from app.core.errors import ConfigurationError, UpstreamError

log = logging.getLogger(__name__)

@dataclass
class OpenRouterClient:
    """Minimal chat-completions client for the OpenRouter API."""
    api_key: str
    base_url: str = "https://openrouter.ai/api/v1"
    model: str = "anthropic/claude-3.5-sonnet"
    timeout: float = 60.0
    transport: httpx.BaseTransport | None = None

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def complete(self, system: str, user: str, max_tokens: int, temperature: float) -> str:
        """Send one chat completion and return the first message's text.

        Transport failures, non-2xx statuses, provider error payloads and replies
        that do not have the chat-completions shape raise ``UpstreamError``. A
        well-formed response without choices or content yields "".
        """
        if not self.api_key:
            raise ConfigurationError("OPENROUTER_API_KEY is not set")
        url = f"{self.base_url}/chat/completions"
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            "max_tokens": max_tokens,
            "temperature": temperature,
        }
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                r = client.post(url, headers=self._headers(), json=payload)
                r.raise_for_status()
        except httpx.HTTPStatusError as e:
            log.error("OpenRouter API error: %s", e.response.status_code)
            raise UpstreamError(
                f"OpenRouter API error: {e.response.status_code} {e.response.text}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            log.error("OpenRouter request failed: %s", e)
            raise UpstreamError(f"OpenRouter request failed: {e}") from e

        try:
            data = r.json()
        except ValueError as e:
            raise UpstreamError("OpenRouter returned a non-JSON body", status_code=r.status_code) from e

        if not isinstance(data, dict):
            raise UpstreamError("OpenRouter returned an unexpected payload", status_code=r.status_code)

        if data.get("error"):
            error = data["error"]
            message = error.get("message") if isinstance(error, dict) else str(error)
            raise UpstreamError(f"OpenRouter provider error: {message}", status_code=r.status_code)

        choices = data.get("choices") or []
        if not isinstance(choices, list):
            raise UpstreamError("OpenRouter response 'choices' is not a list", status_code=r.status_code)
        if not choices:
            return ""
        message = choices[0].get("message") if isinstance(choices[0], dict) else None
        if not isinstance(message, dict):
            raise UpstreamError("OpenRouter response has no message object", status_code=r.status_code)
        content = message.get("content")
        if content is None:
            return ""
        if not isinstance(content, str):
            raise UpstreamError("OpenRouter message content is not text", status_code=r.status_code)
        return content
