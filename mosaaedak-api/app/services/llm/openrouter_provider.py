from typing import List, Optional

import httpx

from app.config import settings
from app.logging_config import get_logger
from app.services.llm.base import LLMError, LLMProvider, LLMResponse

logger = get_logger("llm.openrouter")


class OpenRouterProvider(LLMProvider):
    """OpenRouter (OpenAI-compatible) chat completions provider."""

    def __init__(
        self,
        api_key: str,
        default_model: str = "openai/gpt-oss-120b",
        base_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
    ):
        self.api_key = api_key
        self.default_model = default_model
        self.base_url = base_url or settings.openrouter_api_url
        self.timeout_seconds = timeout_seconds if timeout_seconds is not None else settings.completion_timeout_seconds

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "HTTP-Referer": settings.completion_http_referer,
            "X-Title": settings.completion_app_title,
        }

    async def generate(self, messages: List[dict], model: Optional[str] = None) -> LLMResponse:
        """Generate response from OpenRouter. Raises LLMError on any failure."""
        model = model or self.default_model
        payload = {"model": model, "messages": messages}
        logger.debug(f"OpenRouter request: model={model}, messages_count={len(messages)}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.post(self.base_url, headers=self._headers(), json=payload)
        except httpx.HTTPError as exc:
            raise LLMError(f"OpenRouter transport error: {exc}", code="transport_error") from exc

        logger.debug(f"OpenRouter response status: {response.status_code}")

        if not response.is_success:
            raise LLMError(
                f"OpenRouter API error: {response.status_code}",
                code="remote_error",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise LLMError(
                "OpenRouter returned invalid JSON",
                code="malformed_response",
                status_code=response.status_code,
                body=response.text,
            ) from exc

        if not isinstance(data, dict):
            raise LLMError("OpenRouter returned unexpected payload", code="malformed_response", body=response.text)

        content = ""
        choices = data.get("choices")
        if isinstance(choices, list) and choices and isinstance(choices[0], dict):
            message = choices[0].get("message") or {}
            content = message.get("content") or ""

        return LLMResponse(
            content=content,
            model=data.get("model", model),
            usage=data.get("usage"),
        )
