from typing import Optional, Sequence

from app.logging_config import get_logger
from app.services.llm import LLMError, LLMProvider, OpenRouterProvider
from app.services.result import Result

logger = get_logger("completion_service")

MSG_NOT_CONFIGURED = "عذراً، النظام غير مُكوّن بعد. يرجى التواصل مع المسؤول."
MSG_AI_ERROR = "عذراً، حدث خطأ في النظام. يرجى المحاولة مرة أخرى."
MSG_NO_ANSWER = "عذراً، لم أتمكن من الرد."


def build_prompt(system_prompt: str, history: Sequence[dict]) -> list[dict]:
    return [{"role": "system", "content": system_prompt or ""}, *history]


async def complete(
    system_prompt: str,
    history: Sequence[dict],
    api_key: str,
    model_name: str,
    provider: Optional[LLMProvider] = None,
) -> Result[str]:
    """
    Ask the completion endpoint for the next assistant turn.

    Returns Result with the reply text. An empty reply is still a success and
    becomes MSG_NO_ANSWER; remote and transport failures are failures with
    status_code and body preserved for logging.
    """
    provider = provider or OpenRouterProvider(api_key=api_key, default_model=model_name)
    messages = build_prompt(system_prompt, history)

    try:
        response = await provider.generate(messages, model=model_name)
    except LLMError as exc:
        logger.error(
            "Completion request failed",
            extra={
                "context": {
                    "error_code": exc.code,
                    "status_code": exc.status_code,
                    "body": (exc.body or str(exc))[:500],
                }
            },
        )
        return Result.failure(exc.body or str(exc), exc.code, status_code=exc.status_code)

    content = response.content or ""
    if not content:
        logger.warning("Completion returned empty content", extra={"context": {"model": response.model}})
        return Result.success(MSG_NO_ANSWER)
    return Result.success(content)
