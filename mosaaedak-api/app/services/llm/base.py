from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional


@dataclass
class LLMResponse:
    content: str
    model: str
    usage: Optional[dict] = None


class LLMError(Exception):
    """Raised when the completion endpoint does not return a usable response."""

    def __init__(self, message: str, code: str = "remote_error", status_code: Optional[int] = None, body: str = ""):
        self.code = code
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    @abstractmethod
    async def generate(self, messages: List[dict], model: Optional[str] = None) -> LLMResponse:
        """Generate response from LLM."""
        pass
