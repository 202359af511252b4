from typing import Optional

from pydantic import BaseModel, field_validator


class ChatRequest(BaseModel):
    chatInput: Optional[str] = None
    sessionId: Optional[str] = None

    @field_validator("chatInput", "sessionId", mode="before")
    @classmethod
    def coerce_numbers(cls, value: object) -> object:
        # Widgets may send numeric session ids
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value) if value else None
        return value


class ChatResponse(BaseModel):
    output: str
