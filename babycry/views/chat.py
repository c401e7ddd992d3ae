"""Schemas for the conversational relay."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

# Client role names accepted on the wire, mapped to Gemini's roles.
ROLE_ALIASES = {
    "user": "user",
    "model": "model",
    "assistant": "model",
    "bot": "model",
}


class ChatMessage(BaseModel):
    role: str
    text: Optional[str] = None
    content: Optional[str] = None

    model_config = {"extra": "ignore"}

    @field_validator("role", mode="before")
    @classmethod
    def normalize_role(cls, value: object) -> str:
        role = str(value or "").strip().lower()
        if role not in ROLE_ALIASES:
            raise ValueError(f"Unsupported role '{value}'. Use 'user' or 'model'.")
        return ROLE_ALIASES[role]

    @model_validator(mode="after")
    def require_body(self) -> "ChatMessage":
        if not self.body:
            raise ValueError("Each conversation entry needs a non-empty 'text' or 'content'.")
        return self

    @property
    def body(self) -> str:
        return (self.text or self.content or "").strip()


class ChatConfig(BaseModel):
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    system_instruction: Optional[str] = Field(default=None, alias="systemInstruction")

    model_config = {"populate_by_name": True, "extra": "ignore"}


class ChatRequest(BaseModel):
    conversation: List[ChatMessage] = Field(min_length=1)
    config: Optional[ChatConfig] = None

    @model_validator(mode="after")
    def require_user_turn_last(self) -> "ChatRequest":
        if self.conversation[-1].role != "user":
            raise ValueError("The last message in the conversation must have role 'user'.")
        return self


class ChatResponse(BaseModel):
    result: str
