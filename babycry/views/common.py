"""Common response schemas."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    message: str


class ChatErrorResponse(BaseModel):
    error: str
