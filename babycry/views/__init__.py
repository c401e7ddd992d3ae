"""Pydantic schemas used as views in the MVC architecture."""

from babycry.services.response_contract import ClassificationResult, RawResult

from .chat import ChatConfig, ChatMessage, ChatRequest, ChatResponse
from .common import ChatErrorResponse, ErrorResponse

__all__ = [
    "ChatConfig",
    "ChatErrorResponse",
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "ClassificationResult",
    "ErrorResponse",
    "RawResult",
]
