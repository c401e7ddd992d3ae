"""Service layer helpers for external integrations."""

from .gemini_client import GeminiClient
from .inference import ChatTurn, InferenceClient, InferenceError, InferenceTimeoutError
from .response_contract import ClassificationResult, RawResult, ResponseContractError

__all__ = [
    "ChatTurn",
    "ClassificationResult",
    "GeminiClient",
    "InferenceClient",
    "InferenceError",
    "InferenceTimeoutError",
    "RawResult",
    "ResponseContractError",
]
