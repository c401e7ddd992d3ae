"""Contract shared by every inference backend the controllers can be wired to."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence


class InferenceError(RuntimeError):
    """Raised when the upstream inference call fails."""


class InferenceTimeoutError(InferenceError):
    """Raised when the upstream call exceeds the configured bound."""


@dataclass(frozen=True)
class ChatTurn:
    """One conversation entry, already mapped to the backend's role names."""

    role: str
    text: str


class InferenceClient(ABC):
    """Generative backend used by the classification pipeline and chat relay"""

    @abstractmethod
    async def generate_json(self, *, prompt: str, audio: bytes, mime_type: str) -> str:
        """Send instructions plus an inline audio blob, asking for JSON text back."""

    @abstractmethod
    async def chat(
        self,
        turns: Sequence[ChatTurn],
        *,
        system_instruction: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> str:
        ...


__all__ = ["ChatTurn", "InferenceClient", "InferenceError", "InferenceTimeoutError"]
