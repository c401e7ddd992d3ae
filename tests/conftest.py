"""Shared fixtures: an in-memory inference double and a wired test client."""

from __future__ import annotations

from pathlib import Path
import sys
from typing import Any, Optional, Sequence

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from babycry.main import create_app  # noqa: E402
from babycry.services.inference import ChatTurn, InferenceClient  # noqa: E402


class FakeInferenceClient(InferenceClient):
    """Records every call and replays a canned answer or error."""

    def __init__(self) -> None:
        self.json_response: str = "{}"
        self.chat_response: str = "Sure."
        self.error: Optional[Exception] = None
        self.json_calls: list[dict[str, Any]] = []
        self.chat_calls: list[dict[str, Any]] = []

    async def generate_json(self, *, prompt: str, audio: bytes, mime_type: str) -> str:
        self.json_calls.append({"prompt": prompt, "audio": audio, "mime_type": mime_type})
        if self.error is not None:
            raise self.error
        return self.json_response

    async def chat(
        self,
        turns: Sequence[ChatTurn],
        *,
        system_instruction: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> str:
        self.chat_calls.append(
            {
                "turns": list(turns),
                "system_instruction": system_instruction,
                "temperature": temperature,
            }
        )
        if self.error is not None:
            raise self.error
        return self.chat_response


@pytest.fixture
def fake_inference() -> FakeInferenceClient:
    return FakeInferenceClient()


@pytest.fixture
def client(fake_inference: FakeInferenceClient) -> TestClient:
    """Test client whose app talks to the fake instead of Gemini."""

    return TestClient(create_app(inference_client=fake_inference))
