"""Thin Gemini client wrapper for audio classification and chat invocations."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Optional, Sequence

import google.generativeai as genai

from babycry.config.settings import GeminiConfig
from babycry.telemetry import record_inference_failure

from .inference import ChatTurn, InferenceClient, InferenceError, InferenceTimeoutError

logger = logging.getLogger(__name__)

ModelFactory = Callable[..., Any]


class GeminiClient(InferenceClient):
    """Invoke Google Gemini models with standard configuration."""

    def __init__(
        self,
        *,
        api_key: Optional[str],
        model_name: str,
        timeout_seconds: float,
        chat_temperature: float = 0.7,
        model_factory: ModelFactory | None = None,
    ) -> None:
        self._model_name = model_name
        self._timeout_seconds = timeout_seconds
        self._chat_temperature = chat_temperature
        self._model_factory = model_factory or genai.GenerativeModel
        self._configured = bool(api_key)

        if api_key:
            genai.configure(api_key=api_key)
        else:
            logger.warning("Gemini API key is not configured; inference calls will fail")

    @classmethod
    def from_settings(cls, config: GeminiConfig) -> "GeminiClient":
        api_key = config.api_key.get_secret_value() if config.api_key else None
        return cls(
            api_key=api_key,
            model_name=config.model,
            timeout_seconds=config.timeout_seconds,
            chat_temperature=config.chat_temperature,
        )

    async def generate_json(self, *, prompt: str, audio: bytes, mime_type: str) -> str:
        """Run a single-shot prompt + inline audio call constrained to JSON output."""

        def _call() -> str:
            model = self._model_factory(
                self._model_name,
                generation_config={"response_mime_type": "application/json"},
            )
            # The SDK base64-encodes inline blobs on the wire.
            response = model.generate_content(
                [prompt, {"mime_type": mime_type, "data": audio}],
                request_options={"timeout": self._timeout_seconds},
            )
            return response.text

        return await self._run("analyze", _call)

    async def chat(
        self,
        turns: Sequence[ChatTurn],
        *,
        system_instruction: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> str:
        """Send the whole conversation and return the model's next reply."""

        model_kwargs: dict[str, Any] = {
            "generation_config": {
                "temperature": (
                    temperature if temperature is not None else self._chat_temperature
                ),
            },
        }
        if system_instruction:
            model_kwargs["system_instruction"] = system_instruction

        contents = [{"role": turn.role, "parts": [turn.text]} for turn in turns]

        def _call() -> str:
            model = self._model_factory(self._model_name, **model_kwargs)
            response = model.generate_content(
                contents,
                request_options={"timeout": self._timeout_seconds},
            )
            return response.text

        text = (await self._run("chat", _call)).strip()
        if not text:
            record_inference_failure("chat", "empty")
            raise InferenceError("Inference service returned an empty response.")
        return text

    async def _run(self, operation: str, call: Callable[[], str]) -> str:
        if not self._configured:
            record_inference_failure(operation, "unconfigured")
            raise InferenceError("Gemini API key is not configured.")

        try:
            # The SDK call cannot be interrupted; on timeout the worker thread is abandoned.
            return await asyncio.wait_for(
                asyncio.to_thread(call),
                timeout=self._timeout_seconds,
            )
        except asyncio.TimeoutError as exc:
            record_inference_failure(operation, "timeout")
            raise InferenceTimeoutError(
                f"Inference service did not respond within {self._timeout_seconds:g} seconds."
            ) from exc
        except Exception as exc:
            record_inference_failure(operation, "error")
            raise InferenceError(str(exc)) from exc


__all__ = ["GeminiClient"]
