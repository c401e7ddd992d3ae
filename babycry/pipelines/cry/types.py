"""Typed containers shared across the cry analysis pipeline.

These dataclasses live in their own module so the other stages
(`ingestion`, `prompts`, `classification`) can import them without
creating circular dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Optional

from babycry.services.response_contract import ClassificationResult, RawResult

OutcomeKind = Literal["structured", "raw"]


@dataclass(frozen=True)
class AudioAsset:
    """Uploaded recording held in memory for the duration of one request."""

    data: bytes
    content_type: Optional[str] = None
    filename: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.data:
            raise ValueError("AudioAsset requires non-empty audio bytes")


@dataclass(frozen=True)
class ClassificationOutcome:
    """Either a validated classification or the model's raw text.

    ``reason`` records why the structured parse was abandoned
    (``invalid_json`` or ``schema_mismatch``) and is ``None`` otherwise.
    """

    kind: OutcomeKind
    raw_text: str
    result: Optional[ClassificationResult] = None
    reason: Optional[str] = None

    @classmethod
    def structured(cls, result: ClassificationResult, raw_text: str) -> "ClassificationOutcome":
        return cls(kind="structured", raw_text=raw_text, result=result)

    @classmethod
    def raw(cls, raw_text: str, reason: str) -> "ClassificationOutcome":
        return cls(kind="raw", raw_text=raw_text, reason=reason)

    def to_payload(self) -> dict[str, Any]:
        if self.result is not None:
            return self.result.to_payload()
        return RawResult(raw=self.raw_text).model_dump()


__all__ = ["AudioAsset", "ClassificationOutcome", "OutcomeKind"]
