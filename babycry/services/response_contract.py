"""Pydantic models for validating the classifier's JSON output.

The model is asked to answer with a bare JSON object. Anything that does not
parse, or parses into the wrong shape, is reported through
``ResponseContractError`` so the pipeline can fall back to the raw text.
"""

from __future__ import annotations

import json
from typing import Any, List, Optional

from pydantic import BaseModel, Field, PrivateAttr, ValidationError, field_validator


class ResponseContractError(ValueError):
    """Raised when the model output does not honour the classification contract."""

    def __init__(self, reason: str, detail: str) -> None:
        super().__init__(detail)
        self.reason = reason


class ClassificationResult(BaseModel):
    is_baby_cry: bool
    cause: str
    confidence: float = Field(ge=0, le=100, strict=True)
    actions: List[str]
    message: Optional[str] = None

    model_config = {"extra": "allow"}

    _source: Optional[dict[str, Any]] = PrivateAttr(default=None)

    @field_validator("is_baby_cry", mode="before")
    @classmethod
    def reject_non_boolean_flag(cls, value: Any) -> Any:
        # "yes"/"no" strings would otherwise coerce silently.
        if not isinstance(value, bool):
            raise ValueError("is_baby_cry must be a JSON boolean")
        return value

    @classmethod
    def from_json(cls, payload: str) -> "ClassificationResult":
        try:
            data = json.loads(payload)
        except (TypeError, json.JSONDecodeError) as exc:
            raise ResponseContractError("invalid_json", str(exc)) from exc

        if not isinstance(data, dict):
            raise ResponseContractError(
                "schema_mismatch",
                f"expected a JSON object, got {type(data).__name__}",
            )

        try:
            result = cls.model_validate(data)
        except ValidationError as exc:
            raise ResponseContractError("schema_mismatch", str(exc)) from exc

        result._source = data
        return result

    def to_payload(self) -> dict[str, Any]:
        """Return the object exactly as the model sent it, once it passed validation."""

        if self._source is not None:
            return dict(self._source)
        return self.model_dump()


class RawResult(BaseModel):
    raw: str


__all__ = [
    "ClassificationResult",
    "RawResult",
    "ResponseContractError",
]
