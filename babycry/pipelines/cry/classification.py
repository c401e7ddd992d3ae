"""Inference + normalization stage for the cry analysis pipeline (Stage 04)."""

from __future__ import annotations

import logging

from babycry.services.inference import InferenceClient
from babycry.services.response_contract import ClassificationResult, ResponseContractError
from babycry.telemetry import record_analysis_outcome

from .ingestion import resolve_mime_type
from .prompts import Locale, select_prompt
from .types import AudioAsset, ClassificationOutcome

logger = logging.getLogger("babycry.pipelines.cry")


def _truncate(value: str, max_length: int = 500) -> str:
    if len(value) <= max_length:
        return value
    return value[: max_length - 3] + "..."


def normalize_response(raw_text: str) -> ClassificationOutcome:
    """Validate the model text, degrading to the raw envelope instead of failing."""

    try:
        result = ClassificationResult.from_json(raw_text)
    except ResponseContractError as exc:
        logger.warning(
            "Model output did not match the classification contract reason=%s: %s",
            exc.reason,
            _truncate(str(exc), 300),
        )
        return ClassificationOutcome.raw(raw_text, reason=exc.reason)

    return ClassificationOutcome.structured(result, raw_text)


async def classify_recording(
    asset: AudioAsset,
    region: str | None,
    client: InferenceClient,
) -> ClassificationOutcome:
    """Resolve MIME, pick the prompt, call the model and normalize its answer.

    Upstream failures propagate as ``InferenceError``; malformed output does not.
    """

    mime_type = resolve_mime_type(asset)
    locale = Locale.parse(region)
    prompt = select_prompt(locale)

    logger.info(
        "Analyzing recording file=%s mime=%s bytes=%s locale=%s",
        asset.filename or "<unnamed>",
        mime_type,
        len(asset.data),
        locale.value,
    )

    raw_text = await client.generate_json(
        prompt=prompt,
        audio=asset.data,
        mime_type=mime_type,
    )
    logger.info("Raw model output locale=%s: %s", locale.value, _truncate(raw_text or ""))

    outcome = normalize_response(raw_text or "")
    record_analysis_outcome(outcome.kind, locale.value)
    return outcome


__all__ = ["classify_recording", "normalize_response"]
