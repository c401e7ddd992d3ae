"""High-level orchestration map for the cry analysis pipeline.

The HTTP controller in ``babycry/controllers/analysis.py`` handles the
transport concerns, but this module documents the canonical execution
order so contributors can navigate the codebase quickly:

1. ``ingestion`` – validate the upload and obtain the raw audio bytes.
2. ``ingestion`` – resolve a usable MIME type for the recording.
3. ``prompts`` – pick the locale-specific instruction template.
4. ``classification`` – call the inference service with prompt + audio.
5. ``classification`` – validate the JSON or fall back to the raw text.
6. ``controllers.analysis`` – serialise the outcome into the HTTP response.

The pipeline runs once per request. There are no retries, so every request
either succeeds, degrades to raw text, or fails with the upstream error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List


@dataclass(frozen=True)
class PipelineStage:
    """Human-readable description of one stage in the cry pipeline."""

    order: int
    name: str
    module: str
    summary: str


class CryAnalysisPipeline:
    """Utility wrapper for documenting the `/analyze-baby-cry` flow."""

    _STAGES: List[PipelineStage] = [
        PipelineStage(
            1,
            "Validate Input",
            "babycry.pipelines.cry.ingestion",
            "Reject missing, empty or oversized uploads before touching the model.",
        ),
        PipelineStage(
            2,
            "Resolve MIME",
            "babycry.pipelines.cry.ingestion",
            "Keep the declared type unless it is octet-stream, else guess from the filename.",
        ),
        PipelineStage(
            3,
            "Select Prompt",
            "babycry.pipelines.cry.prompts",
            "Map the region hint to a locale template (US by default).",
        ),
        PipelineStage(
            4,
            "Invoke Inference",
            "babycry.pipelines.cry.classification",
            "Send prompt + inline audio to Gemini with JSON output requested.",
        ),
        PipelineStage(
            5,
            "Parse Or Fall Back",
            "babycry.pipelines.cry.classification",
            "Validate the JSON contract; wrap anything else as a raw-text result.",
        ),
        PipelineStage(
            6,
            "Respond",
            "babycry.controllers.analysis",
            "Return the structured or raw payload with its variant header.",
        ),
    ]

    @classmethod
    def describe(cls) -> Iterable[PipelineStage]:
        """Expose the ordered list of stages for debugging and documentation."""

        return tuple(cls._STAGES)


__all__ = ["CryAnalysisPipeline", "PipelineStage"]
