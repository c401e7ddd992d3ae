"""Cry analysis pipeline package.

Modules are organised by the order in which `/analyze-baby-cry` executes:

1. `ingestion` – read the upload and resolve its MIME type.
2. `prompts` – pick the locale-specific instruction template.
3. `classification` – call the model and normalize its JSON output.
4. `flow` – human-readable description of the end-to-end stages.
"""

from .classification import classify_recording, normalize_response
from .flow import CryAnalysisPipeline, PipelineStage
from .ingestion import read_audio_asset, resolve_mime_type
from .prompts import DEFAULT_LOCALE, Locale, PROMPT_TEMPLATES, select_prompt
from .types import AudioAsset, ClassificationOutcome

__all__ = [
    "AudioAsset",
    "ClassificationOutcome",
    "CryAnalysisPipeline",
    "DEFAULT_LOCALE",
    "Locale",
    "PROMPT_TEMPLATES",
    "PipelineStage",
    "classify_recording",
    "normalize_response",
    "read_audio_asset",
    "resolve_mime_type",
    "select_prompt",
]
