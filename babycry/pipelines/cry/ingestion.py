"""Request ingestion helpers (Stage 01 of the cry analysis pipeline)."""

from __future__ import annotations

import mimetypes
import os
from typing import Final

from fastapi import HTTPException, UploadFile, status

from .types import AudioAsset

DEFAULT_AUDIO_TYPE: Final[str] = "audio/wav"
BINARY_FALLBACK_TYPE: Final[str] = "application/octet-stream"

# Mobile clients frequently upload recordings as octet-stream, so the
# extension is the only reliable hint left.
_EXTENSION_TYPES: Final[dict[str, str]] = {
    ".3gp": "audio/3gpp",
    ".aac": "audio/aac",
    ".aif": "audio/aiff",
    ".aiff": "audio/aiff",
    ".amr": "audio/amr",
    ".caf": "audio/x-caf",
    ".flac": "audio/flac",
    ".m4a": "audio/mp4",
    ".mp3": "audio/mpeg",
    ".mp4": "audio/mp4",
    ".oga": "audio/ogg",
    ".ogg": "audio/ogg",
    ".opus": "audio/opus",
    ".wav": "audio/wav",
    ".weba": "audio/webm",
    ".webm": "audio/webm",
}


def _guess_from_filename(filename: str | None) -> str | None:
    if not filename:
        return None

    extension = os.path.splitext(filename.strip())[1].lower()
    if not extension:
        return None

    known = _EXTENSION_TYPES.get(extension)
    if known:
        return known

    guessed_type, _ = mimetypes.guess_type(filename, strict=False)
    return guessed_type


def resolve_mime_type(asset: AudioAsset) -> str:
    """Return the declared type unless it is missing or generic, then guess."""

    declared = (asset.content_type or "").strip()
    if declared and declared.lower() != BINARY_FALLBACK_TYPE:
        return declared

    return _guess_from_filename(asset.filename) or DEFAULT_AUDIO_TYPE


async def read_audio_asset(audio_file: UploadFile, *, max_bytes: int) -> AudioAsset:
    """Load the upload fully into memory, rejecting empty or oversized payloads."""

    audio_bytes = await audio_file.read(max_bytes + 1)
    await audio_file.close()

    if len(audio_bytes) > max_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"Uploaded audio file exceeds the {max_bytes} byte limit.",
        )
    if not audio_bytes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Uploaded audio file is empty.",
        )

    return AudioAsset(
        data=audio_bytes,
        content_type=audio_file.content_type,
        filename=audio_file.filename,
    )


__all__ = [
    "BINARY_FALLBACK_TYPE",
    "DEFAULT_AUDIO_TYPE",
    "read_audio_asset",
    "resolve_mime_type",
]
