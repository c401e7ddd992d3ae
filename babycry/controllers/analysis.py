"""Baby cry analysis endpoint.

For a stage-by-stage map see `babycry.pipelines.cry.flow.CryAnalysisPipeline`.
The POST `/analyze-baby-cry` pipeline performs:

1. Validation of the multipart upload (present, non-empty, within limits).
2. MIME resolution and locale prompt selection.
3. Gemini call with the audio inlined and JSON output requested.
4. Contract validation, degrading to `{"raw": ...}` when the answer is unusable.
"""

import logging
from typing import Optional, Union

from fastapi import APIRouter, File, Form, HTTPException, UploadFile, status
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile as StarletteUploadFile

from babycry.config.settings import settings
from babycry.controllers.dependencies import InferenceClientDep
from babycry.pipelines.cry import (
    CryAnalysisPipeline,
    classify_recording,
    read_audio_asset,
)
from babycry.services.inference import InferenceError
from babycry.views import ErrorResponse

router = APIRouter(tags=["analysis"])

logger = logging.getLogger(__name__)

RESULT_HEADER = "X-Analysis-Result"
PIPELINE_STAGES = tuple(CryAnalysisPipeline.describe())
"""Ordered pipeline metadata used for quick reference and debugging."""

_AUDIO_FILE_UPLOAD = File(None)
_REGION_FORM = Form(None)


@router.post(
    "/analyze-baby-cry",
    responses={
        200: {"description": "ClassificationResult, or RawResult when the model output is unusable."},
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def analyze_baby_cry(
    client: InferenceClientDep,
    audio: Union[UploadFile, str, None] = _AUDIO_FILE_UPLOAD,
    region: Optional[str] = _REGION_FORM,
) -> JSONResponse:
    """Classify an uploaded recording and relay the model's JSON answer."""

    # A plain text field named "audio" carries no upload.
    if not isinstance(audio, StarletteUploadFile):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No audio file uploaded.",
        )

    asset = await read_audio_asset(audio, max_bytes=settings.max_upload_bytes)

    try:
        outcome = await classify_recording(asset, region, client)
    except InferenceError as exc:
        logger.error("Inference failed file=%s: %s", asset.filename, exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc) or "Inference service failed.",
        ) from exc
    except Exception as exc:
        logger.exception("Unexpected failure while analyzing file=%s", asset.filename)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc) or "Inference service failed.",
        ) from exc

    if outcome.kind == "raw":
        logger.info("Returning raw model text file=%s reason=%s", asset.filename, outcome.reason)

    return JSONResponse(
        content=outcome.to_payload(),
        headers={RESULT_HEADER: outcome.kind},
    )


__all__ = ["router", "RESULT_HEADER", "PIPELINE_STAGES"]
