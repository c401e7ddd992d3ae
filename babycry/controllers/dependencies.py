"""Common FastAPI dependencies reused across controllers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from babycry.services.inference import InferenceClient


def get_inference_client(request: Request) -> InferenceClient:
    """Return the inference client built by the app factory."""

    client = getattr(request.app.state, "inference_client", None)
    if client is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Inference client is not initialised.",
        )
    return client


InferenceClientDep = Annotated[InferenceClient, Depends(get_inference_client)]


__all__ = ["get_inference_client", "InferenceClientDep"]
