"""Conversational relay to Gemini."""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from babycry.controllers.dependencies import InferenceClientDep
from babycry.services.inference import ChatTurn
from babycry.views import ChatConfig, ChatErrorResponse, ChatRequest, ChatResponse

router = APIRouter(prefix="/api", tags=["chat"])

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ChatErrorResponse(error=message).model_dump(),
    )


def _describe_validation_error(exc: ValidationError) -> str:
    """Flatten the first pydantic error into a client-facing sentence."""

    first = exc.errors()[0]
    message = str(first.get("msg", "Invalid request body."))
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {message}" if location else message


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ChatErrorResponse}, 500: {"model": ChatErrorResponse}},
)
async def chat(request: Request, client: InferenceClientDep):
    """Forward a role-tagged conversation and return the model's reply."""

    try:
        payload = await request.json()
    except ValueError:
        return _error(status.HTTP_400_BAD_REQUEST, "Request body must be valid JSON.")

    try:
        chat_request = ChatRequest.model_validate(payload)
    except ValidationError as exc:
        return _error(status.HTTP_400_BAD_REQUEST, _describe_validation_error(exc))

    config = chat_request.config or ChatConfig()
    turns = [ChatTurn(role=message.role, text=message.body) for message in chat_request.conversation]

    try:
        result = await client.chat(
            turns,
            system_instruction=config.system_instruction,
            temperature=config.temperature,
        )
    except Exception as exc:
        logger.exception("Chat relay failed turns=%s", len(turns))
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            str(exc) or "Inference service failed.",
        )

    return ChatResponse(result=result)


__all__ = ["router"]
