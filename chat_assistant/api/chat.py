from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from chat_assistant.providers.errors import ChatBackendError
from chat_assistant.schemas.chat import ChatRequest, ChatResponse, ErrorResponse
from chat_assistant.services.chat_service import ChatService


router = APIRouter()


def get_chat_service() -> ChatService:
    # Stateless: configuration is re-read and a new backend is built per request.
    return ChatService()


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
    summary="Send a message to the configured chat backend",
)
async def chat(
    payload: ChatRequest,
    service: ChatService = Depends(get_chat_service),
) -> ChatResponse | JSONResponse:
    """
    Forward the message to the active backend and return its reply.

    Every failure (missing configuration, unreachable provider, rejected
    request, undecodable response) is reported as HTTP 500 with an
    ``error`` message.
    """
    try:
        reply = await service.reply(payload.message)
    except ChatBackendError as exc:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=str(exc)).model_dump(),
        )
    return ChatResponse(reply=reply)
