"""FastAPI router for assistant chat replies."""

from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from tanqory_ai.ai.chat.schemas import (
    ChatErrorDetail,
    ChatReplyRequest,
    ChatReplyResponse,
)
from tanqory_ai.ai.chat.service import AssistantChatService, get_chat_service
from tanqory_ai.ai.openai.exceptions import (
    OpenAIConfigurationError,
    OpenAIGatewayError,
)
from tanqory_ai.utils.logger import logger

router = APIRouter(prefix="/chat", tags=["Chat"])


@router.post("/reply", response_model=ChatReplyResponse)
async def reply(
    request: ChatReplyRequest,
    chat_service: Annotated[AssistantChatService, Depends(get_chat_service)],
) -> ChatReplyResponse:
    """
    Answer one user message with company memory context.

    Args:
        request: Message, options and the client's conversation history
        chat_service: Chat service dependency

    Returns:
        ChatReplyResponse: The assistant reply

    Raises:
        HTTPException: 503 when the service is not configured, 502 when the
            model endpoint call fails
    """
    logger.info(
        "Chat reply request",
        persona=request.options.persona,
        history_turns=len(request.history),
    )

    try:
        text = await chat_service.assistant_reply(
            request.message, request.options, request.history
        )
    except OpenAIConfigurationError as e:
        logger.error("Chat service is not configured", error=str(e))
        raise HTTPException(
            status_code=HTTPStatus.SERVICE_UNAVAILABLE,
            detail=ChatErrorDetail(
                code="configuration_error", message=e.user_message
            ).model_dump(),
        ) from e
    except OpenAIGatewayError as e:
        logger.error(
            "AI reply failed",
            error=str(e),
            error_type=type(e).__name__,
            status_code=e.status_code,
        )
        raise HTTPException(
            status_code=HTTPStatus.BAD_GATEWAY,
            detail=ChatErrorDetail(
                code="gateway_error", message=e.user_message
            ).model_dump(),
        ) from e

    return ChatReplyResponse(reply=text)
