"""
Assistant chat service.

Composes a request from the company memory and the conversation, sends it to
the model endpoint and returns the reply as display text.
"""

from collections.abc import Sequence

from tanqory_ai.ai.chat.composer import PromptComposer
from tanqory_ai.ai.chat.schemas import ChatOptions, ConversationTurn
from tanqory_ai.ai.openai.gateway import ResponsesGateway
from tanqory_ai.ai.openai.schemas import extract_text
from tanqory_ai.utils.logger import logger


class AssistantChatService:
    """Service for company-memory backed assistant replies."""

    def __init__(
        self,
        composer: PromptComposer | None = None,
        gateway: ResponsesGateway | None = None,
    ) -> None:
        self.composer = composer or PromptComposer()
        self.gateway = gateway or ResponsesGateway(self.composer.settings)

    async def assistant_reply(
        self,
        message: str,
        options: ChatOptions,
        history: Sequence[ConversationTurn] | None = None,
    ) -> str:
        """
        Produce the assistant's reply to one user message.

        Args:
            message: New user message
            options: Identity and tone for this request
            history: Prior turns owned by the caller

        Returns:
            str: Reply text; a fixed fallback when the model returned no text

        Raises:
            OpenAIConfigurationError: If no API key is configured
            OpenAIGatewayError: If the model endpoint call fails
        """
        request = await self.composer.compose(message, options, history)

        logger.info(
            "Requesting assistant reply",
            model=request.model,
            tone=options.tone.value,
            history_turns=len(request.input) - 2,
        )

        data = await self.gateway.create_response(request)
        reply = extract_text(data)

        logger.info("Assistant reply received", reply_chars=len(reply))
        return reply

    async def close(self) -> None:
        await self.gateway.close()


_chat_service: AssistantChatService | None = None


def get_chat_service() -> AssistantChatService:
    """
    Get or create the chat service singleton.

    Returns:
        AssistantChatService: The chat service instance
    """
    global _chat_service
    if _chat_service is None:
        _chat_service = AssistantChatService()
        logger.info("Initialized AssistantChatService")
    return _chat_service


def set_chat_service(service: AssistantChatService | None) -> None:
    global _chat_service
    _chat_service = service


async def assistant_reply(
    message: str,
    options: ChatOptions,
    history: Sequence[ConversationTurn] | None = None,
) -> str:
    """Reply to ``message`` using the shared chat service."""
    return await get_chat_service().assistant_reply(message, options, history)


async def close_chat_service() -> None:
    """Release the shared service's HTTP client, if one was created."""
    if _chat_service is not None:
        await _chat_service.close()
