"""
Prompt composer for assistant replies.

Builds the Responses API request in a fixed order: persona instructions,
company memory, the most recent history turns, then the new user message.
"""

from collections.abc import Sequence

from tanqory_ai.ai.chat.config import get_chat_settings
from tanqory_ai.ai.chat.prompts import build_memory_block, build_persona_prompt
from tanqory_ai.ai.chat.schemas import ChatOptions, ConversationTurn, Role
from tanqory_ai.ai.openai.config import OpenAISettings, get_openai_settings
from tanqory_ai.ai.openai.exceptions import OpenAIConfigurationError
from tanqory_ai.ai.openai.schemas import InputContent, InputMessage, ResponsesRequest
from tanqory_ai.memory.cache import MemoryCache, get_memory_cache


def turn_to_message(turn: ConversationTurn) -> InputMessage:
    """Map a history turn to its wire role and content type.

    Assistant turns are replayed as ``output_text``; user turns as ``input_text``.
    """
    if turn.role == Role.ASSISTANT:
        return InputMessage(
            role="assistant",
            content=[InputContent(type="output_text", text=turn.content)],
        )
    return InputMessage(
        role="user",
        content=[InputContent(type="input_text", text=turn.content)],
    )


def recent_turns(
    history: Sequence[ConversationTurn], limit: int
) -> list[ConversationTurn]:
    """Return at most ``limit`` trailing turns, in their original order."""
    if limit <= 0:
        return []
    return list(history[-limit:])


class PromptComposer:
    """Assembles complete model requests."""

    def __init__(
        self,
        settings: OpenAISettings | None = None,
        memory_cache: MemoryCache | None = None,
        history_turn_limit: int | None = None,
    ) -> None:
        self.settings = settings or get_openai_settings()
        self.memory_cache = memory_cache or get_memory_cache()
        self.history_turn_limit = (
            history_turn_limit
            if history_turn_limit is not None
            else get_chat_settings().history_turn_limit
        )

    async def compose(
        self,
        message: str,
        options: ChatOptions,
        history: Sequence[ConversationTurn] | None = None,
    ) -> ResponsesRequest:
        """Build the request for one user message.

        Args:
            message: New user message
            options: Identity and tone for this request
            history: Prior turns owned by the caller; only the most recent
                ``history_turn_limit`` are sent

        Returns:
            ResponsesRequest: Request body ready for the gateway

        Raises:
            OpenAIConfigurationError: If no API key is configured. Raised before
                the memory is loaded and before any network call.
        """
        if not self.settings.resolved_api_key():
            raise OpenAIConfigurationError(
                "OpenAI API key is not configured (OPENAI_API_KEY)"
            )

        memory = await self.memory_cache.get_memory()

        system = InputMessage(
            role="system",
            content=[
                InputContent(type="input_text", text=build_persona_prompt(options)),
                InputContent(type="input_text", text=build_memory_block(memory)),
            ],
        )
        conversation = [
            turn_to_message(turn)
            for turn in recent_turns(history or (), self.history_turn_limit)
        ]
        user = InputMessage(
            role="user",
            content=[InputContent(type="input_text", text=message)],
        )

        return ResponsesRequest(
            model=self.settings.model_name,
            input=[system, *conversation, user],
        )
