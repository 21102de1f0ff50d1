"""Assistant chat pipeline: prompt composition, model call and reply text."""

from tanqory_ai.ai.chat.composer import PromptComposer
from tanqory_ai.ai.chat.schemas import ChatOptions, ConversationTurn, Role, Tone
from tanqory_ai.ai.chat.service import (
    AssistantChatService,
    assistant_reply,
    get_chat_service,
)

__all__ = [
    "AssistantChatService",
    "ChatOptions",
    "ConversationTurn",
    "PromptComposer",
    "Role",
    "Tone",
    "assistant_reply",
    "get_chat_service",
]
