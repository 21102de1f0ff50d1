"""
Chat request/response schemas.

``ConversationTurn`` and ``ChatOptions`` are what the client sends with every
message; the pipeline only reads them.
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class Role(str, Enum):
    """Author of a conversation turn."""

    USER = "user"
    ASSISTANT = "assistant"


class Tone(str, Enum):
    """Response style requested by the user."""

    BALANCED = "balanced"
    DETAILED = "detailed"
    CONCISE = "concise"


class ConversationTurn(BaseModel):
    """One message of the conversation history."""

    role: Role
    content: str


class ChatOptions(BaseModel):
    """Per-request identity and style options."""

    model_config = {"populate_by_name": True}

    user_name: str = Field(..., alias="userName", description="Display name of the user")
    persona: str = Field(..., description="Role the user works in, e.g. 'Support Lead'")
    email: str = Field(..., description="Contact email of the user")
    tone: Tone = Field(Tone.BALANCED, description="Requested response style")


class ChatReplyRequest(BaseModel):
    """Body of ``POST /chat/reply``."""

    message: str = Field(..., description="New user message")
    options: ChatOptions
    history: list[ConversationTurn] = Field(default_factory=list)

    @field_validator("message")
    @classmethod
    def validate_message(cls, v: str) -> str:
        """Reject messages with no visible text."""
        if not v.strip():
            raise ValueError("message must not be blank")
        return v


class ChatReplyResponse(BaseModel):
    """Assistant reply returned to the client."""

    reply: str


class ChatErrorDetail(BaseModel):
    """Error body for failures that are not assistant replies."""

    code: str
    message: str
