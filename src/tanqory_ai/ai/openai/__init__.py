"""OpenAI module for the Responses API."""

from tanqory_ai.ai.openai.config import OpenAISettings, get_openai_settings
from tanqory_ai.ai.openai.exceptions import (
    OpenAIAuthenticationError,
    OpenAIConfigurationError,
    OpenAIConnectionError,
    OpenAIError,
    OpenAIGatewayError,
    OpenAIRateLimitError,
    OpenAIServerError,
    OpenAITimeoutError,
)
from tanqory_ai.ai.openai.gateway import ResponsesGateway
from tanqory_ai.ai.openai.schemas import (
    FALLBACK_REPLY,
    ResponsesRequest,
    extract_text,
    parse_response,
)

__all__ = [
    "FALLBACK_REPLY",
    "OpenAISettings",
    "get_openai_settings",
    "OpenAIError",
    "OpenAIConfigurationError",
    "OpenAIGatewayError",
    "OpenAIAuthenticationError",
    "OpenAIRateLimitError",
    "OpenAIServerError",
    "OpenAITimeoutError",
    "OpenAIConnectionError",
    "ResponsesGateway",
    "ResponsesRequest",
    "extract_text",
    "parse_response",
]
