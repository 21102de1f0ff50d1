"""
Wire schemas for the OpenAI Responses API.

Requests are built from typed input messages. Responses are parsed into one of
three variants: a flat ``output_text``, a structured ``output[].content[]``
list, or nothing usable. ``extract_text`` turns any of them into one display
string and never raises.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

FALLBACK_REPLY = "ฉันไม่สามารถสร้างคำตอบได้ในตอนนี้ ลองอีกครั้งภายหลังนะครับ."

TEXT_CONTENT_TYPES = frozenset({"output_text", "text"})


# Request Models
class InputContent(BaseModel):
    """One content block of an input message."""

    type: Literal["input_text", "output_text"]
    text: str


class InputMessage(BaseModel):
    """Role-tagged input message."""

    role: Literal["system", "user", "assistant"]
    content: list[InputContent]


class ResponsesRequest(BaseModel):
    """Request body for ``POST /v1/responses``."""

    model: str
    input: list[InputMessage]

    model_config = {"extra": "forbid"}


# Response Models
class OutputContent(BaseModel):
    """Content block inside an output item."""

    model_config = ConfigDict(extra="ignore")

    type: str
    text: str | None = None


class OutputItem(BaseModel):
    """Output item; non-message items (e.g. reasoning) carry no content."""

    model_config = ConfigDict(extra="ignore")

    content: list[OutputContent] = Field(default_factory=list)


class FlatTextResponse(BaseModel):
    """Response carrying the answer in a top-level ``output_text``."""

    kind: Literal["flat"] = "flat"
    output_text: str


class StructuredResponse(BaseModel):
    """Response carrying the answer in ``output[].content[]``."""

    model_config = ConfigDict(extra="ignore")

    kind: Literal["structured"] = "structured"
    output: list[OutputItem]

    def text_parts(self) -> list[str]:
        """Trimmed, non-empty text of every textual content block, in order."""
        parts = []
        for item in self.output:
            for piece in item.content:
                if piece.type not in TEXT_CONTENT_TYPES or piece.text is None:
                    continue
                text = piece.text.strip()
                if text:
                    parts.append(text)
        return parts


class EmptyResponse(BaseModel):
    """Response with no recognizable answer."""

    kind: Literal["empty"] = "empty"


ModelResponse = FlatTextResponse | StructuredResponse | EmptyResponse


def _parse_output_item(item: Any) -> OutputItem:
    """Keep the content blocks of one output item that validate; drop the rest."""
    if not isinstance(item, dict) or not isinstance(item.get("content"), list):
        return OutputItem()

    content = []
    for block in item["content"]:
        try:
            content.append(OutputContent.model_validate(block))
        except ValidationError:
            continue
    return OutputItem(content=content)


def parse_response(payload: Any) -> ModelResponse:
    """Classify a decoded response body.

    Args:
        payload: Decoded JSON as returned by the gateway

    Returns:
        ModelResponse: The first variant the payload satisfies
    """
    if not isinstance(payload, dict):
        return EmptyResponse()

    output_text = payload.get("output_text")
    if isinstance(output_text, str) and output_text.strip():
        return FlatTextResponse(output_text=output_text)

    output = payload.get("output")
    if isinstance(output, list):
        return StructuredResponse(output=[_parse_output_item(item) for item in output])

    return EmptyResponse()


def extract_text(payload: Any) -> str:
    """Reduce a response body to one display string.

    Args:
        payload: Decoded JSON as returned by the gateway

    Returns:
        str: The answer text, or ``FALLBACK_REPLY`` when none is present
    """
    response = parse_response(payload)

    if isinstance(response, FlatTextResponse):
        return response.output_text.strip()

    if isinstance(response, StructuredResponse):
        parts = response.text_parts()
        if parts:
            return "\n".join(parts)

    return FALLBACK_REPLY
