"""Async gateway for the OpenAI Responses API endpoint."""

from typing import Any

import httpx

from tanqory_ai.ai.openai.config import OpenAISettings, get_openai_settings
from tanqory_ai.ai.openai.exceptions import (
    OpenAIAuthenticationError,
    OpenAIConfigurationError,
    OpenAIConnectionError,
    OpenAIGatewayError,
    OpenAIRateLimitError,
    OpenAIServerError,
    OpenAITimeoutError,
)
from tanqory_ai.ai.openai.schemas import ResponsesRequest
from tanqory_ai.utils.logger import logger


class ResponsesGateway:
    """Sends composed requests to the model endpoint.

    Returns the decoded JSON body untouched; interpreting its shape is left to
    ``schemas.extract_text``. Each call is attempted exactly once.
    """

    def __init__(
        self,
        settings: OpenAISettings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the gateway.

        Args:
            settings: OpenAI settings; defaults to the cached instance
            client: Optional preconfigured HTTP client. The gateway does not
                close a client it did not create.
        """
        self.settings = settings or get_openai_settings()
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> "ResponsesGateway":
        await self._ensure_client()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure HTTP client is initialized."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.settings.request_timeout)
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this gateway created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _headers(self) -> dict[str, str]:
        api_key = self.settings.resolved_api_key()
        if not api_key:
            raise OpenAIConfigurationError(
                "OpenAI API key is not configured (OPENAI_API_KEY)"
            )
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        }

    def _raise_for_status(self, response: httpx.Response) -> None:
        status_code = response.status_code
        if response.is_success:
            return

        body = response.text
        logger.error(
            "OpenAI request failed",
            status_code=status_code,
            response_text=body,
        )

        if status_code in (401, 403):
            raise OpenAIAuthenticationError(
                "Invalid API key or access denied",
                status_code=status_code,
                response_text=body,
            )
        if status_code == 429:
            raise OpenAIRateLimitError(
                "Rate limit exceeded", status_code=status_code, response_text=body
            )
        if status_code >= 500:
            raise OpenAIServerError(
                "Server error", status_code=status_code, response_text=body
            )
        raise OpenAIGatewayError(
            f"Unexpected status {status_code}",
            status_code=status_code,
            response_text=body,
        )

    async def create_response(self, request: ResponsesRequest) -> dict[str, Any]:
        """POST a composed request and return the decoded response body.

        Args:
            request: Fully composed request payload

        Returns:
            dict: The decoded JSON response

        Raises:
            OpenAIConfigurationError: If no API key is configured (no request is sent)
            OpenAIGatewayError: For non-2xx responses, timeouts, connection
                failures and non-JSON bodies
        """
        headers = self._headers()
        client = await self._ensure_client()

        try:
            response = await client.post(
                self.settings.endpoint_url,
                headers=headers,
                json=request.model_dump(mode="json"),
            )
        except httpx.TimeoutException as e:
            logger.error(
                "OpenAI request timed out", timeout=self.settings.request_timeout
            )
            raise OpenAITimeoutError(
                f"Request timed out after {self.settings.request_timeout}s",
                original_error=e,
            ) from e
        except httpx.RequestError as e:
            logger.error("OpenAI request error", error=str(e))
            raise OpenAIConnectionError(f"Request error: {e}", original_error=e) from e

        self._raise_for_status(response)

        try:
            return response.json()
        except ValueError as e:
            logger.error(
                "OpenAI returned a non-JSON body",
                status_code=response.status_code,
                response_text=response.text,
            )
            raise OpenAIGatewayError(
                "Invalid JSON in response",
                status_code=response.status_code,
                response_text=response.text,
                original_error=e,
            ) from e
