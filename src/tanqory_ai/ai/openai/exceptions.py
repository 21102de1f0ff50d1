"""OpenAI API exceptions.

Every exception carries ``user_message``, a localized text the chat client can
show in place of an assistant reply.
"""

CONFIGURATION_USER_MESSAGE = (
    "ยังไม่ได้ตั้งค่า API Key สำหรับ OpenAI (OPENAI_API_KEY)"
)
GATEWAY_USER_MESSAGE = (
    "ขออภัย ระบบไม่สามารถเชื่อมต่อ OpenAI ได้ในตอนนี้ ลองอีกครั้งภายหลังครับ."
)


class OpenAIError(Exception):
    """Base exception for OpenAI API errors."""

    user_message = GATEWAY_USER_MESSAGE

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize OpenAI error.

        Args:
            message: Error message
            original_error: Original exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class OpenAIConfigurationError(OpenAIError):
    """Raised before any network I/O when no API key is configured."""

    user_message = CONFIGURATION_USER_MESSAGE


class OpenAIGatewayError(OpenAIError):
    """Exception raised when the model endpoint call fails."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_text: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize gateway error.

        Args:
            message: Error message
            status_code: HTTP status code if a response was received
            response_text: Raw response body, kept for diagnostics
            original_error: Original exception that caused this error
        """
        super().__init__(message, original_error)
        self.status_code = status_code
        self.response_text = response_text

    def __str__(self) -> str:
        if self.status_code:
            return f"OpenAI API Error ({self.status_code}): {self.message}"
        return f"OpenAI API Error: {self.message}"


class OpenAIAuthenticationError(OpenAIGatewayError):
    """Exception raised for rejected credentials (401/403)."""

    pass


class OpenAIRateLimitError(OpenAIGatewayError):
    """Exception raised for rate limit errors (429)."""

    pass


class OpenAIServerError(OpenAIGatewayError):
    """Exception raised for server errors (5xx)."""

    pass


class OpenAITimeoutError(OpenAIGatewayError):
    """Exception raised when the model call exceeds the request timeout."""

    pass


class OpenAIConnectionError(OpenAIGatewayError):
    """Exception raised when the endpoint cannot be reached."""

    pass
