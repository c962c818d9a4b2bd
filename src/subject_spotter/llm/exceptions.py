"""Exception classes for LLM client operations in Subject Spotter.

The exception hierarchy:
- LLMClientError: Base class for all LLM-related errors
- APIError: HTTP API communication failures
- RateLimitError: API rate limiting issues
- LLMConnectionError: Network connectivity issues
- AuthenticationError: API key/authentication failures
"""

from __future__ import annotations


class LLMClientError(Exception):
    """Base exception class for all LLM client operations."""

    def __init__(
        self,
        message: str,
        *,
        client_type: str | None = None,
        operation: str | None = None,
    ) -> None:
        """Initialize LLMClientError with context information.

        Args:
            message: Descriptive error message.
            client_type: Type of LLM client ('openai', 'claude').
            operation: Operation being performed when error occurred.
        """
        super().__init__(message)
        self.client_type = client_type
        self.operation = operation

    def __str__(self) -> str:
        """Return formatted error message with context."""
        parts = [super().__str__()]
        if self.client_type:
            parts.append(f'Client: {self.client_type}')
        if self.operation:
            parts.append(f'Operation: {self.operation}')
        return ' | '.join(parts)


class APIError(LLMClientError):
    """Exception for HTTP API communication errors."""

    def __init__(
        self,
        message: str,
        *,
        client_type: str | None = None,
        operation: str | None = None,
        status_code: int | None = None,
    ) -> None:
        """Initialize APIError with detailed API context.

        Args:
            message: Descriptive error message.
            client_type: Type of LLM client ('openai', 'claude').
            operation: Operation being performed when error occurred.
            status_code: HTTP status code from the API response.
        """
        super().__init__(message, client_type=client_type, operation=operation)
        self.status_code = status_code


class RateLimitError(APIError):
    """Exception for API rate limiting errors."""

    def __init__(
        self,
        message: str,
        *,
        client_type: str | None = None,
        operation: str | None = None,
    ) -> None:
        super().__init__(
            message,
            client_type=client_type,
            operation=operation,
            status_code=429
        )


class LLMConnectionError(LLMClientError):
    """Exception for network connectivity issues."""


class AuthenticationError(LLMClientError):
    """Exception for API authentication and authorization failures."""
