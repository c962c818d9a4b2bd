"""Claude client implementation using Anthropic Claude API."""

from __future__ import annotations

import logging
from typing import Any, ClassVar

import anthropic

from .base_client import Client
from .exceptions import (
    APIError,
    AuthenticationError,
    LLMClientError,
    LLMConnectionError,
    RateLimitError,
)


class ClaudeClient(Client):
    """Client for generating subject annotations with Anthropic Claude.

    With ``stream`` enabled the Messages streaming API is used and text is
    echoed to stdout as it arrives; otherwise a single non-streaming call is
    made and the text blocks of the reply are joined.
    """

    MAX_ALLOWED_TOKENS: ClassVar[int] = 20000
    DEFAULT_TEMPERATURE: ClassVar[float] = 0.0

    def __init__(
        self,
        api_key: str,
        model: str,
        *,
        stream: bool = True,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> None:
        """Initialize a Claude client.

        Args:
            api_key: Anthropic API key.
            model: Claude model to use.
            stream: Whether to stream the response and echo it to stdout.
            max_tokens: Maximum tokens in response (defaults to MAX_ALLOWED_TOKENS)
            temperature: Response randomness (0.0-1.0, defaults to DEFAULT_TEMPERATURE)

        Raises:
            ValueError: If required parameters are missing or invalid.
            LLMClientError: If client initialization fails.
        """
        if not api_key:
            raise ValueError('API key must be provided for ClaudeClient.')
        if max_tokens is None:
            max_tokens = self.MAX_ALLOWED_TOKENS
        if not (1 <= max_tokens <= self.MAX_ALLOWED_TOKENS):
            raise ValueError(
                f'max_tokens must be between 1 and {self.MAX_ALLOWED_TOKENS}'
            )
        if temperature is None:
            temperature = self.DEFAULT_TEMPERATURE
        if not (0.0 <= temperature <= 1.0):
            raise ValueError('temperature must be between 0.0 and 1.0')

        super().__init__(model, stream=stream)

        self.max_tokens = max_tokens
        self.temperature = temperature

        try:
            self.client = anthropic.Anthropic(api_key=api_key)
        except Exception as e:
            raise LLMClientError(
                f'Failed to initialize Claude client: {e}',
                client_type=self.client_type,
                operation='initialization'
            ) from e
        logging.info(
            'Claude Client initialized with model=%s, max_tokens=%d, temperature=%.2f',
            model,
            max_tokens,
            temperature
        )

    @staticmethod
    def _system_message() -> str:
        return (
            'You are an expert archivist who reads historical documents and marks up '
            'every mention of a known subject (person, place or organization).'
        )

    def _message_payload(self, prompt: str) -> dict[str, Any]:
        """Build the Messages API parameters shared by both call modes."""
        return {
            'model': self.model,
            'system': self._system_message(),
            'messages': [{'role': 'user', 'content': prompt}],
            'max_tokens': self.max_tokens,
            'temperature': self.temperature,
        }

    def _complete(self, prompt: str) -> str:
        """Call the Messages API and return the response text.

        Raises:
            AuthenticationError: If API key is invalid.
            RateLimitError: If rate limit is exceeded.
            LLMConnectionError: If the API cannot be reached.
            APIError: If API call fails or the reply is empty.
        """
        payload = self._message_payload(prompt)
        try:
            if self.stream:
                text = self._complete_streaming(payload)
            else:
                response = self.client.messages.create(**payload)
                text = self._extract_response_text_from_message(response)
        except anthropic.AuthenticationError as e:
            raise AuthenticationError(
                f'Claude authentication failed: {e}',
                client_type=self.client_type,
                operation='completions'
            ) from e
        except anthropic.RateLimitError as e:
            raise RateLimitError(
                f'Claude API rate limit exceeded: {e}',
                client_type=self.client_type,
                operation='completions'
            ) from e
        except anthropic.APIConnectionError as e:
            raise LLMConnectionError(
                f'Could not reach Claude API: {e}',
                client_type=self.client_type,
                operation='completions'
            ) from e
        except anthropic.APIError as e:
            raise APIError(
                f'Claude API error: {e}',
                client_type=self.client_type,
                operation='completions',
                status_code=getattr(e, 'status_code', None)
            ) from e

        if not text:
            raise APIError(
                'Empty response received from Claude API',
                client_type=self.client_type,
                operation='completions'
            )
        return text

    def _complete_streaming(self, payload: dict[str, Any]) -> str:
        output: list[str] = []
        with self.client.messages.stream(**payload) as stream:
            for text in stream.text_stream:
                self._emit(text)
                output.append(text)
        return ''.join(output)

    @staticmethod
    def _extract_response_text_from_message(msg: Any) -> str:
        """Extract plain text from an Anthropic message object.

        Args:
            msg: Anthropic message object.

        Returns:
            The concatenated text blocks, or an empty string if there are none.
        """
        if msg is None:
            return ''

        content = getattr(msg, 'content', None)
        if isinstance(content, str):
            return content

        text_parts: list[str] = []
        for block in content or []:
            # Only consume text blocks; ignore tool/thinking blocks
            if getattr(block, 'type', None) == 'text':
                text = getattr(block, 'text', None)
                if isinstance(text, str) and text:
                    text_parts.append(text)
        return ''.join(text_parts)
