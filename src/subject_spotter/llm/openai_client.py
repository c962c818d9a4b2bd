"""OpenAI client implementation using the OpenAI chat completions API."""

from __future__ import annotations

import logging

import openai

from .base_client import Client
from .exceptions import (
    APIError,
    AuthenticationError,
    LLMClientError,
    LLMConnectionError,
    RateLimitError,
)


class OpenAIClient(Client):
    """Client for generating subject annotations with OpenAI chat models.

    The chat API is always called in streaming mode and the response is
    assembled from the content deltas; ``stream`` only controls whether the
    deltas are echoed to stdout as they arrive.
    """

    def __init__(
        self,
        access_token: str,
        model: str,
        *,
        stream: bool = True,
        log_errors: bool = False,
    ) -> None:
        """Initialize an OpenAI client.

        Args:
            access_token: OpenAI API key.
            model: Chat model to use.
            stream: Whether to echo the response to stdout.
            log_errors: Whether to log failed requests with a traceback.

        Raises:
            ValueError: If required parameters are missing.
            LLMClientError: If client initialization fails.
        """
        if not access_token:
            raise ValueError('Access token must be provided for OpenAIClient.')

        super().__init__(model, stream=stream)
        self.log_errors = log_errors

        try:
            self.client = openai.OpenAI(api_key=access_token)
        except Exception as e:
            raise LLMClientError(
                f'Failed to initialize OpenAI client: {e}',
                client_type=self.client_type,
                operation='initialization'
            ) from e

    def _complete(self, prompt: str) -> str:
        """Stream a chat completion and assemble the response text.

        Raises:
            AuthenticationError: If the API key is invalid.
            RateLimitError: If rate limit is exceeded.
            LLMConnectionError: If the API cannot be reached.
            APIError: If the API returns an error.
        """
        output: list[str] = []
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[{'role': 'user', 'content': prompt}],
                stream=True,
            )
            for chunk in response:
                if not chunk.choices:
                    continue
                content = chunk.choices[0].delta.content
                if content:
                    self._emit(content)
                    output.append(content)
        except openai.AuthenticationError as e:
            self._log_error(e)
            raise AuthenticationError(
                f'OpenAI authentication failed: {e}',
                client_type=self.client_type,
                operation='completions'
            ) from e
        except openai.RateLimitError as e:
            self._log_error(e)
            raise RateLimitError(
                f'OpenAI API rate limit exceeded: {e}',
                client_type=self.client_type,
                operation='completions'
            ) from e
        except openai.APIConnectionError as e:
            self._log_error(e)
            raise LLMConnectionError(
                f'Could not reach OpenAI API: {e}',
                client_type=self.client_type,
                operation='completions'
            ) from e
        except openai.APIError as e:
            self._log_error(e)
            raise APIError(
                f'OpenAI API error: {e}',
                client_type=self.client_type,
                operation='completions',
                status_code=getattr(e, 'status_code', None)
            ) from e

        return ''.join(output)

    def _log_error(self, exc: Exception) -> None:
        if self.log_errors:
            logging.error('OpenAI request failed: %s', exc, exc_info=True)
