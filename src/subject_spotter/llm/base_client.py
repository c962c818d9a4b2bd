"""Base LLM client abstract class.

Defines the interface shared by all model clients: a single synchronous
``completions`` call that returns the full response text, optionally echoing
it to stdout while it streams in.
"""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from typing import Any, ClassVar

import tiktoken


class Client(ABC):
    """Abstract base class for LLM clients."""

    TOKENIZER_ENCODING: ClassVar[str] = 'cl100k_base'

    def __init__(self, model: str, *, stream: bool = True) -> None:
        """Initialize the client with the LLM name.

        Args:
            model: The name of the LLM to use.
            stream: Whether to echo the response to stdout while it arrives.

        Raises:
            ValueError: If model is empty or None.
        """
        if not model:
            raise ValueError('Model name cannot be empty or None')

        self.model = model
        self.stream = stream
        self._tokenizer: Any = None
        logging.info(
            'Initializing LLM client %s with model %s (stream=%s)',
            self.__class__.__name__, self.model, self.stream
        )

    @property
    def client_type(self) -> str:
        """Return the type of LLM client (e.g., 'openai', 'claude')."""
        return self.__class__.__name__.removesuffix('Client').lower()

    def _count_tokens(self, text: str) -> int:
        """Count tokens in text using tiktoken.

        Returns:
            Number of tokens in the text, or 0 if the tokenizer is unavailable.
        """
        try:
            if self._tokenizer is None:
                self._tokenizer = tiktoken.get_encoding(self.TOKENIZER_ENCODING)
            return len(self._tokenizer.encode(text))
        except Exception as e:
            logging.debug('Token counting failed: %s', e, exc_info=True)
            return 0

    def _validate_prompt(self, prompt: str) -> None:
        """Validate prompt input.

        Raises:
            ValueError: If prompt is empty or invalid.
        """
        if not prompt or not prompt.strip():
            raise ValueError(f'Prompt must not be empty for {self.__class__.__name__}.')

    def _emit(self, content: str) -> None:
        """Echo a piece of streamed response to stdout when streaming is enabled."""
        if self.stream:
            sys.stdout.write(content)
            sys.stdout.flush()

    def completions(self, prompt: str) -> str:
        """Query the model and return the complete response text.

        Args:
            prompt: The text prompt to send to the model.

        Returns:
            The generated response.

        Raises:
            ValueError: If prompt is empty.
            LLMClientError: If the API call fails.
        """
        self._validate_prompt(prompt)
        logging.info('Prompt Token Count: %d', self._count_tokens(prompt))
        output = self._complete(prompt)
        logging.info('Received response from %s (%d characters)', self.client_type, len(output))
        return output

    @abstractmethod
    def _complete(self, prompt: str) -> str:
        """Perform the provider-specific API call.

        Args:
            prompt: A validated prompt.

        Returns:
            The full response text.
        """
