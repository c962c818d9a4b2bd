"""LLM client factory for Subject Spotter."""

from __future__ import annotations

import logging

from ..config import ConfigValidator, ConfigError, Settings
from .base_client import Client
from .claude_client import ClaudeClient
from .exceptions import LLMClientError
from .openai_client import OpenAIClient

SUPPORTED_SERVICES = ('openai', 'claude')


def create_llm_client(client_type: str, *, stream: bool = True) -> Client:
    """Factory function to create LLM clients from Settings.

    Args:
        client_type: Type of client ('openai' or 'claude').
        stream: Whether the client echoes its response while it arrives.

    Returns:
        Initialized LLM client.

    Raises:
        ValueError: If client_type is empty.
        LLMClientError: If client type is unsupported, configuration is
            missing, or initialization fails.
    """
    if not client_type:
        raise ValueError('client_type must be provided')

    client_type = client_type.lower().strip()
    if client_type not in SUPPORTED_SERVICES:
        raise LLMClientError(
            f'Unsupported client type: {client_type}. '
            f'Supported types: {", ".join(SUPPORTED_SERVICES)}',
            client_type=client_type,
            operation='factory_creation',
        )

    try:
        ConfigValidator.validate_for_client(client_type)
        if client_type == 'openai':
            return OpenAIClient(
                access_token=Settings.OPENAI_ACCESS_TOKEN,
                model=Settings.OPENAI_MODEL,
                stream=stream,
                log_errors=Settings.OPENAI_LOG_ERRORS,
            )
        return ClaudeClient(
            api_key=Settings.ANTHROPIC_API_KEY,
            model=Settings.CLAUDE_MODEL,
            stream=stream,
        )
    except LLMClientError:
        raise
    except (ConfigError, ValueError) as e:
        logging.error('Cannot create %s client: %s', client_type, e)
        raise LLMClientError(
            f'Failed to create {client_type} client: {e}',
            client_type=client_type,
            operation='factory_creation',
        ) from e
