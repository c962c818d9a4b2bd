"""LLM client implementations for Subject Spotter.

This package provides LLM client implementations for OpenAI and Anthropic
Claude, with streaming and non-streaming response assembly.
"""

from .base_client import Client
from .openai_client import OpenAIClient
from .claude_client import ClaudeClient
from .factory import create_llm_client, SUPPORTED_SERVICES
from .exceptions import (
    APIError,
    AuthenticationError,
    LLMClientError,
    LLMConnectionError,
    RateLimitError,
)

__all__ = [
    "Client",
    "OpenAIClient",
    "ClaudeClient",
    "create_llm_client",
    "SUPPORTED_SERVICES",
    "LLMClientError",
    "APIError",
    "AuthenticationError",
    "LLMConnectionError",
    "RateLimitError",
]
