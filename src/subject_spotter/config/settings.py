"""Configuration settings for the Subject Spotter application.

This module provides configuration management with environment variables loading
and client-specific lookups of the settings each LLM service requires.
"""

import logging
import os

from dotenv import load_dotenv

from .exceptions import ConfigError

# Load environment variables from .env file
load_dotenv()


def _int_from_env(key: str, default: int) -> int:
    """Read an integer environment variable, falling back on bad values."""
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logging.warning('Ignoring non-integer %s=%r, using %d', key, raw, default)
        return default


class Settings:
    """Configuration settings for the Subject Spotter application.

    Attributes:
        OPENAI_ACCESS_TOKEN: API key for the OpenAI service.
        OPENAI_MODEL: Model name for the OpenAI service.
        OPENAI_LOG_ERRORS: Whether the OpenAI SDK should log request errors.
        ANTHROPIC_API_KEY: API key for Anthropic Claude service.
        CLAUDE_MODEL: Model name for Claude service.
        N_CHARACTERS: Width of the preceding/following context windows.
        MARKUP_PARSER: BeautifulSoup tree builder used for model output.
        OUTPUT_FORMAT: Default serialization format token.
        PROMPT_TEMPLATE: Default prompt template name.
    """

    # API Configuration
    OPENAI_ACCESS_TOKEN: str | None = os.getenv('OPENAI_ACCESS_TOKEN')
    OPENAI_LOG_ERRORS: bool = os.getenv('OPENAI_LOG_ERRORS', 'false').lower() == 'true'
    ANTHROPIC_API_KEY: str | None = os.getenv('ANTHROPIC_API_KEY')

    # Model Configuration
    OPENAI_MODEL: str | None = os.getenv('OPENAI_MODEL')
    CLAUDE_MODEL: str | None = os.getenv('CLAUDE_MODEL')

    # Extraction Configuration
    N_CHARACTERS: int = _int_from_env('N_CHARACTERS', 30)
    MARKUP_PARSER: str = os.getenv('MARKUP_PARSER', 'html.parser')

    # Output Configuration
    OUTPUT_FORMAT: str = os.getenv('OUTPUT_FORMAT', 'markup')
    PROMPT_TEMPLATE: str = os.getenv('PROMPT_TEMPLATE', 'template1')

    @classmethod
    def get_client_required_configs(cls, client_type: str) -> dict[str, str | None]:
        """Get required configurations for specified client type.

        Args:
            client_type: Type of client ('openai' or 'claude').

        Returns:
            Dictionary of required configuration keys and their values.

        Raises:
            ConfigError: If client type is unsupported.
        """
        client_type = client_type.lower()

        if client_type == 'openai':
            return {
                'OPENAI_ACCESS_TOKEN': cls.OPENAI_ACCESS_TOKEN,
                'OPENAI_MODEL': cls.OPENAI_MODEL,
            }
        elif client_type == 'claude':
            return {
                'ANTHROPIC_API_KEY': cls.ANTHROPIC_API_KEY,
                'CLAUDE_MODEL': cls.CLAUDE_MODEL,
            }
        else:
            raise ConfigError(f'Unsupported client type: {client_type}')
