"""Configuration validation for Subject Spotter."""

from __future__ import annotations

import logging

from .exceptions import ConfigError, ConfigValidationError
from .settings import Settings

class ConfigValidator:
    """Validates configuration settings for Subject Spotter."""

    _SUPPORTED_CLIENT_TYPES = ('openai', 'claude')

    @staticmethod
    def validate_for_client(client_type: str) -> None:
        """Validate configuration for specified client type.

        Args:
            client_type: Type of client ('openai' or 'claude').

        Raises:
            ConfigValidationError: If required configuration is missing or invalid.
        """
        if client_type.lower() not in ConfigValidator._SUPPORTED_CLIENT_TYPES:
            raise ConfigValidationError(
                f'Unsupported client type: {client_type}. '
                f'Supported types: {", ".join(ConfigValidator._SUPPORTED_CLIENT_TYPES)}'
            )

        try:
            client_configs = Settings.get_client_required_configs(client_type)
        except ConfigError as e:
            raise ConfigValidationError(str(e)) from e

        missing_configs = [key for key, value in client_configs.items() if not value]
        if missing_configs:
            raise ConfigValidationError(
                f'Missing required configuration for {client_type} client: '
                f'{", ".join(missing_configs)}. Please set these in your '
                'environment variables or .env file.',
                missing_keys=missing_configs
            )

        logging.info('Configuration validation passed for %s client', client_type)

    @staticmethod
    def validate_context_width(context_width: int | None = None) -> int:
        """Validate the context window width.

        Args:
            context_width: Width to validate, defaults to Settings.N_CHARACTERS.

        Returns:
            The validated width.

        Raises:
            ConfigValidationError: If the width is not a positive integer.
        """
        width = Settings.N_CHARACTERS if context_width is None else context_width
        if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
            raise ConfigValidationError(
                f'Context width must be a positive integer, got {width!r}',
                missing_keys=['N_CHARACTERS']
            )
        return width
