"""Prompt building and management for Subject Spotter.

This package provides prompt template management for subject identification
with proper error handling and validation.
"""

from .formatter import PromptFormatter, SUPPORTED_TEMPLATES
from .exceptions import (
    PromptError,
    UnsupportedPromptTemplateError,
    TemplateNotFoundError,
    PromptBuildError,
)

__all__ = [
    "PromptFormatter",
    "SUPPORTED_TEMPLATES",
    "PromptError",
    "UnsupportedPromptTemplateError",
    "TemplateNotFoundError",
    "PromptBuildError",
]
