"""Prompt template management for Subject Spotter.

Templates are packaged text files using ``str.format`` placeholders. Every
template must reference ``{text}`` and ``{subject_listing}``; ``{user_context}``
is optional and renders as an empty string when no context is given.
"""

from __future__ import annotations

import logging
from pathlib import Path
from string import Formatter
from typing import ClassVar

from .exceptions import (
    PromptBuildError,
    PromptError,
    TemplateNotFoundError,
    UnsupportedPromptTemplateError,
)

TEMPLATES_DIR = Path(__file__).parent / 'templates'

SUPPORTED_TEMPLATES: dict[str, Path] = {
    'template1': TEMPLATES_DIR / 'template1.txt',
    'template2': TEMPLATES_DIR / 'template2.txt',
}


class PromptFormatter:
    """Generates subject identification prompts from a named template.

    Example usage:
        formatter = PromptFormatter(template='template1')
        prompt = formatter.generate_prompt(
            text='The text of the document',
            subject_listing=subject_data,
            user_context='Additional context to improve accuracy',
        )
    """

    DEFAULT_ENCODING: ClassVar[str] = 'utf-8'
    REQUIRED_FIELDS: ClassVar[set[str]] = {'text', 'subject_listing'}

    def __init__(self, template: str = 'template1') -> None:
        """Initialize the formatter.

        Args:
            template: Name of the packaged template to use.
        """
        self._template = template
        self._template_text: str | None = None

    @property
    def template(self) -> str:
        return self._template

    @template.setter
    def template(self, template: str) -> None:
        self._template = template
        self._template_text = None

    @property
    def template_file(self) -> Path:
        """Path of the selected template.

        Raises:
            UnsupportedPromptTemplateError: If the template is not supported.
        """
        template_file = SUPPORTED_TEMPLATES.get(str(self._template))
        if template_file is None:
            raise UnsupportedPromptTemplateError(str(self._template))
        return template_file

    @property
    def template_text(self) -> str:
        """Content of the selected template, loaded on first access.

        Raises:
            UnsupportedPromptTemplateError: If the template is not supported.
            TemplateNotFoundError: If the template file is missing.
            PromptError: If the template cannot be read or is empty.
        """
        if self._template_text is not None:
            return self._template_text

        template_file = self.template_file
        if not template_file.is_file():
            raise TemplateNotFoundError(template_file)
        try:
            text = template_file.read_text(encoding=self.DEFAULT_ENCODING)
        except OSError as e:
            raise PromptError(
                f'Error reading template file {template_file}: {e}',
                template_file=template_file,
                operation='load'
            ) from e
        if not text.strip():
            raise PromptError(
                f'Template file is empty: {template_file}',
                template_file=template_file,
                operation='load'
            )

        self._check_placeholders(text, template_file)
        logging.info('Template loaded successfully from %s', template_file)
        self._template_text = text
        return text

    @classmethod
    def _check_placeholders(cls, template: str, template_file: Path) -> None:
        """Ensure the template references every required field.

        Raises:
            PromptBuildError: If any required field is missing.
        """
        present: set[str] = set()
        for _, field_name, _, _ in Formatter().parse(template):
            if field_name:
                root, _, _ = field_name.partition('.')
                present.add(root.partition('[')[0])

        missing = cls.REQUIRED_FIELDS - present
        if missing:
            raise PromptBuildError(
                f'Template is missing required fields: {sorted(missing)}',
                template_file=template_file,
            )

    def generate_prompt(
        self,
        *,
        text: str,
        subject_listing: str,
        user_context: str | None = None,
    ) -> str:
        """Fill the selected template with the provided data.

        Args:
            text: The document text to annotate.
            subject_listing: The listing of known subjects.
            user_context: Optional extra context for the model.

        Returns:
            The generated prompt.

        Raises:
            PromptBuildError: If formatting the template fails.
        """
        template = self.template_text
        try:
            prompt = template.format(
                text=text,
                subject_listing=subject_listing,
                user_context=user_context or '',
            ).strip()
        except (KeyError, IndexError, ValueError) as e:
            raise PromptBuildError(
                f'Template formatting failed: {e}',
                template_file=self.template_file
            ) from e

        logging.info(
            'Built prompt from %s (text length: %d, prompt length: %d)',
            self._template, len(text), len(prompt)
        )
        return prompt
