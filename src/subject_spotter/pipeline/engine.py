"""Core engine for the subject spotting workflow.

The Engine loads the document text and subject listing, builds the prompt,
queries the configured LLM, and hands the annotated response to a
SubjectSerializer for extraction and rendering. Inputs are loaded lazily and
cached; changing a setting discards exactly the cached values that depend on it.
"""

from __future__ import annotations

import logging

from ..config import Settings
from ..extraction import EntityRecord, OutputFormat, SubjectSerializer
from ..io import ContentLoader
from ..llm import Client, create_llm_client
from ..prompt import PromptFormatter


class Engine:
    """Orchestrates subject extraction for one document.

    Example usage:
        engine = Engine(
            text_path='path/to/text.txt',
            subject_listing_path='path/to/subjects.json',
            llm_service='openai',
            output_format=OutputFormat.TABULAR,
        )
        engine.process()
        serialized_output = engine.serialize(format='json')
    """

    def __init__(
        self,
        text_path: str,
        subject_listing_path: str,
        *,
        user_context: str | None = None,
        prompt_template: str | None = None,
        llm_service: str = 'openai',
        output_format: OutputFormat | str | None = None,
        stream: bool = True,
        context_width: int | None = None,
        llm_client: Client | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            text_path: URL or local path of the document text.
            subject_listing_path: URL or local path of the subject listing.
            user_context: Optional extra context for the prompt.
            prompt_template: Prompt template name, defaults to Settings.PROMPT_TEMPLATE.
            llm_service: LLM service to use ('openai' or 'claude').
            output_format: Default output format, defaults to Settings.OUTPUT_FORMAT.
            stream: Whether the LLM response is echoed to stdout while it arrives.
            context_width: Context window width, defaults to Settings.N_CHARACTERS.
            llm_client: Pre-built client, used instead of creating one from llm_service.

        Raises:
            UnsupportedFormatError: If output_format is not supported.
            ConfigValidationError: If context_width is invalid.
        """
        self._text_path = text_path
        self._subject_listing_path = subject_listing_path
        self._user_context = user_context
        self._llm_service = llm_service
        self.output_format = OutputFormat.from_token(output_format or Settings.OUTPUT_FORMAT)
        self.stream = stream

        self._text: str | None = None
        self._subject_listing: str | None = None
        self._prompt: str | None = None
        self._llm: Client | None = llm_client

        self.prompt_formatter = PromptFormatter(template=prompt_template or Settings.PROMPT_TEMPLATE)
        self.serializer = SubjectSerializer(context_width=context_width)

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------
    @property
    def text_path(self) -> str:
        return self._text_path

    @text_path.setter
    def text_path(self, text_path: str) -> None:
        self._text_path = text_path
        self._text = None
        self._prompt = None

    @property
    def subject_listing_path(self) -> str:
        return self._subject_listing_path

    @subject_listing_path.setter
    def subject_listing_path(self, subject_listing_path: str) -> None:
        self._subject_listing_path = subject_listing_path
        self._subject_listing = None
        self._prompt = None

    @property
    def prompt_template(self) -> str:
        return self.prompt_formatter.template

    @prompt_template.setter
    def prompt_template(self, prompt_template: str) -> None:
        self.prompt_formatter.template = prompt_template
        self._prompt = None

    @property
    def user_context(self) -> str | None:
        return self._user_context

    @user_context.setter
    def user_context(self, user_context: str | None) -> None:
        self._user_context = user_context
        self._prompt = None

    @property
    def llm_service(self) -> str:
        return self._llm_service

    @llm_service.setter
    def llm_service(self, llm_service: str) -> None:
        self._llm_service = llm_service
        self._llm = None
        self._prompt = None

    @property
    def text(self) -> str:
        """Document text, loaded on first access."""
        if self._text is None:
            self._text = ContentLoader.get_content_from_path(self._text_path)
        return self._text

    @property
    def subject_listing(self) -> str:
        """Subject listing, loaded on first access."""
        if self._subject_listing is None:
            self._subject_listing = ContentLoader.get_content_from_path(self._subject_listing_path)
        return self._subject_listing

    @property
    def prompt(self) -> str:
        """Prompt for the current inputs, generated on first access."""
        if self._prompt is None:
            self._prompt = self.prompt_formatter.generate_prompt(
                text=self.text,
                subject_listing=self.subject_listing,
                user_context=self._user_context,
            )
        return self._prompt

    @property
    def llm(self) -> Client:
        """LLM client for the configured service, created on first access."""
        if self._llm is None:
            self._llm = create_llm_client(self._llm_service, stream=self.stream)
        return self._llm

    # ------------------------------------------------------------------
    # Processing
    # ------------------------------------------------------------------
    @property
    def raw_output(self) -> str:
        return self.serializer.raw_output

    @raw_output.setter
    def raw_output(self, raw_output: str | None) -> None:
        self.serializer.set_raw_output(raw_output)

    def process(self) -> str:
        """Query the LLM with the current prompt and keep its raw output.

        Returns:
            The raw annotated output.

        Raises:
            ContentLoadError: If an input cannot be loaded.
            PromptError: If the prompt cannot be built.
            LLMClientError: If the LLM call fails.
        """
        logging.info('Processing %s with %s', self._text_path, self._llm_service)
        raw_output = self.llm.completions(self.prompt)
        self.raw_output = raw_output
        logging.info('Processing completed (%d characters of raw output)', len(raw_output))
        return raw_output

    def entities(self) -> list[EntityRecord]:
        """Entity records extracted from the current raw output."""
        return self.serializer.entities()

    def serialize(self, format: OutputFormat | str | None = None) -> str:
        """Render the current raw output.

        Args:
            format: Output format, defaults to the engine's output_format.

        Returns:
            The rendered output.

        Raises:
            UnsupportedFormatError: If format is not supported.
        """
        return self.serializer.output(format or self.output_format)
