"""Cached extraction state for one raw model output.

A Generation owns a raw output string together with everything derived from
it: the parsed document, the entity records and each rendered format. The
SubjectSerializer never clears individual caches; assigning a new raw output
swaps in a fresh Generation, and the old one is dropped as a whole.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..config import ConfigValidator, Settings
from .entities import EntityRecord, OutputFormat
from .exceptions import MalformedInputError
from .parser import AnnotationParser, ParsedDocument
from .serializer import render


@dataclass
class Generation:
    """Derived state for a single raw output.

    Attributes:
        raw: The raw markup the state is derived from.
        context_width: Width of the context windows.
        parser: BeautifulSoup tree builder name.
    """
    raw: str
    context_width: int
    parser: str
    _document: ParsedDocument | None = field(default=None, init=False, repr=False)
    _entities: tuple[EntityRecord, ...] | None = field(default=None, init=False, repr=False)
    _rendered: dict[OutputFormat, str] = field(default_factory=dict, init=False, repr=False)

    def document(self) -> ParsedDocument:
        if self._document is None:
            self._document = AnnotationParser.parse(self.raw, self.parser)
        return self._document

    def entities(self) -> list[EntityRecord]:
        if self._entities is None:
            self._entities = tuple(
                AnnotationParser.extract_entities(self.document(), self.context_width)
            )
        return list(self._entities)

    def output(self, fmt: OutputFormat | str) -> str:
        output_format = OutputFormat.from_token(fmt)
        if output_format not in self._rendered:
            entities = self.entities() if output_format is not OutputFormat.MARKUP else []
            self._rendered[output_format] = render(
                self.document(), entities, output_format, self.context_width
            )
        return self._rendered[output_format]


class SubjectSerializer:
    """Serializes subjects found in raw model output into various formats.

    Example usage:
        serializer = SubjectSerializer(raw_output="<p>... <a id=\"1\" title=\"X\">X</a></p>")
        html_output = serializer.output(OutputFormat.MARKUP)
        csv_output = serializer.output("csv")
        json_output = serializer.output("structured")

    Not safe for concurrent mutation; callers sharing an instance must guard
    set_raw_output and subsequent reads with their own lock.
    """

    def __init__(
        self,
        raw_output: str | None = "",
        *,
        context_width: int | None = None,
        parser: str | None = None,
    ) -> None:
        """Initialize the serializer.

        Args:
            raw_output: Raw model output; None is treated as empty.
            context_width: Width of the context windows, defaults to Settings.N_CHARACTERS.
            parser: BeautifulSoup tree builder, defaults to Settings.MARKUP_PARSER.

        Raises:
            ConfigValidationError: If context_width is not a positive integer.
            MalformedInputError: If raw_output is not a string.
        """
        self.context_width = ConfigValidator.validate_context_width(context_width)
        self.parser = parser or Settings.MARKUP_PARSER
        self._generation = self._new_generation(raw_output)

    def _new_generation(self, raw_output: str | None) -> Generation:
        if raw_output is None:
            raw_output = ''
        if not isinstance(raw_output, str):
            raise MalformedInputError(
                f'Raw output must be a string, got {type(raw_output).__name__}',
                input_type=type(raw_output).__name__
            )
        return Generation(raw=raw_output, context_width=self.context_width, parser=self.parser)

    @property
    def raw_output(self) -> str:
        return self._generation.raw

    @raw_output.setter
    def raw_output(self, raw_output: str | None) -> None:
        self.set_raw_output(raw_output)

    def set_raw_output(self, raw_output: str | None) -> None:
        """Replace the raw output, discarding all state derived from the previous one.

        Args:
            raw_output: New raw model output.

        Raises:
            MalformedInputError: If raw_output is not a string.
        """
        self._generation = self._new_generation(raw_output)
        logging.debug('Raw output replaced (%d characters)', len(self._generation.raw))

    def document(self) -> ParsedDocument:
        """Return the parsed document for the current raw output."""
        return self._generation.document()

    def entities(self) -> list[EntityRecord]:
        """Return the entity records for the current raw output."""
        return self._generation.entities()

    def output(self, fmt: OutputFormat | str) -> str:
        """Return the current raw output rendered in the requested format.

        Args:
            fmt: An OutputFormat member or a format token.

        Returns:
            The rendered output.

        Raises:
            UnsupportedFormatError: If fmt names no supported format.
        """
        return self._generation.output(fmt)
