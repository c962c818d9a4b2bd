"""Annotation parsing for Subject Spotter.

This module turns model output, in which recognized subjects are wrapped as
``<a id="IDENTIFIER" title="CANONICAL NAME">matched text</a>``, into
EntityRecord objects with surrounding context.

Context windows are cut from the serialized form of the whole document, not
from the raw input, so that attribute quoting and entity normalization applied
by the tree builder are the same on both sides of the offset arithmetic.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup
from bs4.element import Tag

from .entities import EntityRecord

ParsedDocument = BeautifulSoup

ANNOTATION_TAG = 'a'
ID_ATTRIBUTE = 'id'
NAME_ATTRIBUTE = 'title'
DEFAULT_PARSER = 'html.parser'


class AnnotationParser:
    """Parses annotated markup into entity records."""

    @staticmethod
    def parse(raw: str | None, parser: str | None = None) -> ParsedDocument:
        """Parse raw markup leniently.

        Malformed or partial markup is recovered on a best-effort basis and
        never raises.

        Args:
            raw: Markup text; None is treated as an empty document.
            parser: BeautifulSoup tree builder name, defaults to 'html.parser'.

        Returns:
            The parsed document.
        """
        doc = BeautifulSoup(raw or '', parser or DEFAULT_PARSER)
        logging.debug('Parsed markup document (%d characters)', len(raw or ''))
        return doc

    @staticmethod
    def extract_entities(doc: ParsedDocument, context_width: int) -> list[EntityRecord]:
        """Extract one EntityRecord per annotation element, in document order.

        The position of each annotation is the first occurrence of its own
        serialized markup inside the serialized document. Two structurally
        identical annotations therefore receive the context of the first one.

        Args:
            doc: The parsed document.
            context_width: Maximum number of characters on each side.

        Returns:
            The list of extracted entity records (empty if none are found).

        Raises:
            ValueError: If context_width is not a positive integer.
        """
        if isinstance(context_width, bool) or not isinstance(context_width, int) or context_width <= 0:
            raise ValueError(f'context_width must be a positive integer, got {context_width!r}')

        serialized = str(doc)
        entities: list[EntityRecord] = []

        for element in doc.find_all(ANNOTATION_TAG):
            anchor_id = AnnotationParser._attribute(element, ID_ATTRIBUTE)
            markup = str(element)
            preceding, following = AnnotationParser._context_window(
                serialized, markup, context_width
            )
            entity = EntityRecord(
                id=anchor_id,
                name=AnnotationParser._attribute(element, NAME_ATTRIBUTE),
                text=element.get_text().strip(),
                preceding_context=preceding,
                following_context=following,
                locator=AnnotationParser.locate(doc, anchor_id),
            )
            logging.debug('Extracted subject %s (%s)', entity.id, entity.name)
            entities.append(entity)

        logging.info('Extracted %d subject annotations', len(entities))
        return entities

    @staticmethod
    def locate(doc: ParsedDocument, anchor_id: str) -> str:
        """Return the concatenated markup of every annotation carrying anchor_id.

        Args:
            doc: The parsed document.
            anchor_id: Identifier to look up.

        Returns:
            Markup of all matching elements joined together, or an empty
            string when no element carries the identifier.
        """
        matches = doc.find_all(
            lambda tag: tag.name == ANNOTATION_TAG
            and tag.has_attr(ID_ATTRIBUTE)
            and AnnotationParser._attribute(tag, ID_ATTRIBUTE) == anchor_id
        )
        return ''.join(str(match) for match in matches)

    @staticmethod
    def _context_window(serialized: str, markup: str, width: int) -> tuple[str, str]:
        """Cut the preceding and following context around markup.

        Args:
            serialized: The serialized document.
            markup: The serialized annotation element.
            width: Maximum number of characters on each side.

        Returns:
            Tuple of (preceding_context, following_context), clipped at the
            document bounds.
        """
        index = serialized.find(markup)
        if index < 0:
            logging.warning('Annotation markup not found in serialized document: %s', markup)
            return '', ''

        end = index + len(markup)
        return serialized[max(0, index - width):index], serialized[end:end + width]

    @staticmethod
    def _attribute(element: Tag, name: str) -> str:
        """Read an attribute as a string, empty when absent."""
        value = element.get(name)
        if value is None:
            return ''
        if isinstance(value, list):
            return ' '.join(value)
        return str(value)
