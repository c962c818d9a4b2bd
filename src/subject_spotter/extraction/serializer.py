"""Multi-format rendering of extracted subjects.

Three renderings are supported, one function per OutputFormat member:

* markup: the parsed document pretty-printed with a two-space indent.
* tabular: CSV with a fixed header and every field quoted.
* structured: a pretty-printed JSON array of entity mappings.
"""

from __future__ import annotations

import csv
import io
import json
import logging
from collections.abc import Sequence

from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

from .entities import EntityRecord, OutputFormat
from .parser import ParsedDocument

MARKUP_INDENT = 2
JSON_INDENT = 2

_MARKUP_FORMATTER = HTMLFormatter(
    entity_substitution=EntitySubstitution.substitute_xml,
    indent=MARKUP_INDENT,
)


def tabular_headers(context_width: int) -> list[str]:
    """Column names for the tabular rendering.

    Args:
        context_width: Width of the context windows, shown in two headers.

    Returns:
        The header row.
    """
    return [
        'Subject ID',
        'Canonical Subject Name/Title',
        'Verbatim Text',
        f'Preceding {context_width} Characters',
        f'Following {context_width} Characters',
        'Locator',
    ]


def render_markup(doc: ParsedDocument) -> str:
    """Re-serialize the document with stable indentation."""
    return doc.prettify(formatter=_MARKUP_FORMATTER)


def render_tabular(entities: Sequence[EntityRecord], context_width: int) -> str:
    """Render entities as CSV, quoting every field.

    Args:
        entities: Entity records in extraction order.
        context_width: Width of the context windows, used in the header.

    Returns:
        CSV text with a header row and one row per entity.
    """
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator='\n')
    writer.writerow(tabular_headers(context_width))
    for entity in entities:
        writer.writerow(entity.to_row())
    return buf.getvalue()


def render_structured(entities: Sequence[EntityRecord]) -> str:
    """Render entities as a pretty-printed JSON array."""
    return json.dumps(
        [entity.to_dict() for entity in entities],
        indent=JSON_INDENT,
        ensure_ascii=False,
    )


def render(
    doc: ParsedDocument,
    entities: Sequence[EntityRecord],
    fmt: OutputFormat | str,
    context_width: int,
) -> str:
    """Render the parsed document or its entities in the requested format.

    Args:
        doc: The parsed document (used by the markup rendering).
        entities: Entity records extracted from doc.
        fmt: An OutputFormat member or a format token.
        context_width: Width of the context windows, used in tabular headers.

    Returns:
        The rendered string.

    Raises:
        UnsupportedFormatError: If fmt names no supported format.
    """
    output_format = OutputFormat.from_token(fmt)
    logging.debug('Rendering %d entities as %s', len(entities), output_format.value)

    if output_format is OutputFormat.MARKUP:
        return render_markup(doc)
    elif output_format is OutputFormat.TABULAR:
        return render_tabular(entities, context_width)
    elif output_format is OutputFormat.STRUCTURED:
        return render_structured(entities)
    # Unreachable while every OutputFormat member has a branch above.
    raise AssertionError(f'No renderer for {output_format!r}')
