"""Data models for subject extraction.

This module provides the entity record produced for every annotation found in
model output, and the closed set of output formats the serializer supports.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

from .exceptions import UnsupportedFormatError


@dataclass(frozen=True)
class EntityRecord:
    """A subject annotation recovered from model output.

    Attributes:
        id: Subject identifier from the annotation's ``id`` attribute.
        name: Canonical subject name from the annotation's ``title`` attribute.
        text: Verbatim annotated text, stripped of surrounding whitespace.
        preceding_context: Serialized markup immediately before the opening tag.
        following_context: Serialized markup immediately after the closing tag.
        locator: Concatenated markup of every annotation sharing this id.
    """
    id: str = ""
    name: str = ""
    text: str = ""
    preceding_context: str = ""
    following_context: str = ""
    locator: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the record as an ordered mapping of its fields."""
        return asdict(self)

    def to_row(self) -> list[str]:
        """Return the record as a list of column values in field order."""
        return [
            self.id,
            self.name,
            self.text,
            self.preceding_context,
            self.following_context,
            self.locator,
        ]


class OutputFormat(Enum):
    """Serialization formats for extracted subjects."""

    MARKUP = 'markup'
    TABULAR = 'tabular'
    STRUCTURED = 'structured'

    @property
    def extension(self) -> str:
        """File extension used when the rendered output is written to disk."""
        return _EXTENSIONS[self]

    @classmethod
    def from_token(cls, token: OutputFormat | str) -> OutputFormat:
        """Resolve a format token to an OutputFormat.

        Accepts a member, its value ('markup', 'tabular', 'structured') or its
        file extension ('html', 'csv', 'json'), case-insensitively.

        Args:
            token: The requested format.

        Returns:
            The matching OutputFormat member.

        Raises:
            UnsupportedFormatError: If the token names no supported format.
        """
        if isinstance(token, cls):
            return token
        if isinstance(token, str):
            key = token.strip().lower()
            for member in cls:
                if key in (member.value, member.extension):
                    return member
        supported = ', '.join(member.value for member in cls)
        raise UnsupportedFormatError(
            f'Unsupported output format: {token!r}. Supported formats: {supported}',
            format_token=token
        )


_EXTENSIONS = {
    OutputFormat.MARKUP: 'html',
    OutputFormat.TABULAR: 'csv',
    OutputFormat.STRUCTURED: 'json',
}
