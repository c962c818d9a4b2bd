"""Subject extraction from annotated model output.

This package parses markup in which a language model has wrapped recognized
subjects in annotation tags, recovers entity records with surrounding
context, and renders them as markup, CSV or JSON.
"""

# Data models
from .entities import EntityRecord, OutputFormat

# Parsing and rendering
from .parser import AnnotationParser, ParsedDocument
from .serializer import render, tabular_headers
from .generation import Generation, SubjectSerializer

# Exceptions
from .exceptions import ExtractionError, UnsupportedFormatError, MalformedInputError

__all__ = [
    # Data models
    "EntityRecord",
    "OutputFormat",

    # Processing components
    "AnnotationParser",
    "ParsedDocument",
    "render",
    "tabular_headers",
    "Generation",
    "SubjectSerializer",

    # Exceptions
    "ExtractionError",
    "UnsupportedFormatError",
    "MalformedInputError",
]
