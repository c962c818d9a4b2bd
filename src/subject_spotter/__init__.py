"""Subject Spotter: identify subjects in historical text documents.

This package asks a Large Language Model to annotate known subjects (people,
places, organizations) in a historical document, then extracts the annotations
into structured records and renders them as markup, CSV or JSON.
"""

__version__ = "0.1.0"

from .config import Settings, ConfigError, ConfigValidationError
from .extraction import (
    AnnotationParser,
    EntityRecord,
    ExtractionError,
    MalformedInputError,
    OutputFormat,
    SubjectSerializer,
    UnsupportedFormatError,
)
from .pipeline import Engine, ApplicationError

__all__ = [
    "Settings",
    "ConfigError",
    "ConfigValidationError",
    "AnnotationParser",
    "EntityRecord",
    "ExtractionError",
    "MalformedInputError",
    "OutputFormat",
    "SubjectSerializer",
    "UnsupportedFormatError",
    "Engine",
    "ApplicationError",
]
