"""Input/Output operations for Subject Spotter.

This package loads document content from URLs or local files and writes
rendered output files with structured error handling.
"""

from .content_loader import ContentLoader
from .output_writers import OutputWriter
from .exceptions import ContentLoadError, OutputError, IOError

__all__ = [
    "ContentLoader",
    "OutputWriter",
    "ContentLoadError",
    "OutputError",
    "IOError",
]
