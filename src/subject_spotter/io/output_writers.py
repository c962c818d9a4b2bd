"""Output writing operations for Subject Spotter.

Rendered output is written atomically (tempfile + replace) to
``<base path>.<format extension>`` so a failed run never leaves a truncated file.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import ClassVar

from ..extraction import OutputFormat
from .exceptions import OutputError

Pathish = str | Path  # Type alias for path-like objects


class OutputWriter:
    """Writes serialized subject output to disk."""

    DEFAULT_ENCODING: ClassVar[str] = 'utf-8'

    def __init__(self, encoding: str = DEFAULT_ENCODING) -> None:
        """Initialize the OutputWriter.

        Args:
            encoding: Text encoding used for all writes.
        """
        self.encoding = encoding
        logging.debug('OutputWriter initialized with encoding: %s', self.encoding)

    @staticmethod
    def output_path_for(base_path: Pathish, fmt: OutputFormat | str) -> Path:
        """Return the output file path for a base path and format.

        Args:
            base_path: Output path without extension.
            fmt: Output format; its extension is appended.

        Returns:
            The full output file path.
        """
        output_format = OutputFormat.from_token(fmt)
        return Path(f'{base_path}.{output_format.extension}')

    @staticmethod
    def _ensure_output_directory(file_path: Path) -> None:
        """Ensure the output directory exists.

        Raises:
            OutputError: If the output directory cannot be created.
        """
        directory = file_path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputError(
                f'Failed to create output directory {directory}: {e}',
                file_path=str(file_path),
            ) from e

    @staticmethod
    def _atomic_write(file_path: Path, content: str, encoding: str) -> None:
        """Atomically write content to a file.

        Args:
            file_path: Path to the output file.
            content: Content to write to the file.
            encoding: Text encoding used for writing.

        Raises:
            OutputError: If the atomic write fails.
        """
        temp_path: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                    mode='w',
                    delete=False,
                    dir=file_path.parent,
                    encoding=encoding,
                    newline='',
                    suffix='.tmp'
            ) as temp_file:
                temp_path = Path(temp_file.name)
                temp_file.write(content)
            temp_path.replace(file_path)
            logging.debug('Atomic write completed for: %s', file_path)
        except (OSError, UnicodeEncodeError) as e:
            if temp_path is not None and temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    logging.debug('Failed to remove temporary file %s', temp_path)
            raise OutputError(
                f'Atomic write failed for {file_path}: {e}',
                file_path=str(file_path),
                output_type='atomic_write'
            ) from e

    def write_output(self, base_path: Pathish, fmt: OutputFormat | str, content: str) -> Path:
        """Write rendered output to ``<base_path>.<extension>``.

        Args:
            base_path: Output path without extension.
            fmt: Output format of content.
            content: Rendered output, written verbatim.

        Returns:
            The path that was written.

        Raises:
            OutputError: If writing fails.
        """
        output_path = self.output_path_for(base_path, fmt)
        self._ensure_output_directory(output_path)
        logging.info('Writing output to %s', output_path)
        self._atomic_write(output_path, content, self.encoding)
        logging.info('Output written to %s (%d characters)', output_path, len(content))
        return output_path
