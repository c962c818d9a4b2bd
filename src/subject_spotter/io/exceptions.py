"""Input/Output exceptions for Subject Spotter."""

from __future__ import annotations


class IOError(Exception):
    """Base class for all I/O related exceptions in Subject Spotter."""

    def __init__(self, message: str, file_path: str | None = None) -> None:
        """Initialize IOError

        Args:
            message: Error message.
            file_path: Optional file path or URL related to the error.
        """
        super().__init__(message)
        self.file_path = file_path


class ContentLoadError(IOError):
    """Exception raised when document content cannot be loaded."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        status_code: int | None = None
    ) -> None:
        """Initialize ContentLoadError.

        Args:
            message: Error message.
            file_path: The URL or local path that failed.
            status_code: HTTP status code, for remote content.
        """
        super().__init__(message, file_path)
        self.status_code = status_code


class OutputError(IOError):
    """Exception raised for output operations errors."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        output_type: str | None = None
    ) -> None:
        """Initialize OutputError.

        Args:
            message: Error message.
            file_path: Optional output file path.
            output_type: Optional type of output operation.
        """
        super().__init__(message, file_path)
        self.output_type = output_type
