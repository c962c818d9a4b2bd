"""Extraction-related exceptions for Subject Spotter."""


class ExtractionError(Exception):
    """Base exception for annotation extraction and serialization errors."""

    def __init__(self, message: str, operation: str = None) -> None:
        """Initialize ExtractionError.

        Args:
            message: Error message.
            operation: Optional name of the operation that failed.
        """
        super().__init__(message)
        self.operation = operation


class UnsupportedFormatError(ExtractionError):
    """Exception raised when an output format is not one of the supported variants."""

    def __init__(self, message: str, format_token: object = None) -> None:
        """Initialize UnsupportedFormatError.

        Args:
            message: Error message.
            format_token: The rejected format token as supplied by the caller.
        """
        super().__init__(message, operation='render')
        self.format_token = format_token


class MalformedInputError(ExtractionError):
    """Exception raised when raw model output is not a string at all.

    Badly formed markup never raises; the lenient parser recovers what it can
    and irregular documents simply yield fewer entities.
    """

    def __init__(self, message: str, input_type: str = None) -> None:
        """Initialize MalformedInputError.

        Args:
            message: Error message.
            input_type: Name of the type that was supplied.
        """
        super().__init__(message, operation='set_raw_output')
        self.input_type = input_type
