"""Pipeline exceptions for Subject Spotter."""


class ApplicationError(Exception):
    """Custom exception for application-level errors."""
