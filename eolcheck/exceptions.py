"""Custom exceptions for eol-check."""


class EolCheckError(Exception):
    """Base exception for all eol-check operations."""


class ConfigurationError(EolCheckError):
    """Raised when configuration validation fails."""


class DataSourceError(EolCheckError):
    """Raised when lifecycle data cannot be retrieved from the remote API.

    Carries the product key that was requested and the underlying cause so
    callers can decide whether to degrade to a warning or abort.
    """

    def __init__(self, product: str, cause: object):
        self.product = product
        self.cause = cause
        super().__init__(f"Failed to fetch EOL data for {product}: {cause}")
