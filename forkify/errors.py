"""
Error taxonomy for the Forkify recipe client.

The connector and the store raise these. RecipeState network operations
catch them, log them, and hand them back inside an OperationResult.
"""

from typing import Optional


class ForkifyError(Exception):
    """Base class for all errors raised by this package."""
    pass


class NetworkError(ForkifyError):
    """
    Raised when an HTTP exchange with the recipe API fails.

    This covers transport failures, timeouts, non-JSON bodies and
    responses with a failure status.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(NetworkError):
    """Raised when the API answers 404 for a recipe id."""
    pass


class ValidationError(ForkifyError):
    """Raised for malformed input: ingredient strings, page numbers, servings, payloads."""
    pass


class StorageError(ForkifyError):
    """Raised when the local key-value store cannot be read, written or parsed."""
    pass


class ConfigError(ForkifyError):
    """Raised when required configuration is missing or malformed."""
    pass
