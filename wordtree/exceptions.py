"""Custom exception hierarchy for the wordtree application."""

from starlette import status


class WordtreeError(Exception):
    """Base exception for application errors that carry an HTTP status."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class StorageError(WordtreeError):
    """
    Underlying persistence failure (connectivity, constraint violation, ...).

    Reported to clients as a generic, retryable error; the original
    exception is kept on ``__cause__`` for logging.
    """

    def __init__(self, operation: str, message: str | None = None) -> None:
        """Initialize with the failed store operation."""
        self.operation = operation
        super().__init__(
            message or f"Storage failure during {operation}",
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
