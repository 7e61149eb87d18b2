"""Application-layer exceptions. Do not reuse domain exceptions."""


class ApplicationError(Exception):
    """Base for all application-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class StorageError(ApplicationError):
    """Raised when the underlying database fails. The request may be retried as a whole."""


class RenderError(ApplicationError):
    """Raised when the membership credential document cannot be generated."""
