"""Security-layer exceptions. Typed, no HTTP."""


class SecurityError(Exception):
    """Base for all security-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ForbiddenError(SecurityError):
    """Raised when the admin PIN is missing or does not match the configured secret."""
