"""Domain-specific exceptions. Pure domain layer, no infrastructure."""


class DomainError(Exception):
    """Base for all domain-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidInputError(DomainError):
    """Raised when a field is missing, empty after trimming, or malformed."""


class ConflictError(DomainError):
    """Raised when a national ID or membership number is already taken."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class MemberNotFoundError(DomainError):
    """Raised when no member matches the given national ID."""
