"""Security: admin PIN guard. No FastAPI."""

from member_registry.security.exceptions import ForbiddenError, SecurityError
from member_registry.security.pin_guard import AdminPinGuard, extract_pin

__all__ = [
    "AdminPinGuard",
    "ForbiddenError",
    "SecurityError",
    "extract_pin",
]
