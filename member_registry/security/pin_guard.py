"""Admin PIN guard. Stateless check of a shared secret. No FastAPI."""

import hmac
from typing import Any, Mapping, Optional

from member_registry.security.exceptions import ForbiddenError

PIN_HEADER = "x-admin-pin"
PIN_FIELD = "pin"


def extract_pin(
    headers: Mapping[str, str],
    body: Optional[Mapping[str, Any]],
    query: Mapping[str, str],
) -> Optional[str]:
    """Pick the presented PIN: header first, then body field, then query parameter.

    Only non-empty strings count; a JSON number or other non-string body value
    is treated as absent.
    """
    candidates = (
        headers.get(PIN_HEADER),
        body.get(PIN_FIELD) if body else None,
        query.get(PIN_FIELD),
    )
    for candidate in candidates:
        if isinstance(candidate, str) and candidate:
            return candidate
    return None


class AdminPinGuard:
    """Compare a presented PIN with the configured secret. Raise ForbiddenError if invalid."""

    def __init__(self, secret: str) -> None:
        if not secret:
            raise ValueError("admin PIN must not be empty")
        self._secret = secret.encode("utf-8")

    def check(self, presented: Optional[str]) -> None:
        """Raises ForbiddenError unless presented equals the secret exactly."""
        if not isinstance(presented, str):
            raise ForbiddenError("PIN inválido")
        if not hmac.compare_digest(presented.encode("utf-8"), self._secret):
            raise ForbiddenError("PIN inválido")
