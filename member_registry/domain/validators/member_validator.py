"""Validators for member domain rules. Pure functions, no infrastructure or DB access."""

from dataclasses import dataclass
from typing import Optional

from member_registry.domain.exceptions import InvalidInputError

_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class MemberFields:
    """Trimmed, non-empty member fields ready for storage."""

    membership_number: str
    full_name: str
    national_id: str


def is_numeric_string(value: Optional[str]) -> bool:
    """True iff value is non-empty and every character is an ASCII decimal digit."""
    if not value:
        return False
    return all(ch in _DIGITS for ch in value)


def normalize(value: Optional[str]) -> str:
    """Trim surrounding whitespace; None becomes the empty string."""
    if value is None:
        return ""
    return value.strip()


def validate_national_id(national_id: Optional[str]) -> str:
    """Return the trimmed national ID. Raises InvalidInputError unless it is digits only."""
    value = normalize(national_id)
    if not is_numeric_string(value):
        raise InvalidInputError("DNI inválido")
    return value


def require_fields(
    membership_number: Optional[str],
    full_name: Optional[str],
    national_id: Optional[str],
) -> MemberFields:
    """Trim all three fields; raise InvalidInputError if any is empty."""
    fields = MemberFields(
        membership_number=normalize(membership_number),
        full_name=normalize(full_name),
        national_id=normalize(national_id),
    )
    if not fields.membership_number or not fields.full_name or not fields.national_id:
        raise InvalidInputError("Faltan datos")
    return fields


def validate_new_member(
    membership_number: Optional[str],
    full_name: Optional[str],
    national_id: Optional[str],
) -> MemberFields:
    """
    Validate an insert: all fields present, national ID and membership number digits only.
    National ID is checked first so the caller sees the same message order as the API.
    """
    fields = require_fields(membership_number, full_name, national_id)
    if not is_numeric_string(fields.national_id):
        raise InvalidInputError("DNI inválido")
    if not is_numeric_string(fields.membership_number):
        raise InvalidInputError("N° Afiliado inválido")
    return fields
