"""Domain validators. Pure validation functions."""

from member_registry.domain.validators.member_validator import (
    MemberFields,
    is_numeric_string,
    normalize,
    require_fields,
    validate_national_id,
    validate_new_member,
)

__all__ = [
    "MemberFields",
    "is_numeric_string",
    "normalize",
    "require_fields",
    "validate_national_id",
    "validate_new_member",
]
