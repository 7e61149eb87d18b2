"""Security tests: PIN lookup priority and exact comparison."""

import pytest

from member_registry.security.exceptions import ForbiddenError
from member_registry.security.pin_guard import AdminPinGuard, extract_pin


@pytest.fixture
def guard():
    return AdminPinGuard("1906")


def test_correct_pin_passes(guard):
    guard.check("1906")


@pytest.mark.parametrize("presented", [None, "", "1907", " 1906", "1906 ", "19060"])
def test_wrong_or_missing_pin_forbidden(guard, presented):
    with pytest.raises(ForbiddenError) as exc:
        guard.check(presented)
    assert exc.value.message == "PIN inválido"


def test_empty_secret_rejected():
    with pytest.raises(ValueError):
        AdminPinGuard("")


def test_header_wins_over_body_and_query():
    pin = extract_pin({"x-admin-pin": "h"}, {"pin": "b"}, {"pin": "q"})
    assert pin == "h"


def test_body_wins_over_query():
    assert extract_pin({}, {"pin": "b"}, {"pin": "q"}) == "b"


def test_query_used_last():
    assert extract_pin({}, None, {"pin": "q"}) == "q"


def test_empty_values_fall_through():
    assert extract_pin({"x-admin-pin": ""}, {"pin": ""}, {"pin": "q"}) == "q"


def test_no_pin_anywhere():
    assert extract_pin({}, {}, {}) is None


@pytest.mark.parametrize("pin", [1906, 1906.0, True, ["1906"], {"v": "1906"}])
def test_non_string_body_pin_is_absent(pin):
    assert extract_pin({}, {"pin": pin}, {}) is None


def test_non_string_body_pin_falls_through_to_query():
    assert extract_pin({}, {"pin": 1906}, {"pin": "q"}) == "q"


def test_non_string_presented_pin_forbidden(guard):
    with pytest.raises(ForbiddenError):
        guard.check(1906)
