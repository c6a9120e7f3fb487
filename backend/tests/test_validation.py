"""
Roster API - Validator Unit Tests
=================================

What:  Tests for require_name and parse_user_id.

What we test:
    ✅ Names: None, empty and whitespace-only are rejected
    ✅ Ids: missing, non-numeric, out of 32-bit range, negative
    ✅ Ids: zero, sign and surrounding whitespace are accepted
"""

import pytest

from app.exceptions import InvalidUserIdError, ValidationError
from app.services.validation import (
    USER_ID_NEGATIVE_MESSAGE,
    USER_ID_NOT_A_NUMBER_MESSAGE,
    USER_ID_REQUIRED_MESSAGE,
    parse_user_id,
    require_name,
)


class TestRequireName:

    def test_valid_name_returned_as_is(self):
        assert require_name("Alice") == "Alice"

    @pytest.mark.parametrize("name", [None, "", " ", "\t"])
    def test_blank_rejected(self, name):
        with pytest.raises(ValidationError) as exc_info:
            require_name(name)
        assert exc_info.value.message == "Name is required."
        assert exc_info.value.field == "name"

    def test_validation_error_is_an_argument_error(self):
        """Code that only knows ValueError still sees a bad argument."""
        with pytest.raises(ValueError):
            require_name("")


class TestParseUserId:

    @pytest.mark.parametrize("raw, expected", [
        ("123456", 123456),
        ("0", 0),
        ("+7", 7),
        (" 42 ", 42),
        ("2147483647", 2147483647),
    ])
    def test_valid(self, raw, expected):
        assert parse_user_id(raw) == expected

    @pytest.mark.parametrize("raw", [None, ""])
    def test_missing(self, raw):
        with pytest.raises(InvalidUserIdError, match=USER_ID_REQUIRED_MESSAGE):
            parse_user_id(raw)

    @pytest.mark.parametrize("raw", ["123abc", "abc", "1.5", "1_000", "--1", "2147483648", " "])
    def test_not_a_number(self, raw):
        with pytest.raises(InvalidUserIdError) as exc_info:
            parse_user_id(raw)
        assert exc_info.value.message == USER_ID_NOT_A_NUMBER_MESSAGE
        assert exc_info.value.raw_value == raw

    @pytest.mark.parametrize("raw", ["-1", "-123456", "-2147483648"])
    def test_negative(self, raw):
        with pytest.raises(InvalidUserIdError, match=USER_ID_NEGATIVE_MESSAGE):
            parse_user_id(raw)

    def test_below_int32_is_not_a_number(self):
        with pytest.raises(InvalidUserIdError, match=USER_ID_NOT_A_NUMBER_MESSAGE):
            parse_user_id("-2147483649")
