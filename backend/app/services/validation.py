"""
Roster API - Request Validators
===============================

What:  Pure functions that check user-supplied values before they reach a repository.
How:   Each validator returns the accepted value or raises a ValidationError
       subclass; the global exception handlers turn those into 400 responses.
Who:   Called by the repository (names) and by route handlers (id segments).
"""

import re
from typing import Optional

from app.exceptions import InvalidUserIdError, ValidationError

NAME_REQUIRED_MESSAGE = "Name is required."

USER_ID_REQUIRED_MESSAGE = "User ID is required."
USER_ID_NOT_A_NUMBER_MESSAGE = "User ID must be a valid number."
USER_ID_NEGATIVE_MESSAGE = "User ID must be a positive number."

# Signed 32-bit range accepted for user ids
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# Optional surrounding whitespace, optional sign, ASCII digits only.
# int() alone would also accept "1_000" and non-ASCII digits.
_INTEGER_PATTERN = re.compile(r"^\s*[+-]?[0-9]+\s*$")


def require_name(name: Optional[str]) -> str:
    """
    Ensure a user name is present and not just whitespace.

    Returns the name unchanged (it is stored as sent, not trimmed).

    Raises:
        ValidationError: name is None, empty or whitespace-only
    """
    if name is None or not name.strip():
        raise ValidationError(message=NAME_REQUIRED_MESSAGE, field="name")
    return name


def parse_user_id(raw: Optional[str]) -> int:
    """
    Parse a user id taken from a URL path segment.

    Checks run in order, each with its own message:
        1. present and non-empty
        2. parses as a signed 32-bit integer
        3. not negative (zero is accepted)

    Raises:
        InvalidUserIdError: with one of the three messages above
    """
    if raw is None or raw == "":
        raise InvalidUserIdError(USER_ID_REQUIRED_MESSAGE, raw_value=raw)

    if not _INTEGER_PATTERN.match(raw):
        raise InvalidUserIdError(USER_ID_NOT_A_NUMBER_MESSAGE, raw_value=raw)

    value = int(raw.strip())
    if value < INT32_MIN or value > INT32_MAX:
        raise InvalidUserIdError(USER_ID_NOT_A_NUMBER_MESSAGE, raw_value=raw)

    if value < 0:
        raise InvalidUserIdError(USER_ID_NEGATIVE_MESSAGE, raw_value=raw)

    return value
