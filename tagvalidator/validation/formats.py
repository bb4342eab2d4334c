# -*- coding: utf-8 -*-
"""Location: ./tagvalidator/validation/formats.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti, Madhav Kandukuri

Format predicates.
Pure predicates answering "is this a syntactically valid email address / phone
number / URL". The validation engine receives them bundled in a FormatCheckers
instance so locale and format details stay out of the rule-walking logic.

Examples:
    >>> checkers = FormatCheckers.default()
    >>> checkers.is_valid_email("a@b.com"), checkers.is_valid_email("not-an-email")
    (True, False)
    >>> checkers.is_valid_phone_number("9876543210"), checkers.is_valid_phone_number("98765")
    (True, False)
    >>> checkers.is_valid_url("https://support.example.com/help"), checkers.is_valid_url("support")
    (True, False)
"""

# Standard
from dataclasses import dataclass
import re
from typing import Any, Callable, Optional, Sequence
from urllib.parse import urlparse

# Third-Party
from pydantic import EmailStr, TypeAdapter, ValidationError

# First-Party
from tagvalidator.config import settings

Predicate = Callable[[Any], bool]

_EMAIL_ADAPTER = TypeAdapter(EmailStr)


def is_valid_email(value: Any) -> bool:
    """Check that a value is a syntactically valid email address.

    Args:
        value: Candidate value.

    Returns:
        bool: True if the value is a well-formed email address.

    Examples:
        >>> is_valid_email("grievance@store.in")
        True
        >>> is_valid_email("a@b")
        False
        >>> is_valid_email(42)
        False
    """
    if not isinstance(value, str) or not value.strip():
        return False
    try:
        _EMAIL_ADAPTER.validate_python(value.strip())
    except ValidationError:
        return False
    return True


def is_valid_phone_number(value: Any, digits: Optional[int] = None) -> bool:
    """Check that a value is a phone number of exactly ``digits`` ASCII digits.

    Args:
        value: Candidate value; strings and integers are accepted.
        digits: Required number of digits; defaults to ``phone_number_digits``.

    Returns:
        bool: True if the value consists of exactly the required digits.

    Examples:
        >>> is_valid_phone_number("0123456789")
        True
        >>> is_valid_phone_number(9876543210)
        True
        >>> is_valid_phone_number("98765 43210")
        False
        >>> is_valid_phone_number(True)
        False
        >>> is_valid_phone_number("12345", digits=5)
        True
    """
    required = digits if digits is not None else settings.phone_number_digits
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        value = str(value)
    if not isinstance(value, str):
        return False
    return re.fullmatch(rf"[0-9]{{{required}}}", value.strip()) is not None


def is_valid_url(value: Any, schemes: Optional[Sequence[str]] = None) -> bool:
    """Check that a value is a well-formed absolute URL with an allowed scheme.

    Args:
        value: Candidate value.
        schemes: Allowed schemes; defaults to ``allowed_url_schemes``.

    Returns:
        bool: True if the value parses with an allowed scheme and a host.

    Examples:
        >>> is_valid_url("http://example.com")
        True
        >>> is_valid_url("ftp://example.com")
        False
        >>> is_valid_url("ftp://example.com", schemes=["ftp"])
        True
        >>> is_valid_url("https://")
        False
    """
    if not isinstance(value, str) or not value.strip():
        return False
    if len(value) > settings.max_url_length or any(ch.isspace() for ch in value.strip()):
        return False
    allowed = [scheme.lower() for scheme in (schemes if schemes is not None else settings.allowed_url_schemes)]
    try:
        result = urlparse(value.strip())
    except ValueError:
        return False
    return result.scheme.lower() in allowed and bool(result.netloc)


@dataclass(frozen=True)
class FormatCheckers:
    """Format predicates injected into the validation engine.

    Attributes:
        is_valid_email: Email address predicate.
        is_valid_phone_number: Phone number predicate.
        is_valid_url: URL predicate.

    Examples:
        >>> strict = FormatCheckers(is_valid_url=lambda value: str(value).startswith("https://"))
        >>> strict.is_valid_url("http://example.com")
        False
        >>> strict.is_valid_email("a@b.com")
        True
    """

    is_valid_email: Predicate = is_valid_email
    is_valid_phone_number: Predicate = is_valid_phone_number
    is_valid_url: Predicate = is_valid_url

    @classmethod
    def default(cls) -> "FormatCheckers":
        """Predicates backed by the configured settings.

        Returns:
            FormatCheckers: The default predicates.
        """
        return cls()
