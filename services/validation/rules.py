# -*- coding: utf-8 -*-
"""
Field-level validation predicates.

Pure functions: no side effects, no network access.
"""

import re
from typing import Any

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Digits, spaces, parentheses, hyphens, periods, slashes; "+" only in front
PHONE_PATTERN = re.compile(r"\+?[0-9 ()./\-]*")

MIN_PHONE_DIGITS = 10


def is_blank(value: Any) -> bool:
    """True when the value is missing or only whitespace."""
    if value is None:
        return True
    return not str(value).strip()


def is_valid_email(value: str) -> bool:
    """local-part@domain.tld with at least one dot after the '@'."""
    if is_blank(value):
        return False
    return EMAIL_PATTERN.match(value.strip()) is not None


def count_digits(value: str) -> int:
    return len(re.sub(r"\D", "", value or ""))


def is_valid_phone(value: str) -> bool:
    if is_blank(value):
        return False
    value = value.strip()
    return PHONE_PATTERN.fullmatch(value) is not None and count_digits(value) >= MIN_PHONE_DIGITS
