"""Credential predicates used by the auth form."""

from __future__ import annotations

import re
from typing import Any

MIN_PASSWORD_LENGTH = 8

# local@domain.tld: one "@", no whitespace, dot-separated non-empty labels after "@"
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@.]+(\.[^\s@.]+)+$")


def is_valid_email(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    return _EMAIL_RE.fullmatch(value) is not None


def is_strong_password(value: Any, min_length: int = MIN_PASSWORD_LENGTH) -> bool:
    if not isinstance(value, str):
        return False
    return len(value) >= min_length


def passwords_match(first: Any, second: Any) -> bool:
    return first == second
