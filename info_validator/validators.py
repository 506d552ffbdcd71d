"""
Format predicates — the deterministic core.

Each predicate:
  - Takes a string (or None)
  - Returns True if the string conforms to its format, False otherwise
  - Never raises; None is simply non-conforming
  - Is pure: no state, no I/O, safe to call from any thread

``validate()`` dispatches to a predicate by ValidationKind.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from . import patterns
from .checksum import id_check_character
from .exceptions import ChecksumParseError, UnknownValidationKindError
from .models import ValidationKind

logger = logging.getLogger(__name__)


# ─── Account Fields ──────────────────────────────────────────────────


def is_username(username: Optional[str]) -> bool:
    """Letter first, then 5-20 letters, digits or underscores (6-21 total)."""
    if username is None:
        return False
    return patterns.USERNAME.fullmatch(username) is not None


def is_password(password: Optional[str]) -> bool:
    """6-20 ASCII letters or digits."""
    if password is None:
        return False
    return patterns.PASSWORD.fullmatch(password) is not None


def is_mobile(mobile: Optional[str]) -> bool:
    """Exactly 11 digits, the first being 1."""
    if mobile is None:
        return False
    return patterns.MOBILE.fullmatch(mobile) is not None


def is_email(email: Optional[str]) -> bool:
    if email is None:
        return False
    return patterns.EMAIL.fullmatch(email) is not None


# ─── Text ────────────────────────────────────────────────────────────


def is_chinese(chinese: Optional[str]) -> bool:
    """Every character is a CJK unified ideograph (U+4E00 to U+9FA5).

    The empty string would satisfy the pattern, but is rejected first.
    """
    if not chinese:
        return False
    return patterns.CHINESE.fullmatch(chinese) is not None


def is_letter_start(s: Optional[str]) -> bool:
    """First character is an ASCII letter; the rest is unconstrained."""
    if s is None:
        return False
    return patterns.LETTER_START.fullmatch(s) is not None


# ─── Identity ────────────────────────────────────────────────────────


def is_id_number(id_number: Optional[str]) -> bool:
    """Validate a 15- or 18-character national ID number.

    Both forms must match their structural grammar (region, birth date,
    sequence).  The 18-character form carries a check character, verified
    case-insensitively against the weighted modulo-11 checksum of the first
    17 digits.  The legacy 15-character form has none and passes on
    structure alone.
    """
    if not id_number:
        return False

    matches = (
        patterns.ID_NUMBER_18.fullmatch(id_number) is not None
        or patterns.ID_NUMBER_15.fullmatch(id_number) is not None
    )
    if not matches or len(id_number) != 18:
        return matches

    try:
        expected = id_check_character(id_number)
    except ChecksumParseError as exc:
        logger.debug("ID number checksum could not be computed: %s", exc)
        return False

    actual = id_number[17].upper()
    if actual != expected:
        logger.debug(
            "ID number check character '%s' is wrong, expected '%s'", actual, expected
        )
        return False
    return True


# ─── Network ─────────────────────────────────────────────────────────


def is_url(url: Optional[str]) -> bool:
    """An http(s) URL appears somewhere in the string.

    The match is a search, not a full match: "see http://example.com" passes.
    """
    if url is None:
        return False
    return patterns.URL.search(url) is not None


def is_ip_addr(ip_addr: Optional[str]) -> bool:
    """A single IPv4 octet, 0-255.

    Dotted quads such as "192.168.1.1" do NOT pass; only one octet is checked.
    """
    if ip_addr is None:
        return False
    return patterns.IP_ADDR.fullmatch(ip_addr) is not None


# ─── Vehicles & Schools ──────────────────────────────────────────────


def is_school_code(school_code: Optional[str]) -> bool:
    """Starts with three digits; anything may follow."""
    if school_code is None:
        return False
    return patterns.SCHOOL_CODE.match(school_code) is not None


def is_license_plate_number(plate: Optional[str]) -> bool:
    """Seven-character vehicle plate, e.g. 京A12345 or 粤B1234学.

    First character: a province abbreviation, 使, 领 or A-Z.
    Second: A-Z.  Next four: A-Z or 0-9.
    Last: A-Z, 0-9 or one of 挂 学 警 港 澳.
    """
    if plate is None:
        return False
    return patterns.LICENSE_PLATE_NUMBER.fullmatch(plate) is not None


# ─── Dispatch ────────────────────────────────────────────────────────

PREDICATES: dict[ValidationKind, Callable[[Optional[str]], bool]] = {
    ValidationKind.USERNAME: is_username,
    ValidationKind.PASSWORD: is_password,
    ValidationKind.MOBILE: is_mobile,
    ValidationKind.EMAIL: is_email,
    ValidationKind.CHINESE: is_chinese,
    ValidationKind.ID_NUMBER: is_id_number,
    ValidationKind.URL: is_url,
    ValidationKind.IP_ADDR: is_ip_addr,
    ValidationKind.SCHOOL_CODE: is_school_code,
    ValidationKind.LICENSE_PLATE_NUMBER: is_license_plate_number,
    ValidationKind.LETTER_START: is_letter_start,
}


def resolve_kind(kind: ValidationKind | str) -> ValidationKind:
    """Coerce a kind name to ValidationKind, rejecting unknown names."""
    try:
        return ValidationKind(kind)
    except ValueError:
        raise UnknownValidationKindError(
            f"Unknown validation kind '{kind}'. "
            f"Expected one of: {', '.join(k.value for k in ValidationKind)}.",
            details={"kind": str(kind)},
        ) from None


def validate(kind: ValidationKind | str, value: Optional[str]) -> bool:
    """Run the predicate for ``kind`` against ``value``."""
    return PREDICATES[resolve_kind(kind)](value)
