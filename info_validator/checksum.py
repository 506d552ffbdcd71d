"""
Check character for 18-character national ID numbers.

Each of the first 17 digits is multiplied by its positional weight, the
products are summed, and ``sum % 11`` indexes the check-character table.
"""

from __future__ import annotations

from .exceptions import ChecksumParseError
from .patterns import ID_CHECK_CHARACTERS, ID_CHECK_WEIGHTS

_ASCII_DIGITS = frozenset("0123456789")


def id_check_character(id_number: str) -> str:
    """Return the expected 18th character for an ID number.

    Only the first 17 characters are read, so both the 17-digit body and a
    full 18-character number are accepted.

    Raises:
        ChecksumParseError: fewer than 17 characters, or a non-digit among them.
    """
    body = id_number[: len(ID_CHECK_WEIGHTS)]
    if len(body) < len(ID_CHECK_WEIGHTS):
        raise ChecksumParseError(
            f"ID number body must have {len(ID_CHECK_WEIGHTS)} digits, got {len(body)}",
            details={"id_number": id_number},
        )

    total = 0
    for position, (char, weight) in enumerate(zip(body, ID_CHECK_WEIGHTS)):
        if char not in _ASCII_DIGITS:
            raise ChecksumParseError(
                f"Non-digit '{char}' at position {position} of ID number",
                details={"id_number": id_number, "position": position, "char": char},
            )
        total += int(char) * weight

    return ID_CHECK_CHARACTERS[total % 11]
