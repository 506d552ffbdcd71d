"""
Fixed format grammars — compiled once at import, never mutated.

Every character class is spelled out in ASCII (``[0-9]`` rather than ``\\d``)
or compiled with ``re.ASCII``: Python's ``\\d`` and ``\\w`` would otherwise
accept full-width and other Unicode digits, which none of these formats allow.
"""

from __future__ import annotations

import re

# ─── Account Fields ──────────────────────────────────────────────────

# Letter first, then 5-20 letters, digits or underscores.
USERNAME = re.compile(r"[A-Za-z][A-Za-z0-9_]{5,20}")

PASSWORD = re.compile(r"[A-Za-z0-9]{6,20}")

MOBILE = re.compile(r"1[0-9]{10}")

# Local part: alphanumeric runs, single '-' or '.' between them, at least
# two characters, ending alphanumeric.  Same language as
# ([A-Za-z0-9]+[-.]?)+[A-Za-z0-9] without the nested quantifier.
EMAIL = re.compile(
    r"[A-Za-z0-9](?:[-.]?[A-Za-z0-9])+"
    r"@"
    r"(?:[A-Za-z0-9]+(?:-[A-Za-z0-9]+)?\.)+"
    r"[A-Za-z]{2,}"
)

# ─── Text ────────────────────────────────────────────────────────────

CHINESE = re.compile(r"[\u4e00-\u9fa5]*")

LETTER_START = re.compile(r"[A-Za-z].*", re.DOTALL)

# ─── Identity ────────────────────────────────────────────────────────

_MONTH = r"(?:0[1-9]|10|11|12)"
_DAY = r"(?:[0-2][1-9]|10|20|30|31)"

# 18 characters: region(6) + yyyy(18xx-20xx) + mm + dd + sequence(3) + check
ID_NUMBER_18 = re.compile(
    rf"[1-9][0-9]{{5}}(?:18|19|20)[0-9]{{2}}{_MONTH}{_DAY}[0-9]{{3}}[0-9Xx]"
)

# 15 characters (legacy): region(6) + yy + mm + dd + sequence(3), no check
ID_NUMBER_15 = re.compile(rf"[1-9][0-9]{{5}}[0-9]{{2}}{_MONTH}{_DAY}[0-9]{{3}}")

ID_CHECK_WEIGHTS: tuple[int, ...] = (7, 9, 10, 5, 8, 4, 2, 1, 6, 3, 7, 9, 10, 5, 8, 4, 2)

# Indexed by (weighted sum % 11)
ID_CHECK_CHARACTERS: tuple[str, ...] = ("1", "0", "X", "9", "8", "7", "6", "5", "4", "3", "2")

# ─── Network ─────────────────────────────────────────────────────────

# Searched, not anchored: any embedded http(s) URL satisfies it.
URL = re.compile(r"http(s)?://([\w-]+\.)+[\w-]+(/[\w\- ./?%&=]*)?", re.ASCII)

# One octet (0-255), not a dotted quad.
IP_ADDR = re.compile(r"25[0-5]|2[0-4][0-9]|[01][0-9]{2}|[1-9]?[0-9]")

# ─── Vehicles & Schools ──────────────────────────────────────────────

# Matched as a prefix: "starts with three digits".
SCHOOL_CODE = re.compile(r"[0-9]{3}")

PROVINCE_ABBREVIATIONS = "京津沪渝冀豫云辽黑湘皖鲁新苏浙赣鄂桂甘晋蒙陕吉闽贵粤青藏川宁琼使领"

# 挂 trailer, 学 learner, 警 police, 港 Hong Kong, 澳 Macau
PLATE_SUFFIX_MARKERS = "挂学警港澳"

LICENSE_PLATE_NUMBER = re.compile(
    rf"[{PROVINCE_ABBREVIATIONS}A-Z][A-Z][A-Z0-9]{{4}}[A-Z0-9{PLATE_SUFFIX_MARKERS}]"
)
