"""
Pydantic models for validation results.

The predicates return plain booleans; these models only appear where many
fields are checked together (form validation and the HTTP API).
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# ─── Validation Kinds ───────────────────────────────────────────────


class ValidationKind(str, Enum):
    """Every format the validator knows how to check."""

    USERNAME = "username"
    PASSWORD = "password"
    MOBILE = "mobile"
    EMAIL = "email"
    CHINESE = "chinese"
    ID_NUMBER = "id_number"
    URL = "url"
    IP_ADDR = "ip_addr"
    SCHOOL_CODE = "school_code"
    LICENSE_PLATE_NUMBER = "license_plate_number"
    LETTER_START = "letter_start"


# ─── Severity Levels ────────────────────────────────────────────────


class Severity(str, Enum):
    """Severity of a validation finding."""

    ERROR = "ERROR"  # Field does not conform, form must be rejected
    WARNING = "WARNING"  # Suspicious input, needs a look
    INFO = "INFO"  # Informational observation


# ─── Findings & Checks ──────────────────────────────────────────────


class ValidationFinding(BaseModel):
    """A single validation finding with severity, machine-readable code, and details."""

    severity: Severity
    code: str  # Machine-readable, e.g. "INVALID_MOBILE"
    field: str  # Which form field this relates to
    message: str  # Human-readable explanation
    details: dict = Field(default_factory=dict)


class FieldCheck(BaseModel):
    """Outcome of running one predicate against one form field."""

    field: str
    kind: ValidationKind
    value: Optional[str] = None
    is_valid: bool


# ─── Validation Report ──────────────────────────────────────────────


class ValidationReport(BaseModel):
    """The result of validating a whole form."""

    is_valid: bool
    checks: list[FieldCheck] = Field(default_factory=list)
    findings: list[ValidationFinding] = Field(default_factory=list)
