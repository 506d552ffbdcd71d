"""
Form validation — runs the predicates over a whole submitted form.

Flow:
  ┌────────────┐
  │ Form data  │   {field: value}
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │  Schema    │   ← Which kind each field must conform to
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │ Predicates │   ← One pure check per field
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │   Report   │   ← Per-field checks + typed findings + pass/fail
  └────────────┘

Every schema field is required.  Extra fields in the data are reported but
do not fail the form.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from .models import (
    FieldCheck,
    Severity,
    ValidationFinding,
    ValidationKind,
    ValidationReport,
)
from .validators import PREDICATES, resolve_kind

logger = logging.getLogger(__name__)

# Only the 18-character form carries a check character
_LEGACY_ID_NUMBER_LENGTH = 15


class FormValidator:
    """Validates form submissions against a fixed field → kind schema.

    Usage:
        validator = FormValidator({"phone": "mobile", "mail": "email"})
        report = validator.run({"phone": "13800138000", "mail": "user@example.com"})
        if not report.is_valid:
            for finding in report.findings:
                print(finding)
    """

    def __init__(self, schema: Mapping[str, ValidationKind | str]):
        self.schema: dict[str, ValidationKind] = {
            field: resolve_kind(kind) for field, kind in schema.items()
        }

    def run(self, data: Mapping[str, Optional[str]]) -> ValidationReport:
        """Check every schema field in ``data`` and compile a report."""
        checks: list[FieldCheck] = []
        findings: list[ValidationFinding] = []

        for field, kind in self.schema.items():
            value = data.get(field)
            check, finding = self._check_field(field, kind, value)
            checks.append(check)
            if finding is not None:
                findings.append(finding)

        findings.extend(self._check_unexpected_fields(data))

        has_errors = any(f.severity == Severity.ERROR for f in findings)
        logger.info(
            "Validated %d field(s): %d finding(s), %s",
            len(checks),
            len(findings),
            "rejected" if has_errors else "accepted",
        )

        return ValidationReport(
            is_valid=not has_errors,
            checks=checks,
            findings=findings,
        )

    # ─── Single Field ───────────────────────────────────────────────

    def _check_field(
        self, field: str, kind: ValidationKind, value: Optional[str]
    ) -> tuple[FieldCheck, ValidationFinding | None]:
        if not value:
            return (
                FieldCheck(field=field, kind=kind, value=value, is_valid=False),
                ValidationFinding(
                    severity=Severity.ERROR,
                    code="MISSING_REQUIRED_FIELD",
                    field=field,
                    message=f"Required field '{field}' is missing or empty.",
                    details={"kind": kind.value},
                ),
            )

        is_valid = PREDICATES[kind](value)
        check = FieldCheck(field=field, kind=kind, value=value, is_valid=is_valid)

        if not is_valid:
            return check, ValidationFinding(
                severity=Severity.ERROR,
                code=f"INVALID_{kind.name}",
                field=field,
                message=f"'{value}' is not a valid {kind.value.replace('_', ' ')}.",
                details={"kind": kind.value, "value": value},
            )

        if kind == ValidationKind.ID_NUMBER and len(value) == _LEGACY_ID_NUMBER_LENGTH:
            return check, ValidationFinding(
                severity=Severity.INFO,
                code="ID_NUMBER_WITHOUT_CHECKSUM",
                field=field,
                message=(
                    f"ID number '{value}' uses the legacy 15-character form, "
                    f"which has no check character. Only its structure was verified."
                ),
                details={"length": len(value)},
            )

        return check, None

    # ─── Unexpected Fields ──────────────────────────────────────────

    def _check_unexpected_fields(
        self, data: Mapping[str, Optional[str]]
    ) -> list[ValidationFinding]:
        """Flag submitted fields the schema does not know about."""
        return [
            ValidationFinding(
                severity=Severity.WARNING,
                code="UNEXPECTED_FIELD",
                field=field,
                message=f"Field '{field}' is not part of the form schema and was ignored.",
                details={"expected_fields": sorted(self.schema)},
            )
            for field in data
            if field not in self.schema
        ]
