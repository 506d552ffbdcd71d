"""
Info Validator — FastAPI Server
================================

RESTful API over the format predicates.

Endpoints:
    POST /validate          Check one value against one kind
    POST /validate/form     Check a whole form against a field → kind schema
    GET  /kinds             List the supported validation kinds
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from pydantic import BaseModel, Field

from info_validator import __version__
from info_validator.form import FormValidator
from info_validator.models import (
    FieldCheck,
    Severity,
    ValidationFinding,
    ValidationKind,
    ValidationReport,
)
from info_validator.validators import validate

# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Info Validator API",
    description=(
        "Fixed-format validation for form input: usernames, passwords, "
        "mobile numbers, emails, Chinese text, national ID numbers, URLs, "
        "IP octets, school codes and vehicle license plates."
    ),
    version=__version__,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ValidateRequest(BaseModel):
    """Request body for the /validate endpoint."""

    kind: ValidationKind
    value: Optional[str] = Field(
        ...,
        description="The string to check. null is accepted and never conforms.",
        json_schema_extra={"example": "13800138000"},
    )


class ValidateResponse(BaseModel):
    kind: ValidationKind
    value: Optional[str]
    is_valid: bool


class FormRequest(BaseModel):
    """Request body for the /validate/form endpoint."""

    # "schema" shadows a BaseModel attribute, hence the alias
    form_schema: dict[str, ValidationKind] = Field(
        ...,
        alias="schema",
        min_length=1,
        description="Field name → validation kind. Every listed field is required.",
    )
    data: dict[str, Optional[str]] = Field(default_factory=dict)

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {"example": {
            "schema": {"phone": "mobile", "mail": "email", "plate": "license_plate_number"},
            "data": {"phone": "13800138000", "mail": "user@example.com", "plate": "京A12345"},
        }},
    }


class FormResponse(BaseModel):
    """Structured form report returned by the API."""

    is_valid: bool
    error_count: int
    warning_count: int
    checks: list[FieldCheck]
    findings: list[ValidationFinding]


class HealthResponse(BaseModel):
    status: str
    version: str
    kinds_supported: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _build_response(report: ValidationReport) -> FormResponse:
    """Convert the internal ValidationReport to the API response schema."""
    error_count = sum(1 for f in report.findings if f.severity == Severity.ERROR)
    warning_count = sum(1 for f in report.findings if f.severity == Severity.WARNING)

    return FormResponse(
        is_valid=report.is_valid,
        error_count=error_count,
        warning_count=warning_count,
        checks=report.checks,
        findings=report.findings,
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/validate",
    summary="Check one value against one format",
    tags=["Validation"],
)
def validate_value(request: ValidateRequest) -> ValidateResponse:
    """Run a single predicate. Unknown kinds are rejected with 422."""
    return ValidateResponse(
        kind=request.kind,
        value=request.value,
        is_valid=validate(request.kind, request.value),
    )


@app.post(
    "/validate/form",
    summary="Validate a whole form",
    tags=["Validation"],
)
def validate_form(request: FormRequest) -> FormResponse:
    """Check every field in `schema` against its kind.

    Returns a structured report with:
    - **is_valid**: `true` if no field produced an ERROR finding
    - **checks**: one entry per schema field, in schema order
    - **findings**: missing, invalid and unexpected fields
    """
    report = FormValidator(request.form_schema).run(request.data)
    return _build_response(report)


@app.get(
    "/kinds",
    summary="Supported validation kinds",
    tags=["Validation"],
)
def list_kinds() -> list[ValidationKind]:
    return list(ValidationKind)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
)
def health_check() -> HealthResponse:
    """Returns service status and version."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        kinds_supported=len(ValidationKind),
    )
