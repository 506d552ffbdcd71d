#!/usr/bin/env python3
"""
Info Validator — Entry Point
=============================

Demonstrates form validation on a sample registration form.

Usage:
    python main.py
"""

from __future__ import annotations

import logging
import sys

from info_validator.form import FormValidator
from info_validator.models import Severity, ValidationReport

# ─── A Registration Form — Wrong on Purpose ─────────────────────────

REGISTRATION_SCHEMA = {
    "username": "username",
    "password": "password",
    "mobile": "mobile",
    "email": "email",
    "real_name": "chinese",
    "id_number": "id_number",
    "homepage": "url",
    "school_code": "school_code",
    "plate": "license_plate_number",
}

REGISTRATION_FORM = {
    "username": "zhang_san",
    "password": "secret",
    "mobile": "2380013800",
    "email": "zhang.san@example.com",
    "real_name": "张三",
    "id_number": "110105194912310021",
    "homepage": "https://zhangsan.example.com/about",
    "school_code": "021-0042",
    "plate": "京A12345",
    "referrer": "friend",
}


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_YELLOW = "\033[93m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer Helpers ─────────────────────────────────────────


def _print_checks(report: ValidationReport) -> None:
    """Print one line per checked field."""
    for check in report.checks:
        mark = f"{_GREEN}ok{_RESET}" if check.is_valid else f"{_RED}FAIL{_RESET}"
        print(f"  {check.field:<12} {_DIM}{check.kind.value:<22}{_RESET} {mark}  {check.value}")


def _print_findings_group(findings, color: str, label: str) -> None:
    """Print a categorized group of findings (errors or warnings)."""
    if not findings:
        return
    print(f"\n  {color}{_BOLD}{label} ({len(findings)}){_RESET}")
    for f in findings:
        print(f"    {color}[{f.code}]{_RESET} {f.field}")
        print(f"    {f.message}")
        print()


def _print_info_group(findings) -> None:
    """Print informational findings (compact format)."""
    if not findings:
        return
    print(f"  {_CYAN}INFO ({len(findings)}){_RESET}")
    for f in findings:
        print(f"    [{f.code}] {f.message}")
    print()


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_report(report: ValidationReport) -> int:
    """Pretty-print the form report with ANSI color codes.

    Returns:
        0 if the form passed, 1 if rejected.
    """
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  FORM VALIDATION REPORT{_RESET}")
    print(f"{'=' * _WIDTH}")
    _print_checks(report)
    print(f"{'─' * _WIDTH}")

    errors = [f for f in report.findings if f.severity == Severity.ERROR]
    warnings = [f for f in report.findings if f.severity == Severity.WARNING]
    infos = [f for f in report.findings if f.severity == Severity.INFO]

    _print_findings_group(errors, _RED, "ERRORS")
    _print_findings_group(warnings, _YELLOW, "WARNINGS")
    _print_info_group(infos)

    print(f"{'=' * _WIDTH}")
    if report.is_valid:
        print(f"  {_GREEN}{_BOLD}FORM PASSED ALL CHECKS{_RESET}")
    else:
        print(f"  {_RED}{_BOLD}FORM REJECTED  --  {len(errors)} error(s) found{_RESET}")
    print(f"{'=' * _WIDTH}\n")

    return 0 if report.is_valid else 1


# ─── Main ────────────────────────────────────────────────────────────


def main():
    """Validate the sample form and print the report."""
    logging.basicConfig(level=logging.WARNING)

    validator = FormValidator(REGISTRATION_SCHEMA)
    report = validator.run(REGISTRATION_FORM)
    exit_code = print_report(report)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
