"""
SQLGuard - static validation of SQL statements

Usage:
    from sqlguard import validate, ParameterizedQuery

    report = validate(ParameterizedQuery(text="SELECT id FROM t WHERE id = ?;", params=[5]))
    report.status  # "success"
"""
from sqlguard.dtos import (
    RawQuery,
    ParameterizedQuery,
    Severity,
    ReportStatus,
    Finding,
    Suggestion,
    ValidationReport,
)
from sqlguard.services import QueryValidator, validate, is_valid, version

__version__ = version()

__all__ = [
    "RawQuery",
    "ParameterizedQuery",
    "Severity",
    "ReportStatus",
    "Finding",
    "Suggestion",
    "ValidationReport",
    "QueryValidator",
    "validate",
    "is_valid",
    "version",
]
