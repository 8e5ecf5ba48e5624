"""
Validation DTOs
"""
from sqlguard.dtos.validation.query import (
    RawQuery,
    ParameterizedQuery,
    QueryInput,
    coerce_query,
    query_text,
)
from sqlguard.dtos.validation.report import (
    Severity,
    ReportStatus,
    Finding,
    Suggestion,
    ValidationReport,
)

__all__ = [
    "RawQuery",
    "ParameterizedQuery",
    "QueryInput",
    "coerce_query",
    "query_text",
    "Severity",
    "ReportStatus",
    "Finding",
    "Suggestion",
    "ValidationReport",
]
