"""
DTOs (Data Transfer Objects)
Internal objects for passing data between layers
"""
from sqlguard.dtos.validation import (
    RawQuery,
    ParameterizedQuery,
    QueryInput,
    coerce_query,
    query_text,
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
