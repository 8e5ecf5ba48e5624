"""
Stage 2: Parameter Analysis
Placeholder/parameter cross-checks for parameterized statements
"""
import logging
from sqlguard.dtos import ValidationReport
from sqlguard.pipeline.sql import count_placeholders, named_placeholders, quoted_literals, preview
from sqlguard.pipeline.sql.catalog import (
    SUSPICIOUS_SUBSTRINGS,
    SQL_KEYWORDS,
    SUPERGLOBAL_ACCESS,
    HOST_VARIABLE,
    HOST_VARIABLE_INTERPOLATION,
)

logger = logging.getLogger(__name__)


def analyze_parameters(sql: str, report: ValidationReport) -> None:
    """
    Validate a parameterized statement against its bound values

    Checks:
    1. Placeholder count == parameter count
    2. No mixing of '?' and ':name' styles
    3. String values free of comment markers / SQL keywords (advisory)
    4. No hardcoded quoted literals in the SQL text
    5. No host-language variables interpolated into the SQL text
    """
    if not report.is_parameterized:
        return

    params = report.params or {}
    verbose = report.verbose

    positional, named = count_placeholders(sql)
    total = positional + named
    param_count = len(params)

    if verbose:
        report.add_info(f"Placeholders '?' found: {positional}")
        report.add_info(f"Named placeholders found: {named}")
        if named > 0:
            report.add_info(f"Placeholder names: {', '.join(named_placeholders(sql))}")

    if total != param_count:
        report.add_error(
            f"Placeholder count ({total}) differs from parameter count ({param_count})",
            code="placeholder_count_mismatch"
        )
    elif verbose:
        report.add_info(f"Perfect match: {total} placeholders = {param_count} parameters")

    if positional > 0 and named > 0:
        report.add_error(
            "Mixed '?' and named ':name' placeholders in the same query (forbidden)",
            code="mixed_placeholders"
        )

    if verbose and params:
        report.add_info("=== PARAMETER ANALYSIS ===")

    _check_values(report)
    _check_hardcoded_literals(sql, report)
    _check_host_variables(sql, report)

    logger.debug(f"Parameter analysis: {total} placeholders, {param_count} params")


def _check_values(report: ValidationReport) -> None:
    for key, value in (report.params or {}).items():
        if report.verbose:
            shown = preview(value) if isinstance(value, str) else repr(value)
            report.add_info(f"Parameter [{key}]: type={type(value).__name__}, value={shown}")

        if not isinstance(value, str):
            continue

        lowered = value.lower()

        for suspect in SUSPICIOUS_SUBSTRINGS:
            if suspect.lower() in lowered:
                report.add_warning(
                    f"Suspicious character '{suspect}' detected in parameter [{key}]",
                    code="suspicious_parameter"
                )

        for keyword in SQL_KEYWORDS:
            if keyword.lower() in lowered:
                report.add_warning(
                    f"SQL keyword '{keyword}' detected in parameter [{key}]. "
                    f"Verify this is intentional.",
                    code="sql_keyword_in_parameter"
                )


def _check_hardcoded_literals(sql: str, report: ValidationReport) -> None:
    literals = quoted_literals(sql)
    if not literals:
        return

    report.add_warning(
        "Hardcoded values (in quotes) detected in parameterized query. Use placeholders!",
        code="hardcoded_literal"
    )

    if report.verbose:
        shown = ", ".join(f"'{preview(v, 30, ellipsis=True)}'" for v in literals)
        report.add_info(f"Hardcoded values found: {shown}")


def _check_host_variables(sql: str, report: ValidationReport) -> None:
    if SUPERGLOBAL_ACCESS.search(sql):
        report.add_error(
            "Superglobal variables detected in query! SQL INJECTION POSSIBLE!",
            code="superglobal_in_query"
        )

    if HOST_VARIABLE.search(sql) or HOST_VARIABLE_INTERPOLATION.search(sql):
        report.add_error(
            "Host variables detected in parameterized query! Use placeholders instead.",
            code="host_variable_in_query"
        )
