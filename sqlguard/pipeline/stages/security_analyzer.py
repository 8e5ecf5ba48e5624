"""
Stage 3: Security Analysis
Injection idioms, host variables, dangerous keywords, comments
"""
import logging
from sqlguard.dtos import ValidationReport
from sqlguard.pipeline.sql import quoted_literals, preview
from sqlguard.pipeline.sql.catalog import (
    DANGEROUS_PATTERNS,
    DANGEROUS_KEYWORDS,
    SUPERGLOBALS,
    HOST_VARIABLE,
    HASH_COMMENT,
)

logger = logging.getLogger(__name__)


def analyze_security(sql: str, report: ValidationReport) -> None:
    """
    Scan the query text for injection risk

    Deep checks run only on raw queries: bound parameters are escaped by
    the driver, so only the literal SQL text matters there.
    Comment checks run for every query.
    """
    if not report.is_parameterized:
        _check_literals(sql, report)
        _check_superglobals(sql, report)
        _check_dangerous_keywords(sql, report)

    _check_comments(sql, report)

    logger.debug(f"Security analysis: {len(report.errors)} errors so far")


def _check_literals(sql: str, report: ValidationReport) -> None:
    literals = quoted_literals(sql)

    if report.verbose and literals:
        report.add_info(f"String count detected: {len(literals)}")

    for index, literal in enumerate(literals, 1):
        for pattern, description in DANGEROUS_PATTERNS.items():
            if pattern.search(literal):
                report.add_error(
                    f"Dangerous pattern '{description}' detected in string #{index}: "
                    f"'{preview(literal)}'",
                    code="dangerous_literal_pattern"
                )

        if "\\" in literal and "\\\\" not in literal:
            report.add_warning(
                f"Unescaped backslash detected in: '{preview(literal)}'",
                code="unescaped_backslash"
            )

        if report.verbose:
            report.add_info(f"String #{index} analyzed: '{preview(literal, ellipsis=True)}'")


def _check_superglobals(sql: str, report: ValidationReport) -> None:
    for name in SUPERGLOBALS:
        if name in sql:
            report.add_error(
                f"Superglobal variable {name} directly in query! SQL INJECTION POSSIBLE!",
                code="superglobal_in_query"
            )

    if HOST_VARIABLE.search(sql):
        report.add_warning(
            "Host variables detected in query. Ensure they are properly escaped!",
            code="host_variable_in_query"
        )


def _check_dangerous_keywords(sql: str, report: ValidationReport) -> None:
    upper = sql.upper()
    for keyword in DANGEROUS_KEYWORDS:
        if keyword in upper:
            report.add_warning(
                f"Potentially dangerous keyword detected: {keyword}",
                code="dangerous_keyword"
            )


def _check_comments(sql: str, report: ValidationReport) -> None:
    if "--" in sql:
        report.add_warning("SQL comment ('--') detected in query", code="line_comment")

    if "/*" in sql or "*/" in sql:
        report.add_warning("Block comment ('/* */') detected in query", code="block_comment")

    if HASH_COMMENT.search(sql):
        report.add_warning("Hash comment ('#') detected in query", code="hash_comment")
