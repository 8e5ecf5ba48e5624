"""
Stage 1: Syntax Analysis
Balance checks, termination, statement-specific structure
"""
import logging
from sqlguard.dtos import ValidationReport
from sqlguard.pipeline.sql import statement_type, count_placeholders
from sqlguard.pipeline.sql.catalog import INSERT_STATEMENT, SELECT_STAR, JOIN_KEYWORD

logger = logging.getLogger(__name__)


def analyze_syntax(sql: str, report: ValidationReport) -> None:
    """
    Run syntax checks on the trimmed query text

    Checks:
    1. Parentheses balance
    2. Quote balance (raw queries only)
    3. Semicolon termination
    4. INSERT / UPDATE / SELECT / DELETE structure (by first token)

    Never raises: every outcome is a finding on the report.
    """
    verbose = report.verbose
    if verbose:
        report.add_info(f"Syntax analysis: {sql[:100]}...")

    query_type = statement_type(sql)
    if verbose:
        report.add_info(f"Query type detected: {query_type}")

    _check_parentheses(sql, report)

    if not report.is_parameterized:
        _check_quotes(sql, report)

    if not sql.strip().endswith(";"):
        report.add_warning("Query does not end with semicolon ';'", code="missing_semicolon")

    if query_type == "INSERT":
        _check_insert(sql, report)
    elif query_type == "UPDATE":
        _check_update(sql, report)
    elif query_type == "SELECT":
        _check_select(sql, report)
    elif query_type == "DELETE":
        _check_delete(sql, report)

    logger.debug(f"Syntax analysis done for {query_type or 'empty'} statement")


def _check_parentheses(sql: str, report: ValidationReport) -> None:
    opening = sql.count("(")
    closing = sql.count(")")

    if opening != closing:
        report.add_error(
            f"Unbalanced parentheses (opening: {opening}, closing: {closing})",
            code="unbalanced_parentheses"
        )
    elif report.verbose:
        report.add_info(f"Balanced parentheses: {opening} pairs")


def _check_quotes(sql: str, report: ValidationReport) -> None:
    for quote, name, code in (
        ("'", "single", "unpaired_single_quotes"),
        ('"', "double", "unpaired_double_quotes"),
    ):
        count = sql.count(quote)
        if count % 2 != 0:
            report.add_error(f"Unpaired {name} quotes ({quote}) (count: {count})", code=code)
        elif report.verbose and count > 0:
            report.add_info(f"{name.capitalize()} quotes paired: {count // 2} pairs")


def _check_insert(sql: str, report: ValidationReport) -> None:
    match = INSERT_STATEMENT.search(sql)
    if not match:
        # Exotic INSERT syntax (INSERT ... SELECT, SET form): skip arity check
        return

    table, fields_str, values_str = match.groups()
    fields = [f.strip() for f in fields_str.split(",")]

    if report.is_parameterized:
        positional, named = count_placeholders(values_str)
        placeholder_count = positional + named

        if len(fields) != placeholder_count:
            report.add_error(
                f"INSERT error: Field count ({len(fields)}) differs from "
                f"placeholder count ({placeholder_count})",
                code="insert_placeholder_count_mismatch"
            )
        elif report.verbose:
            report.add_info(f"INSERT: {len(fields)} fields match {placeholder_count} placeholders")
            report.add_info(f"Target table: {table}")
    else:
        values = [v.strip() for v in values_str.split(",")]

        if len(fields) != len(values):
            report.add_error(
                f"INSERT error: Field count ({len(fields)}) differs from value count ({len(values)})",
                code="insert_value_count_mismatch"
            )
        elif report.verbose:
            report.add_info(f"INSERT: {len(fields)} fields match {len(values)} values")


def _check_update(sql: str, report: ValidationReport) -> None:
    upper = sql.upper()

    if "WHERE" not in upper:
        report.add_warning(
            "UPDATE without WHERE clause (risk of modifying all rows)",
            code="update_without_where"
        )
    elif report.verbose:
        report.add_info("UPDATE: WHERE clause present")

    set_count = upper.count("SET")
    if set_count > 1:
        report.add_warning(f"Multiple SET clauses detected ({set_count})", code="multiple_set_clauses")


def _check_select(sql: str, report: ValidationReport) -> None:
    if SELECT_STAR.search(sql):
        report.add_warning("Use of SELECT * (not recommended in production)", code="select_star")

    if report.verbose:
        join_count = len(JOIN_KEYWORD.findall(sql))
        if join_count > 0:
            report.add_info(f"SELECT: {join_count} JOIN(s) detected")


def _check_delete(sql: str, report: ValidationReport) -> None:
    if "WHERE" not in sql.upper():
        report.add_error(
            "DELETE without WHERE clause (risk of deleting all rows)",
            code="delete_without_where"
        )
    elif report.verbose:
        report.add_info("DELETE: WHERE clause present")
