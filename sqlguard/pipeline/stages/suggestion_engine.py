"""
Stage 4: Suggestion Engine
Maps the first qualifying finding to a canned remediation
"""
import logging
from typing import Optional, Dict, Any
from sqlguard.dtos import ValidationReport, Suggestion
from sqlguard.pipeline.sql import statement_type, count_placeholders

logger = logging.getLogger(__name__)

PARAMETERIZE_EXPLANATION = (
    "Convert to a parameterized query to prevent SQL injection. Replace values "
    "with placeholders (?) and pass them as parameters."
)

# Canned parameterized examples per statement type: (query, code)
PARAMETERIZED_EXAMPLES: Dict[str, tuple] = {
    "SELECT": (
        "SELECT * FROM table WHERE column = ?",
        'cursor.execute("SELECT * FROM table WHERE column = ?", (value,))\n'
        "rows = cursor.fetchall()",
    ),
    "INSERT": (
        "INSERT INTO table (col1, col2) VALUES (?, ?)",
        'cursor.execute("INSERT INTO table (col1, col2) VALUES (?, ?)", (value1, value2))',
    ),
    "UPDATE": (
        "UPDATE table SET column = ? WHERE id = ?",
        'cursor.execute("UPDATE table SET column = ? WHERE id = ?", (new_value, row_id))',
    ),
    "DELETE": (
        "DELETE FROM table WHERE id = ?",
        'cursor.execute("DELETE FROM table WHERE id = ?", (row_id,))',
    ),
}

MISSING_VALUE = "missing_value"


def generate_suggestion(report: ValidationReport) -> Optional[Suggestion]:
    """
    Pick one remediation for the report

    Priority (first match wins):
    1. Raw query → convert to parameterized
    2. Placeholder/parameter count mismatch
    3. INSERT field count mismatch
    4. DELETE without WHERE
    5. UPDATE without WHERE
    6. SELECT *
    7. Hardcoded literals in parameterized query

    Returns:
        Suggestion, or None when nothing applies (or not verbose)
    """
    if not report.verbose:
        return None

    if not report.is_parameterized:
        return _suggest_parameterized(report)

    if report.has_finding("placeholder_count_mismatch"):
        return _suggest_fix_parameter_count(report)

    if report.has_finding("insert_placeholder_count_mismatch") or report.has_finding("insert_value_count_mismatch"):
        return _suggest_fix_field_count()

    if report.has_finding("delete_without_where"):
        return _suggest_where_clause("DELETE")

    if report.has_finding("update_without_where"):
        return _suggest_where_clause("UPDATE")

    if report.has_finding("select_star"):
        return _suggest_explicit_columns()

    if report.has_finding("hardcoded_literal"):
        return _suggest_placeholders()

    return None


def _suggest_parameterized(report: ValidationReport) -> Suggestion:
    query_type = statement_type(report.query)
    example = PARAMETERIZED_EXAMPLES.get(query_type)

    if example is None:
        logger.debug(f"No parameterized template for statement type {query_type!r}")
        return Suggestion(explanation=PARAMETERIZE_EXPLANATION)

    example_query, example_code = example
    return Suggestion(
        example_query=example_query,
        example_code=example_code,
        explanation=PARAMETERIZE_EXPLANATION,
    )


def _suggest_fix_parameter_count(report: ValidationReport) -> Suggestion:
    sql = report.query
    params: Dict[Any, Any] = dict(report.params or {})

    positional, named = count_placeholders(sql)
    total = positional + named
    param_count = len(params)

    if total > param_count:
        missing = total - param_count
        explanation = (
            f"You have {total} placeholders but only {param_count} parameters. "
            f"Add {missing} more parameter(s)."
        )
        example_params = dict(params)
        key = param_count
        while len(example_params) < total:
            if key not in example_params:
                example_params[key] = MISSING_VALUE
            key += 1
    else:
        extra = param_count - total
        explanation = (
            f"You have {param_count} parameters but only {total} placeholders. "
            f"Remove {extra} parameter(s) or add more placeholders."
        )
        example_params = dict(list(params.items())[:total])

    code = (
        "query = ParameterizedQuery(\n"
        f"    text={sql!r},\n"
        f"    params={example_params!r},\n"
        ")"
    )
    return Suggestion(example_query=sql, example_code=code, explanation=explanation)


def _suggest_fix_field_count() -> Suggestion:
    return Suggestion(
        example_query="INSERT INTO table (field1, field2, field3) VALUES (?, ?, ?)",
        example_code=(
            "# Ensure the number of fields matches the number of placeholders\n"
            'fields = ["field1", "field2", "field3"]\n'
            'placeholders = ", ".join("?" for _ in fields)\n'
            'sql = f"INSERT INTO table ({\', \'.join(fields)}) VALUES ({placeholders})"'
        ),
        explanation=(
            "The number of fields in your INSERT statement must match the number of "
            "VALUES placeholders. Count them carefully or build both lists from the "
            "same sequence of field names."
        ),
    )


def _suggest_where_clause(query_type: str) -> Suggestion:
    return Suggestion(
        example_query=f"{query_type} FROM table WHERE id = ?",
        example_code=(
            f"# ALWAYS use a WHERE clause with {query_type}\n"
            f'cursor.execute("{query_type} FROM table WHERE id = ?", (row_id,))\n'
            "\n"
            "# Or for multiple conditions:\n"
            f'cursor.execute("{query_type} FROM table WHERE status = ? AND created_at < ?", (status, date))'
        ),
        explanation=(
            f"CRITICAL: {query_type} without WHERE clause will affect ALL rows in the table! "
            f"Always specify which rows to {query_type} using a WHERE clause with "
            f"appropriate conditions."
        ),
    )


def _suggest_explicit_columns() -> Suggestion:
    return Suggestion(
        example_query="SELECT id, name, email, created_at FROM users WHERE active = ?",
        example_code=(
            "# Specify only the columns you need\n"
            'cursor.execute("SELECT id, name, email FROM users WHERE active = ?", (1,))\n'
            "\n"
            "# Benefits:\n"
            "# 1. Better performance (less data transferred)\n"
            "# 2. More maintainable (explicit dependencies)\n"
            "# 3. Safer (won't break if table structure changes)"
        ),
        explanation=(
            "Avoid SELECT * in production code. Explicitly list the columns you need. "
            "This improves performance, makes your code more maintainable, and prevents "
            "issues when table structure changes."
        ),
    )


def _suggest_placeholders() -> Suggestion:
    return Suggestion(
        example_query="INSERT INTO logs (message, level, user_id) VALUES (?, ?, ?)",
        example_code=(
            "# WRONG: hardcoded value in a parameterized query\n"
            "# sql = \"INSERT INTO logs (message, level) VALUES (?, 'ERROR')\"\n"
            "\n"
            "# CORRECT: use placeholders for all values\n"
            'sql = "INSERT INTO logs (message, level, user_id) VALUES (?, ?, ?)"\n'
            "cursor.execute(sql, (message, level, user_id))"
        ),
        explanation=(
            "Even in parameterized queries, avoid hardcoding values directly in the SQL. "
            "Use placeholders for all dynamic values. This keeps your queries flexible "
            "and consistent."
        ),
    )
