"""
Lexical helpers shared by the analyzers
"""
from typing import List, Tuple

from sqlguard.pipeline.sql.catalog import NAMED_PLACEHOLDER, QUOTED_LITERAL


def statement_type(sql: str) -> str:
    """First whitespace-delimited token, upper-cased ("" for empty text)"""
    parts = sql.split(None, 1)
    return parts[0].upper() if parts else ""


def named_placeholders(sql: str) -> List[str]:
    return NAMED_PLACEHOLDER.findall(sql)


def count_placeholders(sql: str) -> Tuple[int, int]:
    """
    Count placeholders in SQL text

    Returns:
        Tuple of (positional '?' count, named ':name' count)
    """
    return sql.count("?"), len(named_placeholders(sql))


def quoted_literals(sql: str) -> List[str]:
    """Contents of every single-quoted literal, in order"""
    return QUOTED_LITERAL.findall(sql)


def preview(value: str, limit: int = 50, ellipsis: bool = False) -> str:
    """Truncate a value for display in findings"""
    if len(value) <= limit:
        return value
    return value[:limit] + ("..." if ellipsis else "")
