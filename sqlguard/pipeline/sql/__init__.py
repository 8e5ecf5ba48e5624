"""
SQL utilities (pattern catalog, lexical helpers)
"""
from sqlguard.pipeline.sql.placeholders import (
    statement_type,
    named_placeholders,
    count_placeholders,
    quoted_literals,
    preview,
)

__all__ = [
    "statement_type",
    "named_placeholders",
    "count_placeholders",
    "quoted_literals",
    "preview",
]
