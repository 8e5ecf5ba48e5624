"""
Pattern catalog
Read-only tables shared by every analyzer
"""
import re
from types import MappingProxyType
from typing import Mapping, Pattern, Tuple


# Substrings flagged inside bound string parameters (case-insensitive)
SUSPICIOUS_SUBSTRINGS: Tuple[str, ...] = ("--", "/*", "*/", "xp_", "sp_")

# SQL keywords flagged inside bound string parameters (case-insensitive)
SQL_KEYWORDS: Tuple[str, ...] = (
    "UNION",
    "DROP",
    "DELETE",
    "UPDATE",
    "INSERT",
    "SELECT",
    "OR 1=1",
    "OR '1'='1'",
)

# Injection idioms searched inside quoted literals of raw queries
DANGEROUS_PATTERNS: Mapping[Pattern[str], str] = MappingProxyType({
    re.compile(r"--"): "SQL comment (--)",
    re.compile(r"/\*"): "Block comment start (/*)",
    re.compile(r"\*/"): "Block comment end (*/)",
    re.compile(r"xp_", re.I): "SQL Server extended procedure (xp_)",
    re.compile(r"sp_", re.I): "SQL Server system procedure (sp_)",
    re.compile(r"\bUNION\b", re.I): "UNION",
    re.compile(r"\bDROP\b", re.I): "DROP",
    re.compile(r";\s*DROP", re.I): "DROP after semicolon",
    re.compile(r"OR\s+['\"]?1['\"]?\s*=\s*['\"]?1['\"]?", re.I): "OR 1=1 pattern",
    re.compile(r"OR\s+['\"]?[a-z]['\"]?\s*=\s*['\"]?[a-z]['\"]?", re.I): "OR 'x'='x' pattern",
})

# Keywords flagged anywhere in a raw query (case-insensitive substring)
DANGEROUS_KEYWORDS: Tuple[str, ...] = (
    "TRUNCATE",
    "LOAD_FILE",
    "OUTFILE",
    "DUMPFILE",
    "INTO OUTFILE",
    "INTO DUMPFILE",
    "EXEC(",
    "EXECUTE(",
    "BENCHMARK(",
    "SLEEP(",
    "WAITFOR DELAY",
)

# Host-language (PHP-style) variables interpolated into SQL text
SUPERGLOBALS: Tuple[str, ...] = (
    "$_GET",
    "$_POST",
    "$_REQUEST",
    "$_COOKIE",
    "$_SESSION",
    "$_SERVER",
)
SUPERGLOBAL_ACCESS = re.compile(r"\$_(?:GET|POST|REQUEST|COOKIE|SESSION)\[")
HOST_VARIABLE = re.compile(r"\$\w+")
HOST_VARIABLE_INTERPOLATION = re.compile(r"\{\$\w+\}")

# Placeholders and literals
NAMED_PLACEHOLDER = re.compile(r":\w+")
QUOTED_LITERAL = re.compile(r"'([^']*)'")
HASH_COMMENT = re.compile(r"#[^\n]*")

# Statement structure
INSERT_STATEMENT = re.compile(
    r"INSERT\s+INTO\s+(\w+)\s*\(([^)]+)\)\s*VALUES\s*\(([^)]+)\)",
    re.I
)
SELECT_STAR = re.compile(r"SELECT\s+\*", re.I)
JOIN_KEYWORD = re.compile(r"\bJOIN\b", re.I)
