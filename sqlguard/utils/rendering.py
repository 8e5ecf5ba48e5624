"""
Report rendering (plaintext alert body and HTML summary)
"""
from html import escape
from typing import List

from sqlguard.dtos import ValidationReport

RULE = "─" * 50


def _context_lines(report: ValidationReport) -> List[str]:
    ctx = report.context or {}
    lines = [
        f"File: {ctx.get('file_relative') or ctx.get('file', 'unknown')}",
        f"Line: {ctx.get('line', 0)}",
        f"Function: {ctx.get('function', 'unknown')}()",
    ]
    if ctx.get("url"):
        lines.append(f"URL: {ctx['url']}")
        lines.append(f"Method: {ctx.get('method', 'GET')}")
    else:
        lines.append(f"CLI Script: {ctx.get('script_name') or 'N/A'}")
    return lines


def render_text(report: ValidationReport) -> str:
    """
    Render a report as plaintext (used as the alert body)
    """
    out: List[str] = [
        "SQLGUARD - SQL QUERY VALIDATION ALERT",
        "",
        f"Date/Time: {report.timestamp:%Y-%m-%d %H:%M:%S}",
        f"Type: {'Parameterized query' if report.is_parameterized else 'Raw query'}",
        f"Status: {report.status.value}",
        f"Errors: {report.error_count}",
        f"Warnings: {report.warning_count}",
        "",
    ]

    if report.context:
        out += ["EXECUTION CONTEXT:", RULE, *_context_lines(report), RULE, ""]

    out += ["QUERY:", RULE, report.query, RULE, ""]

    if report.is_parameterized and report.params:
        out.append("PARAMETERS:")
        out += [f"  [{key}] = {value!r}" for key, value in report.params.items()]
        out.append("")

    for title, findings in (
        ("ERRORS DETECTED:", report.errors),
        ("WARNINGS:", report.warnings),
        ("DETAILED INFORMATION:", report.infos),
    ):
        if findings:
            out.append(title)
            out += [f"  • {f.message}" for f in findings]
            out.append("")

    if report.suggestion:
        s = report.suggestion
        out += ["SECURE QUERY SUGGESTION:", RULE]
        if s.example_query:
            out += ["SQL:", s.example_query, ""]
        if s.example_code:
            out += ["Python Code Example:", s.example_code, ""]
        out += ["Explanation:", s.explanation, RULE]

    return "\n".join(out) + "\n"


def render_html(report: ValidationReport) -> str:
    """
    Render a report as an HTML fragment (all user text escaped)
    """
    status = report.status.value
    icon = {"success": "✅", "error": "❌"}.get(status, "⏭️")
    kind = "Parameterized query" if report.is_parameterized else "Raw query"

    html = [
        "<div style='font-family: monospace; background: #f5f5f5; padding: 20px; border-radius: 8px;'>",
        f"<h2>{icon} SQLGuard Validation Report</h2>",
        f"<p><strong>Type:</strong> {kind}</p>",
        f"<p><strong>Status:</strong> {status.upper()}</p>",
        f"<p><strong>Errors:</strong> {report.error_count} | "
        f"<strong>Warnings:</strong> {report.warning_count}</p>",
        f"<pre><code>{escape(report.query)}</code></pre>",
    ]

    if report.context:
        html.append("<details open><summary><strong>Execution Context</strong></summary><ul>")
        html += [f"<li>{escape(line)}</li>" for line in _context_lines(report)]
        html.append("</ul></details>")

    for title, color, findings in (
        ("Errors", "#d32f2f", report.errors),
        ("Warnings", "#f57c00", report.warnings),
    ):
        if findings:
            html.append(f"<h3>{title}:</h3><ul>")
            html += [f"<li style='color: {color};'>{escape(f.message)}</li>" for f in findings]
            html.append("</ul>")

    if report.infos:
        html.append("<details><summary>Detailed Information</summary><ul>")
        html += [f"<li>{escape(f.message)}</li>" for f in report.infos]
        html.append("</ul></details>")

    if report.suggestion:
        s = report.suggestion
        html.append("<details open><summary><strong>Secure Query Suggestion</strong></summary>")
        html.append("<div style='background: #e8f5e9; padding: 15px; border-left: 4px solid #4caf50;'>")
        if s.example_query:
            html.append(f"<p><strong>SQL:</strong></p><pre><code>{escape(s.example_query)}</code></pre>")
        if s.example_code:
            html.append(f"<p><strong>Python Code Example:</strong></p><pre><code>{escape(s.example_code)}</code></pre>")
        html.append(f"<p><strong>Explanation:</strong></p><p>{escape(s.explanation)}</p>")
        html.append("</div></details>")

    html.append("</div>")
    return "".join(html)
