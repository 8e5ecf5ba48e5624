"""
Service for query validation orchestration
Runs the analyzer stages in a fixed order and finalizes the report
"""
import logging
from typing import Any, Dict, Optional

from sqlguard.dtos import (
    ParameterizedQuery,
    ValidationReport,
    coerce_query,
    query_text,
)
from sqlguard.dtos.validation.query import query_params
from sqlguard.pipeline.stages import (
    analyze_syntax,
    analyze_parameters,
    analyze_security,
    generate_suggestion,
)
from sqlguard.services.alert_service import Notifier

logger = logging.getLogger(__name__)

__version__ = "1.0.0"


class QueryValidator:
    """
    Orchestrates the validation pipeline

    pending → bypassed                (validation disabled)
    pending → error | success         (after all phases)
    """

    def __init__(self, notifier: Optional[Notifier] = None):
        self.notifier = notifier

    def validate(
        self,
        query: Any,
        enabled: bool = True,
        verbose: bool = False,
        context: Optional[Dict[str, Any]] = None,
    ) -> ValidationReport:
        """
        Validate a SQL query

        Args:
            query: RawQuery / ParameterizedQuery, a SQL string, or a mapping
                   with "sql" and "params"
            enabled: False returns a bypassed report without analysis
            verbose: Add info findings and a remediation suggestion
            context: Opaque execution context attached to the report

        Returns:
            Finalized validation report
        """
        if not enabled:
            return ValidationReport.bypassed(query_text(query))

        query = coerce_query(query)
        is_parameterized = isinstance(query, ParameterizedQuery)

        report = ValidationReport(
            query=query.text,
            params=query_params(query),
            is_parameterized=is_parameterized,
            verbose=verbose,
            context=context,
        )

        sql = query.text.strip()

        if not sql:
            report.add_error("CRITICAL ERROR: Empty query", code="empty_query")
            return self._finalize(report)

        if is_parameterized:
            if verbose:
                report.add_info("Type detected: Parameterized query (RECOMMENDED)")
                report.add_info(f"Parameter count: {len(report.params or {})}")
        else:
            report.add_warning(
                "SECURITY WARNING: Non-parameterized query detected. "
                "Use parameterized queries to prevent SQL injection!",
                code="non_parameterized"
            )

        # Phase 1: Syntax
        analyze_syntax(sql, report)

        # Phase 2: Parameters (parameterized only)
        if is_parameterized:
            analyze_parameters(sql, report)

        # Phase 3: Security
        analyze_security(sql, report)

        # Phase 4: Suggestion (verbose only)
        if verbose:
            report.suggestion = generate_suggestion(report)

        return self._finalize(report)

    def is_valid(self, query: Any, enabled: bool = True) -> bool:
        """Quick check: True when the report is success or bypassed"""
        report = self.validate(query, enabled=enabled, verbose=False)
        return report.status in ("success", "bypassed")

    def _finalize(self, report: ValidationReport) -> ValidationReport:
        report.finalize()

        logger.info(
            f"Validation {report.status.value}: "
            f"{report.error_count} errors, {report.warning_count} warnings"
        )

        if self.notifier is not None and report.error_count > 0:
            self._notify(report)

        return report

    def _notify(self, report: ValidationReport) -> None:
        name = getattr(self.notifier, "name", type(self.notifier).__name__)
        try:
            self.notifier.notify(report)
            report.add_info(f"Error report sent via {name}", code="notification_sent")
        except Exception as e:
            logger.warning(f"Failed to notify via {name}: {e}")
            report.add_warning(f"Failed to notify via {name}: {e}", code="notification_failed")


def validate(
    query: Any,
    enabled: bool = True,
    verbose: bool = False,
    notifier: Optional[Notifier] = None,
    context: Optional[Dict[str, Any]] = None,
) -> ValidationReport:
    """Validate a query with a one-off QueryValidator"""
    return QueryValidator(notifier=notifier).validate(
        query, enabled=enabled, verbose=verbose, context=context
    )


def is_valid(query: Any, enabled: bool = True) -> bool:
    return QueryValidator().is_valid(query, enabled=enabled)


def version() -> str:
    return __version__
