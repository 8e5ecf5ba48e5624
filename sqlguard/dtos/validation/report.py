"""
Validation report DTOs
"""
from datetime import datetime
from enum import Enum
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field, computed_field

from sqlguard.dtos.validation.query import ParamKey, ParamValue


class Severity(str, Enum):
    """Finding severity levels"""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ReportStatus(str, Enum):
    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"
    BYPASSED = "bypassed"


class Finding(BaseModel):
    """
    One reported issue

    `code` is a stable identifier (e.g. "select_star"); `message` is for humans.
    """
    severity: Severity
    message: str
    code: Optional[str] = None


class Suggestion(BaseModel):
    """Canned remediation derived from the first qualifying finding"""
    example_query: Optional[str] = None
    example_code: Optional[str] = None
    explanation: str


class ValidationReport(BaseModel):
    """
    Result of one validation call

    Created once, mutated in place by each analyzer phase,
    finalized once after all phases run.
    """
    query: str
    params: Optional[Dict[ParamKey, ParamValue]] = None
    is_parameterized: bool = False
    verbose: bool = False

    status: ReportStatus = ReportStatus.PENDING
    errors: List[Finding] = []
    warnings: List[Finding] = []
    infos: List[Finding] = []
    suggestion: Optional[Suggestion] = None

    message: Optional[str] = None
    timestamp: datetime = Field(default_factory=datetime.now)
    context: Optional[Dict[str, Any]] = None  # Opaque, attached by callers

    @computed_field
    @property
    def error_count(self) -> int:
        return len(self.errors)

    @computed_field
    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    def add_error(self, message: str, code: Optional[str] = None) -> None:
        self.errors.append(Finding(severity=Severity.ERROR, message=message, code=code))

    def add_warning(self, message: str, code: Optional[str] = None) -> None:
        self.warnings.append(Finding(severity=Severity.WARNING, message=message, code=code))

    def add_info(self, message: str, code: Optional[str] = None) -> None:
        self.infos.append(Finding(severity=Severity.INFO, message=message, code=code))

    @property
    def findings(self) -> List[Finding]:
        """All findings, errors first"""
        return [*self.errors, *self.warnings, *self.infos]

    def has_finding(self, code: str) -> bool:
        return any(f.code == code for f in self.findings)

    def finalize(self) -> "ValidationReport":
        """Set the terminal status from the error count"""
        self.status = ReportStatus.ERROR if self.errors else ReportStatus.SUCCESS
        return self

    @classmethod
    def bypassed(cls, query: str) -> "ValidationReport":
        return cls(
            query=query,
            status=ReportStatus.BYPASSED,
            message="SQLGuard validation disabled",
        )
