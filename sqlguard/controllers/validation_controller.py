"""
SQL Validation Controller - static analysis of submitted queries
"""
import logging
from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from pydantic import ValidationError

from sqlguard.core.config import settings
from sqlguard.dtos import RawQuery, ParameterizedQuery, ValidationReport
from sqlguard.schemas import ValidateRequest, VersionResponse
from sqlguard.services import QueryValidator, build_notifier, version
from sqlguard.utils.context import request_context
from sqlguard.utils.rendering import render_text, render_html

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Validation"])


def _run_validation(req: ValidateRequest, request: Request) -> ValidationReport:
    """
    Build the query model and run the validator with explicit flags

    Effective enablement = request flag AND VALIDATION_ENABLED.
    """
    try:
        if req.params is None:
            query = RawQuery(text=req.sql)
        else:
            query = ParameterizedQuery(text=req.sql, params=req.params)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    notifier = build_notifier(settings) if req.notify else None
    verbose = settings.VALIDATION_VERBOSE if req.verbose is None else req.verbose

    validator = QueryValidator(notifier=notifier)
    report = validator.validate(
        query,
        enabled=req.enabled and settings.VALIDATION_ENABLED,
        verbose=verbose,
        context=request_context(request),
    )

    logger.info(f"[validate] {report.status.value} ({report.error_count} errors)")
    return report


@router.post("/validate", response_model=ValidationReport)
async def validate_query(req: ValidateRequest, request: Request):
    """
    Validate a SQL query and return the full report

    **Request Body**:
    - sql: SQL text
    - params: list (positional) or object (named) of bound values; omit for a raw query
    - enabled: false returns a bypassed report
    - verbose: include info findings and a suggestion
    - notify: send an alert through the configured notifier when errors are found
    """
    return _run_validation(req, request)


@router.post("/validate/text", response_class=PlainTextResponse)
async def validate_query_text(req: ValidateRequest, request: Request):
    """Validate and return the plaintext rendering"""
    report = _run_validation(req, request)
    if report.status == "bypassed":
        return PlainTextResponse(f"{report.message}\n")
    return PlainTextResponse(render_text(report))


@router.post("/validate/html", response_class=HTMLResponse)
async def validate_query_html(req: ValidateRequest, request: Request):
    """Validate and return the HTML rendering"""
    report = _run_validation(req, request)
    return HTMLResponse(render_html(report))


@router.get("/version", response_model=VersionResponse)
async def get_version():
    return VersionResponse(name="sqlguard", version=version())
