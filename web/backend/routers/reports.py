#!/usr/bin/env python3
"""
Report endpoints - community safety reports and moderator review.
"""

import logging
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
from typing import Optional

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from sqlalchemy.orm import Session

from ..config import get_config
from ..dependencies import get_db
from ..services.report_service import ReportService
from ..models.requests import ReportCreateRequest, ReportUpdateRequest
from ..models.responses import (
    ReportCreatedResponse,
    ReportResponse,
    ReportsResponse,
    ReportStatsResponse,
)
from ..utils import get_session_id

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)

router = APIRouter(prefix="/api/reports", tags=["reports"])


def add_rate_limit_handlers(app):
    """Add rate limit exception handlers to the FastAPI app."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


async def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={
            "success": False,
            "error": f"Too many reports submitted: {exc.detail}",
            "type": "RateLimitExceeded"
        }
    )


def _report_rate_limit() -> str:
    return get_config().reports.rate_limit


@router.post("", response_model=ReportCreatedResponse, status_code=201)
@limiter.limit(_report_rate_limit)
def create_report(
    request: Request,
    report: ReportCreateRequest,
    db: Session = Depends(get_db)
):
    """
    File a safety report about a provider.

    Reporters are identified only by an anonymous session id, taken from
    the X-Session-Id header when present. Submissions are rate limited per
    client address.
    """
    created = ReportService(db).create_report(report, get_session_id(request))
    return ReportCreatedResponse(
        success=True,
        report_id=created.id,
        status=created.status,
        message="Thank you. Our moderation team will review this report."
    )


@router.get("", response_model=ReportsResponse)
def list_reports(
    status: Optional[str] = Query(default=None, description="pending, reviewing, resolved or dismissed"),
    db: Session = Depends(get_db)
):
    """List reports for moderators, newest first."""
    reports = ReportService(db).list_reports(status)
    return ReportsResponse(success=True, count=len(reports), reports=reports)


@router.get("/stats", response_model=ReportStatsResponse)
def get_report_stats(db: Session = Depends(get_db)):
    """Report counts by status and by reason."""
    return ReportStatsResponse(success=True, stats=ReportService(db).get_stats())


@router.get("/{report_id}", response_model=ReportResponse)
def get_report(report_id: str, db: Session = Depends(get_db)):
    return ReportResponse(success=True, report=ReportService(db).get_report(report_id))


@router.patch("/{report_id}", response_model=ReportResponse)
def update_report(
    report_id: str,
    update: ReportUpdateRequest,
    db: Session = Depends(get_db)
):
    """Update a report's review status, notes and resolution."""
    return ReportResponse(success=True, report=ReportService(db).update_report(report_id, update))
