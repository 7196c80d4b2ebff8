#!/usr/bin/env python3
"""
Report service - safety report intake and review.
"""

import logging
from typing import List, Optional, Dict, Any

from sqlalchemy.orm import Session

from core.catalog import REPORT_REASON_IDS
from database.models import ProviderReport
from database.repositories import SqlProviderRepository, ReportRepository
from database.repositories.report import REPORT_STATUSES
from ..config import get_config
from ..exceptions import (
    InvalidReportException,
    ProviderNotFoundException,
    ReportNotFoundException,
)
from ..models.requests import ReportCreateRequest, ReportUpdateRequest
from ..models.responses import ReportSummary
from ..utils import safe_datetime_iso

logger = logging.getLogger(__name__)


def report_to_summary(report: ProviderReport) -> ReportSummary:
    return ReportSummary(
        id=report.id,
        provider_id=report.provider_id,
        reason=report.reason,
        description=report.description,
        status=report.status,
        created_at=safe_datetime_iso(report.created_at),
        updated_at=safe_datetime_iso(report.updated_at),
        resolved_at=safe_datetime_iso(report.resolved_at),
        moderator_notes=report.moderator_notes,
        resolution=report.resolution,
    )


class ReportService:
    """Service for managing safety reports."""

    def __init__(self, db: Session):
        self.db = db
        self.providers = SqlProviderRepository(db)
        self.reports = ReportRepository(db)

    def create_report(self, request: ReportCreateRequest, session_id: str) -> ReportSummary:
        """
        File a report against a provider.

        Args:
            request: Report payload.
            session_id: Anonymous reporter session.

        Returns:
            The stored report.

        Raises:
            InvalidReportException: Unknown reason or description length out of range.
            ProviderNotFoundException: If the provider does not exist.
        """
        limits = get_config().reports
        description = (request.description or "").strip()

        if request.reason not in REPORT_REASON_IDS:
            raise InvalidReportException(
                f"Unknown report reason '{request.reason}'. Expected one of: {', '.join(REPORT_REASON_IDS)}"
            )
        if len(description) < limits.min_description_length:
            raise InvalidReportException(
                f"Description must be at least {limits.min_description_length} characters"
            )
        if len(description) > limits.max_description_length:
            raise InvalidReportException(
                f"Description must be at most {limits.max_description_length} characters"
            )
        if self.providers.find_by_id(request.provider_id) is None:
            raise ProviderNotFoundException(f"Provider not found: {request.provider_id}")

        report = self.reports.create_report(
            provider_id=request.provider_id,
            reason=request.reason,
            description=description,
            reporter_session_id=session_id,
        )
        self.reports.commit()

        return report_to_summary(report)

    def list_reports(self, status: Optional[str] = None) -> List[ReportSummary]:
        """
        List reports, newest first.

        Raises:
            InvalidReportException: If status is not a known report status.
        """
        if status and status not in REPORT_STATUSES:
            raise InvalidReportException(
                f"Unknown report status '{status}'. Expected one of: {', '.join(REPORT_STATUSES)}"
            )
        return [report_to_summary(r) for r in self.reports.list_reports(status)]

    def get_report(self, report_id: str) -> ReportSummary:
        report = self.reports.get_report(report_id)
        if report is None:
            raise ReportNotFoundException(f"Report not found: {report_id}")
        return report_to_summary(report)

    def update_report(self, report_id: str, update: ReportUpdateRequest) -> ReportSummary:
        """
        Move a report through review.

        Raises:
            ReportNotFoundException: If the report does not exist.
        """
        report = self.reports.update_report_status(
            report_id,
            update.status,
            moderator_notes=update.moderator_notes,
            resolution=update.resolution,
        )
        if report is None:
            raise ReportNotFoundException(f"Report not found: {report_id}")
        self.reports.commit()

        logger.info(f"Report {report_id} marked {update.status}")
        return report_to_summary(report)

    def get_stats(self) -> Dict[str, Any]:
        return self.reports.get_report_stats()
