import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import select, func

from database.models import ProviderReport, ModerationActionRecord
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

OPEN_REPORT_STATUSES = ('pending', 'reviewing')
REPORT_STATUSES = ('pending', 'reviewing', 'resolved', 'dismissed')


class ReportRepository(BaseRepository):
    def create_report(
        self,
        provider_id: str,
        reason: str,
        description: str,
        reporter_session_id: str
    ) -> ProviderReport:
        report = ProviderReport(
            provider_id=provider_id,
            reason=reason,
            description=description,
            status='pending',
            reporter_session_id=reporter_session_id,
        )
        self.db.add(report)
        self.db.flush()
        logger.info(f"Report {report.id} filed against provider {provider_id} ({reason})")
        return report

    def get_report(self, report_id: str) -> Optional[ProviderReport]:
        return self.db.get(ProviderReport, report_id)

    def list_reports(self, status: Optional[str] = None) -> List[ProviderReport]:
        stmt = select(ProviderReport)
        if status:
            stmt = stmt.where(ProviderReport.status == status)
        stmt = stmt.order_by(ProviderReport.created_at.desc(), ProviderReport.id)
        return self.db.execute(stmt).scalars().all()

    def list_reports_for_provider(self, provider_id: str) -> List[ProviderReport]:
        stmt = select(ProviderReport).where(
            ProviderReport.provider_id == provider_id
        ).order_by(ProviderReport.created_at.desc())
        return self.db.execute(stmt).scalars().all()

    def update_report_status(
        self,
        report_id: str,
        status: str,
        moderator_notes: Optional[str] = None,
        resolution: Optional[str] = None
    ) -> Optional[ProviderReport]:
        report = self.get_report(report_id)
        if report is None:
            return None

        now = datetime.now(timezone.utc)
        report.status = status
        report.updated_at = now
        if moderator_notes:
            report.moderator_notes = moderator_notes
        if resolution:
            report.resolution = resolution
            report.resolved_at = now

        self.db.flush()
        return report

    def count_open_reports(self, provider_id: str) -> int:
        stmt = select(func.count(ProviderReport.id)).where(
            ProviderReport.provider_id == provider_id,
            ProviderReport.status.in_(OPEN_REPORT_STATUSES)
        )
        return self.db.execute(stmt).scalar_one()

    def get_report_stats(self) -> Dict[str, Any]:
        by_status = dict(
            self.db.execute(
                select(ProviderReport.status, func.count(ProviderReport.id)).group_by(ProviderReport.status)
            ).all()
        )
        by_reason = dict(
            self.db.execute(
                select(ProviderReport.reason, func.count(ProviderReport.id)).group_by(ProviderReport.reason)
            ).all()
        )

        stats = {status: by_status.get(status, 0) for status in REPORT_STATUSES}
        stats['total'] = sum(by_status.values())
        stats['by_reason'] = by_reason
        return stats

    def create_action(
        self,
        provider_id: str,
        action: str,
        reason: str,
        performed_by: str,
        report_id: Optional[str] = None
    ) -> ModerationActionRecord:
        record = ModerationActionRecord(
            provider_id=provider_id,
            report_id=report_id,
            action=action,
            reason=reason,
            performed_by=performed_by,
        )
        self.db.add(record)
        self.db.flush()
        logger.info(f"Moderation action {action} on provider {provider_id} by {performed_by}")
        return record

    def list_actions(self, provider_id: Optional[str] = None) -> List[ModerationActionRecord]:
        stmt = select(ModerationActionRecord)
        if provider_id:
            stmt = stmt.where(ModerationActionRecord.provider_id == provider_id)
        stmt = stmt.order_by(ModerationActionRecord.performed_at.desc())
        return self.db.execute(stmt).scalars().all()
