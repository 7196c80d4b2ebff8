import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Index

from .base import Base


def _utcnow():
    return datetime.now(timezone.utc)


class ProviderReport(Base):
    """Safety report filed against a provider. The reporter is an anonymous session id."""
    __tablename__ = 'provider_report'

    id = Column(Text, primary_key=True, default=lambda: str(uuid.uuid4()))
    provider_id = Column(Text, ForeignKey('provider.id', ondelete='CASCADE'), nullable=False)
    reason = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    status = Column(Text, nullable=False, default='pending')  # pending|reviewing|resolved|dismissed
    reporter_session_id = Column(Text, nullable=False)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)
    resolved_at = Column(TIMESTAMP(timezone=True))

    moderator_notes = Column(Text)
    resolution = Column(Text)

    __table_args__ = (
        Index('idx_provider_report_provider', 'provider_id'),
        Index('idx_provider_report_status', 'status'),
    )


class ModerationActionRecord(Base):
    __tablename__ = 'moderation_action'

    id = Column(Text, primary_key=True, default=lambda: str(uuid.uuid4()))
    provider_id = Column(Text, ForeignKey('provider.id', ondelete='CASCADE'), nullable=False)
    report_id = Column(Text, ForeignKey('provider_report.id', ondelete='SET NULL'))
    action = Column(Text, nullable=False)  # warning|suspend|reinstate
    reason = Column(Text, nullable=False)
    performed_by = Column(Text, nullable=False)
    performed_at = Column(TIMESTAMP(timezone=True), nullable=False, default=_utcnow)

    __table_args__ = (
        Index('idx_moderation_action_provider', 'provider_id'),
    )
