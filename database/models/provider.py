from sqlalchemy import Column, Integer, Float, Text, TIMESTAMP, JSON, Index

from .base import Base


class ProviderRecord(Base):
    """Persisted provider. Nested trust/location/contact data lives in JSON columns."""
    __tablename__ = 'provider'

    id = Column(Text, primary_key=True)

    # Descriptive
    name = Column(Text, nullable=False)
    business_name = Column(Text)
    category_id = Column(Text, nullable=False)
    subcategory = Column(Text, nullable=False, default='')
    description = Column(Text, nullable=False, default='')
    short_bio = Column(Text, nullable=False, default='')
    pronouns = Column(Text)
    year_established = Column(Integer)
    specialties = Column(JSON, nullable=False, default=list)
    languages = Column(JSON, nullable=False, default=list)

    # Embedded documents
    location = Column(JSON, nullable=False)
    contact = Column(JSON, nullable=False, default=dict)
    trust = Column(JSON, nullable=False, default=dict)

    status = Column(Text, nullable=False, default='draft')  # draft|pending_review|approved|active|suspended

    # Engagement
    rating = Column(Float)
    review_count = Column(Integer)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False)
    updated_at = Column(TIMESTAMP(timezone=True))

    __table_args__ = (
        Index('idx_provider_status', 'status'),
        Index('idx_provider_category', 'category_id'),
    )
