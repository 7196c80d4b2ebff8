import contextlib
import logging

from database.database import SessionLocal
from database.repositories import SqlProviderRepository, ReportRepository

logger = logging.getLogger(__name__)


class ProviderUnitOfWork:
    """Repositories sharing one Session."""

    def __init__(self, session):
        self.session = session
        self.providers = SqlProviderRepository(session)
        self.reports = ReportRepository(session)


@contextlib.contextmanager
def provider_uow():
    """Per-unit-of-work transaction scope.

    Yields a ProviderUnitOfWork bound to a fresh Session. Commits on success,
    rolls back on exception, always closes.

    Usage:
        with provider_uow() as uow:
            provider = uow.providers.find_by_id(provider_id)
            # perform operations...
        # commit happens automatically on successful exit
    """
    session = SessionLocal()
    try:
        uow = ProviderUnitOfWork(session)
        yield uow
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
