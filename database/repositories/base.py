from sqlalchemy.orm import Session


class BaseRepository:
    """Repositories built on one Session share its transaction; callers decide when it ends."""

    def __init__(self, db: Session):
        self.db = db

    def commit(self) -> None:
        """Commit, rolling back first if the commit itself fails."""
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def rollback(self) -> None:
        self.db.rollback()
