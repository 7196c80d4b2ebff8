from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from core.config_loader import load_config
from database.models import Base

# config.yaml database.url, overridable with the DATABASE_URL env var
DATABASE_URL = load_config().database.url


def build_engine(url: str) -> Engine:
    """Create an engine; sqlite connections are shared across FastAPI worker threads."""
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args, pool_pre_ping=True)


engine = build_engine(DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind: Engine = None) -> None:
    """Create all tables that do not exist yet."""
    Base.metadata.create_all(bind or engine)
