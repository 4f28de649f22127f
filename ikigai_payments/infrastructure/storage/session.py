"""Storage session management for the local SQLite key-value store"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from ikigai_payments.config import settings
from ikigai_payments.infrastructure.storage.models import Base

# SQLite connections are shared with the threadpool that runs sync routes
engine = create_engine(
    settings.storage_url,
    connect_args={"check_same_thread": False} if settings.storage_url.startswith("sqlite") else {},
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_storage() -> None:
    """Create tables if they do not exist yet"""
    Base.metadata.create_all(bind=engine)
