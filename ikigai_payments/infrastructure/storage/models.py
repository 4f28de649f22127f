"""SQLAlchemy ORM models for local key-value storage"""

from sqlalchemy import Column, DateTime, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class KeyValueEntry(Base):
    """Single key-value pair, e.g. the auth token"""

    __tablename__ = "key_value_entry"

    key = Column(Text, primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())
