"""Data access layer for local key-value storage"""

from typing import Callable, Optional

from sqlalchemy.orm import Session

from ikigai_payments.infrastructure.storage.models import KeyValueEntry

AUTH_TOKEN_KEY = "token"


class KeyValueRepository:
    """Repository for key-value entries"""

    def __init__(self, db: Session):
        self.db = db

    def get(self, key: str) -> Optional[str]:
        entry = self.db.get(KeyValueEntry, key)
        return entry.value if entry else None

    def set(self, key: str, value: str) -> None:
        """Insert or overwrite a value"""
        entry = self.db.get(KeyValueEntry, key)
        if entry is None:
            self.db.add(KeyValueEntry(key=key, value=value))
        else:
            entry.value = value
        self.db.flush()

    def delete(self, key: str) -> None:
        entry = self.db.get(KeyValueEntry, key)
        if entry is not None:
            self.db.delete(entry)
            self.db.flush()


class AuthTokenStore:
    """Auth token kept in local storage, one short-lived session per call"""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get_token(self) -> Optional[str]:
        with self.session_factory() as db:
            return KeyValueRepository(db).get(AUTH_TOKEN_KEY)

    def set_token(self, token: str) -> None:
        with self.session_factory() as db:
            KeyValueRepository(db).set(AUTH_TOKEN_KEY, token)
            db.commit()

    def clear_token(self) -> None:
        with self.session_factory() as db:
            KeyValueRepository(db).delete(AUTH_TOKEN_KEY)
            db.commit()
