"""Pytest fixtures for testing"""

import os

# Settings are read at import time
os.environ.setdefault("STORAGE_URL", "sqlite:///./test.db")
os.environ.setdefault("PAYMENTS_API_STUBBED", "true")
os.environ.setdefault("STUB_SUBMISSION_DELAY_SECONDS", "0")
os.environ.setdefault("SEED_SAMPLE_HISTORY", "false")

import pytest
from datetime import datetime, timedelta
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from ikigai_payments.api.main import create_app
from ikigai_payments.domain.history import PaymentHistoryStore
from ikigai_payments.domain.models import PaymentHistoryItem, PaymentStatus
from ikigai_payments.domain.reference_data import PAYMENT_PURPOSES, SCHOOLS
from ikigai_payments.domain.validation import PaymentForm
from ikigai_payments.infrastructure.storage.models import Base
from ikigai_payments.infrastructure.storage.repositories import AuthTokenStore


# Test storage
TEST_STORAGE_URL = "sqlite:///./test_storage.db"
engine = create_engine(TEST_STORAGE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def now() -> datetime:
    return datetime(2026, 10, 19, 10, 0)


@pytest.fixture
def tomorrow(now: datetime) -> datetime:
    return now + timedelta(days=1)


@pytest.fixture
def schools():
    return SCHOOLS


@pytest.fixture
def purposes():
    return PAYMENT_PURPOSES


@pytest.fixture
def merchant_form(tomorrow: datetime) -> PaymentForm:
    """State University tuition, no account details needed"""
    return PaymentForm(
        school_id="1",
        purpose_id="tuition",
        amount="150000",
        is_recurring=False,
        scheduled_at=tomorrow,
    )


@pytest.fixture
def token_store() -> Generator[AuthTokenStore, None, None]:
    """Auth token store on a throwaway SQLite file"""
    Base.metadata.create_all(bind=engine)
    try:
        yield AuthTokenStore(TestingSessionLocal)
    finally:
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def history_items() -> list[PaymentHistoryItem]:
    """Two completed and two upcoming payments"""
    base = datetime(2026, 10, 1, 9, 0)
    return [
        PaymentHistoryItem("p1", "State University", "Tuition Fees", 25_000_000, "250,000", base, PaymentStatus.COMPLETED),
        PaymentHistoryItem("p2", "City College", "Accommodation", 8_500_000, "85,000", base + timedelta(days=30)),
        PaymentHistoryItem("p3", "Private Academy", "Examination Fees", 1_250_050, "12,500.50", base - timedelta(days=30), PaymentStatus.COMPLETED),
        PaymentHistoryItem("p4", "Technical Institute", "Books & Materials", 4_000_000, "40,000", base + timedelta(days=60)),
    ]


@pytest.fixture
def history_store(history_items: list[PaymentHistoryItem]) -> PaymentHistoryStore:
    return PaymentHistoryStore(history_items)


@pytest.fixture
def client() -> TestClient:
    """FastAPI test client with an empty history store"""
    app = create_app(PaymentHistoryStore())
    return TestClient(app)
