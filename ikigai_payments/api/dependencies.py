"""Dependency injection for FastAPI endpoints"""

from typing import List

from fastapi import Request

from ikigai_payments.config import settings
from ikigai_payments.domain.history import PaymentHistoryStore
from ikigai_payments.domain.models import PaymentPurpose, School
from ikigai_payments.domain.reference_data import PAYMENT_PURPOSES, SCHOOLS
from ikigai_payments.infrastructure.clients.payments import PaymentAPIClient, StubPaymentAPIClient
from ikigai_payments.infrastructure.storage.repositories import AuthTokenStore
from ikigai_payments.infrastructure.storage.session import SessionLocal


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_history_store(request: Request) -> PaymentHistoryStore:
    """Session-scoped history store owned by the application"""
    return request.app.state.history_store


def get_schools() -> List[School]:
    return SCHOOLS


def get_purposes() -> List[PaymentPurpose]:
    return PAYMENT_PURPOSES


def get_payment_client() -> PaymentAPIClient:
    """Provide Payment API client instance; stubbed until a backend is configured"""
    if settings.payments_api_stubbed:
        return StubPaymentAPIClient()
    return PaymentAPIClient(token_store=AuthTokenStore(SessionLocal))
