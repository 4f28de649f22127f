"""Payment API HTTP client for submitting confirmed payments"""

import asyncio
import logging
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

import httpx

from ikigai_payments.config import settings
from ikigai_payments.domain.amounts import MINOR_UNITS_PER_MAJOR, format_minor_units
from ikigai_payments.domain.confirmation import new_payment_id
from ikigai_payments.domain.exceptions import PaymentSubmissionError
from ikigai_payments.domain.models import PaymentReceipt
from ikigai_payments.infrastructure.observability.metrics import (
    payment_api_failures_counter,
    payment_api_latency_histogram,
)
from ikigai_payments.infrastructure.storage.repositories import AuthTokenStore


class PaymentAPIClient:
    """Client for the backend payment endpoint"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        token_store: AuthTokenStore | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.payments_api_base).rstrip("/")
        self.timeout = timeout or settings.http_timeout_seconds
        self.token_store = token_store
        self.transport = transport

    async def submit_payment(self, amount_minor: int, virtual_account_number: str) -> PaymentReceipt:
        """
        POST a payment and return the receipt with the wallet's new balance.

        The stored auth token rides along as a `token` query parameter; a 401
        clears it so the next session has to sign in again.

        Raises:
            PaymentSubmissionError: On timeout, HTTP errors, or invalid response
        """
        params = {}
        token = await asyncio.to_thread(self.token_store.get_token) if self.token_store else None
        if token:
            params["token"] = token

        payload = {
            "amount": format_minor_units(amount_minor).replace(",", ""),
            "virtual_account_number": virtual_account_number,
        }

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                with payment_api_latency_histogram.time():
                    response = await client.post(f"{self.base_url}/pay", json=payload, params=params)

                if response.status_code == 401 and self.token_store:
                    await asyncio.to_thread(self.token_store.clear_token)
                    logging.warning("Payment API rejected auth token; cleared from storage")

                response.raise_for_status()
                data = response.json()
                if not isinstance(data, dict):
                    raise ValueError("response body is not an object")

                return PaymentReceipt(
                    reference=str(data.get("reference") or new_payment_id()),
                    new_balance_minor=_to_minor(data.get("new_balance")),
                )

            except httpx.TimeoutException as e:
                payment_api_failures_counter.inc()
                raise PaymentSubmissionError(f"Payment API timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                payment_api_failures_counter.inc()
                raise PaymentSubmissionError(f"Payment API error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                payment_api_failures_counter.inc()
                raise PaymentSubmissionError(f"Payment API unreachable: {e}") from e
            except (KeyError, ValueError, TypeError, OverflowError, InvalidOperation) as e:
                payment_api_failures_counter.inc()
                raise PaymentSubmissionError(f"Invalid response from payment API: {e}") from e


class StubPaymentAPIClient(PaymentAPIClient):
    """Stand-in until the backend exists: waits a fixed delay and always succeeds"""

    def __init__(self, delay_seconds: float | None = None):
        super().__init__()
        self.delay_seconds = settings.stub_submission_delay_seconds if delay_seconds is None else delay_seconds

    async def submit_payment(self, amount_minor: int, virtual_account_number: str) -> PaymentReceipt:
        await asyncio.sleep(self.delay_seconds)
        return PaymentReceipt(reference=new_payment_id())


def _to_minor(balance: Any) -> Optional[int]:
    """Backend balances are in naira"""
    if balance is None:
        return None
    minor = (Decimal(str(balance)) * MINOR_UNITS_PER_MAJOR).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return int(minor)
