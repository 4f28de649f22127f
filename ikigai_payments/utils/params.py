"""Encode/decode pairs for string-only navigation parameters"""

from datetime import datetime

from ikigai_payments.utils.date_utils import to_naive_local


def encode_bool(value: bool) -> str:
    return "true" if value else "false"


def decode_bool(value: str | None) -> bool:
    """Only the exact string 'true' is truthy"""
    return value == "true"


def encode_datetime(value: datetime) -> str:
    """ISO-8601, seconds precision"""
    return value.isoformat(timespec="seconds")


def decode_datetime(value: str | None, default: datetime | None = None) -> datetime:
    """
    Parse an ISO-8601 timestamp, falling back to default (or now) when missing or malformed.

    Aware timestamps (e.g. a trailing 'Z') are converted to local time.
    """
    if value:
        try:
            return to_naive_local(datetime.fromisoformat(value))
        except ValueError:
            pass
    return default or datetime.now()


def encode_optional(value: str | None) -> str:
    return value or ""


def decode_optional(value: str | None) -> str | None:
    return value or None
