"""Domain-specific exceptions"""

from typing import Dict


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class PaymentValidationError(DomainException):
    """Payment form failed validation; carries one message per field"""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__(", ".join(f"{field}: {message}" for field, message in self.errors.items()))


class ReferenceNotFoundError(PaymentValidationError):
    """School or payment purpose id does not match the reference lists"""

    pass


class DuplicatePaymentError(DomainException):
    """A history item with the same id is already stored"""

    pass


class PaymentSubmissionError(DomainException):
    """Payment API returned an error or is unavailable"""

    pass
