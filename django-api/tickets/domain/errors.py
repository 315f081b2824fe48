"""Domain error codes for the tickets module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT_ID = "INVALID_ACCOUNT_ID"
    NO_TICKET_REQUESTS = "NO_TICKET_REQUESTS"
    INVALID_TICKET_REQUEST = "INVALID_TICKET_REQUEST"
    TOO_MANY_TICKETS = "TOO_MANY_TICKETS"
    ADULT_REQUIRED = "ADULT_REQUIRED"
    NO_TICKETS = "NO_TICKETS"
    PAYMENT_FAILED = "PAYMENT_FAILED"
    SEAT_RESERVATION_FAILED = "SEAT_RESERVATION_FAILED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPurchaseError(DomainError):
    """Raised when a purchase fails a precondition or business rule."""


class PaymentFailedError(DomainError):
    """Raised when the payment gateway rejects or fails a payment."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PAYMENT_FAILED,
            message="Payment could not be taken",
        )


class SeatReservationFailedError(DomainError):
    """Raised when seats could not be reserved after payment was taken."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.SEAT_RESERVATION_FAILED,
            message="Seats could not be reserved",
        )
