from tickets.domain.errors import (
    DomainError,
    ErrorCode,
    InvalidPurchaseError,
    PaymentFailedError,
    SeatReservationFailedError,
)
from tickets.domain.models import Purchase, TicketCounts
from tickets.domain.pricing import MAX_TICKETS_PER_PURCHASE, PRICE_TABLE
from tickets.domain.value_objects import AccountId, TicketCategory, TicketTypeRequest

__all__ = [
    "AccountId",
    "TicketCategory",
    "TicketTypeRequest",
    "TicketCounts",
    "Purchase",
    "PRICE_TABLE",
    "MAX_TICKETS_PER_PURCHASE",
    "ErrorCode",
    "DomainError",
    "InvalidPurchaseError",
    "PaymentFailedError",
    "SeatReservationFailedError",
]
