"""Ticket service - all purchase business logic lives here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or raise domain errors
"""

import logging
from collections.abc import Sequence

from django.conf import settings
from django.utils.module_loading import import_string

from tickets.domain import (
    MAX_TICKETS_PER_PURCHASE,
    AccountId,
    ErrorCode,
    InvalidPurchaseError,
    PaymentFailedError,
    Purchase,
    SeatReservationFailedError,
    TicketCounts,
    TicketTypeRequest,
)
from tickets.gateways.interfaces import PaymentGateway, SeatReservationGateway

logger = logging.getLogger(__name__)


class TicketService:
    """Service for validating, pricing and placing ticket purchases."""

    def __init__(
        self,
        payment_gateway: PaymentGateway,
        seat_reservation_gateway: SeatReservationGateway,
    ) -> None:
        self._payment_gateway = payment_gateway
        self._seat_reservation_gateway = seat_reservation_gateway

    def purchase_tickets(
        self, account_id: int, *ticket_type_requests: TicketTypeRequest
    ) -> Purchase:
        """Validate a purchase, take payment and reserve seats.

        All validation happens before either gateway is called, so a
        rejected purchase never reaches the external systems.

        Raises:
            InvalidPurchaseError: If the account or requests break a purchase rule.
            PaymentFailedError: If the payment gateway raises.
            SeatReservationFailedError: If the seat reservation gateway raises.
        """
        try:
            account = AccountId.parse(account_id)
            self._validate_ticket_requests(ticket_type_requests)
            counts = TicketCounts.from_requests(ticket_type_requests)
            self._validate_business_rules(counts)
        except InvalidPurchaseError as exc:
            logger.warning(
                "Purchase rejected",
                extra={"account_id": account_id, "code": exc.code.value},
            )
            raise

        purchase = Purchase(
            account_id=account,
            counts=counts,
            total_amount=counts.total_amount,
            total_seats=counts.total_seats,
        )
        self._process_payment(purchase)
        self._reserve_seats(purchase)

        logger.info(
            "Purchase completed",
            extra={
                "account_id": account.value,
                "amount": purchase.total_amount,
                "seats": purchase.total_seats,
            },
        )
        return purchase

    def _validate_ticket_requests(self, ticket_type_requests: Sequence[object]) -> None:
        if not ticket_type_requests:
            raise InvalidPurchaseError(
                code=ErrorCode.NO_TICKET_REQUESTS,
                message="At least one ticket type request is required",
            )
        for request in ticket_type_requests:
            if not isinstance(request, TicketTypeRequest):
                raise InvalidPurchaseError(
                    code=ErrorCode.INVALID_TICKET_REQUEST,
                    message="All ticket requests must be TicketTypeRequest instances",
                )

    def _validate_business_rules(self, counts: TicketCounts) -> None:
        if counts.total_tickets > MAX_TICKETS_PER_PURCHASE:
            raise InvalidPurchaseError(
                code=ErrorCode.TOO_MANY_TICKETS,
                message=f"Cannot purchase more than {MAX_TICKETS_PER_PURCHASE} tickets at once",
            )
        if (counts.child > 0 or counts.infant > 0) and counts.adult == 0:
            raise InvalidPurchaseError(
                code=ErrorCode.ADULT_REQUIRED,
                message="Child and Infant tickets cannot be purchased without Adult tickets",
            )
        if counts.total_tickets == 0:
            raise InvalidPurchaseError(
                code=ErrorCode.NO_TICKETS,
                message="Must purchase at least one ticket",
            )

    def _process_payment(self, purchase: Purchase) -> None:
        try:
            self._payment_gateway.make_payment(
                purchase.account_id.value, purchase.total_amount
            )
        except Exception as exc:
            logger.error(
                "Payment failed",
                extra={"account_id": purchase.account_id.value},
                exc_info=True,
            )
            raise PaymentFailedError() from exc

    def _reserve_seats(self, purchase: Purchase) -> None:
        if purchase.total_seats <= 0:
            return
        try:
            self._seat_reservation_gateway.reserve_seat(
                purchase.account_id.value, purchase.total_seats
            )
        except Exception as exc:
            # payment has already been taken at this point
            logger.error(
                "Seat reservation failed",
                extra={
                    "account_id": purchase.account_id.value,
                    "amount": purchase.total_amount,
                },
                exc_info=True,
            )
            raise SeatReservationFailedError() from exc


def build_ticket_service() -> TicketService:
    """Return a TicketService wired to the gateways named in settings."""
    payment_gateway_class = import_string(settings.TICKETS_PAYMENT_GATEWAY)
    seat_reservation_gateway_class = import_string(
        settings.TICKETS_SEAT_RESERVATION_GATEWAY
    )
    return TicketService(
        payment_gateway=payment_gateway_class(),
        seat_reservation_gateway=seat_reservation_gateway_class(),
    )
