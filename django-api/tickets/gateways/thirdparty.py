"""Default adapters for the third-party payment and seat booking systems.

Both systems are reliable and side-effect only; these adapters enforce the
argument types those systems accept and record each call.
"""

import logging

from tickets.gateways.interfaces import PaymentGateway, SeatReservationGateway

logger = logging.getLogger(__name__)


def _require_int(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")


class TicketPaymentService(PaymentGateway):
    """Payment gateway client."""

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        _require_int("account_id", account_id)
        _require_int("total_amount_to_pay", total_amount_to_pay)
        logger.info(
            "Payment taken",
            extra={"account_id": account_id, "amount": total_amount_to_pay},
        )


class SeatReservationService(SeatReservationGateway):
    """Seat booking client."""

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        _require_int("account_id", account_id)
        _require_int("total_seats_to_allocate", total_seats_to_allocate)
        logger.info(
            "Seats reserved",
            extra={"account_id": account_id, "seats": total_seats_to_allocate},
        )
