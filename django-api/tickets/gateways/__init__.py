from tickets.gateways.interfaces import PaymentGateway, SeatReservationGateway
from tickets.gateways.thirdparty import SeatReservationService, TicketPaymentService

__all__ = [
    "PaymentGateway",
    "SeatReservationGateway",
    "TicketPaymentService",
    "SeatReservationService",
]
