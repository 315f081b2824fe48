"""Tests for the default third-party gateway adapters and service wiring.

Run with: pytest tests/test_gateways.py -v
"""

import pytest

from tickets.gateways import SeatReservationService, TicketPaymentService
from tickets.services import build_ticket_service


class TestTicketPaymentService:
    """Tests for the payment gateway adapter."""

    def test_make_payment_accepts_integers(self):
        assert TicketPaymentService().make_payment(1, 65) is None

    @pytest.mark.parametrize("account_id, amount", [("1", 65), (1, 6.5), (1, None)])
    def test_make_payment_rejects_non_integers(self, account_id, amount):
        with pytest.raises(TypeError):
            TicketPaymentService().make_payment(account_id, amount)


class TestSeatReservationService:
    """Tests for the seat booking adapter."""

    def test_reserve_seat_accepts_integers(self):
        assert SeatReservationService().reserve_seat(1, 3) is None

    @pytest.mark.parametrize("account_id, seats", [(1.0, 3), (1, "3"), (1, True)])
    def test_reserve_seat_rejects_non_integers(self, account_id, seats):
        with pytest.raises(TypeError):
            SeatReservationService().reserve_seat(account_id, seats)


class TestBuildTicketService:
    """Tests for settings-driven service construction."""

    def test_uses_default_gateways(self):
        service = build_ticket_service()
        assert isinstance(service._payment_gateway, TicketPaymentService)
        assert isinstance(service._seat_reservation_gateway, SeatReservationService)

    def test_unknown_gateway_path_raises(self, settings):
        settings.TICKETS_SEAT_RESERVATION_GATEWAY = "tickets.gateways.missing.Gateway"
        with pytest.raises(ImportError):
            build_ticket_service()
