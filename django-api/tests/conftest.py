"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from fakes import RecordingPaymentGateway, RecordingSeatReservationGateway
from tickets.services import TicketService


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def gateway_calls() -> list:
    return []


@pytest.fixture
def payment_gateway(gateway_calls: list) -> RecordingPaymentGateway:
    return RecordingPaymentGateway(gateway_calls)


@pytest.fixture
def seat_reservation_gateway(gateway_calls: list) -> RecordingSeatReservationGateway:
    return RecordingSeatReservationGateway(gateway_calls)


@pytest.fixture
def ticket_service(
    payment_gateway: RecordingPaymentGateway,
    seat_reservation_gateway: RecordingSeatReservationGateway,
) -> TicketService:
    return TicketService(payment_gateway, seat_reservation_gateway)
