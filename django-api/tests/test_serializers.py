"""Unit tests for purchase payload serializers.

Run with: pytest tests/test_serializers.py -v
"""

import pytest

from tickets.domain import TicketCategory, TicketTypeRequest
from tickets.handlers.serializers import (
    PurchaseRequestSerializer,
    StrictIntegerField,
    TicketTypeRequestSerializer,
)


class TestStrictIntegerField:
    """Tests for StrictIntegerField."""

    def test_accepts_integer(self):
        assert StrictIntegerField().run_validation(3) == 3

    @pytest.mark.parametrize("value", ["1", 1.0, 2.5, True, None])
    def test_rejects_non_integers(self, value):
        """Values that only coerce to integers are refused."""
        serializer = PurchaseRequestSerializer(
            data={"account_id": value, "tickets": [{"ticket_type": "ADULT", "quantity": 1}]}
        )
        assert not serializer.is_valid()
        assert "account_id" in serializer.errors


class TestTicketTypeRequestSerializer:
    """Tests for TicketTypeRequestSerializer."""

    def test_to_domain_builds_request(self):
        request = TicketTypeRequestSerializer.to_domain({"ticket_type": "CHILD", "quantity": 2})
        assert request == TicketTypeRequest(TicketCategory.CHILD, 2)

    @pytest.mark.parametrize("quantity", ["2", 2.0])
    def test_rejects_non_integer_quantity(self, quantity):
        serializer = TicketTypeRequestSerializer(
            data={"ticket_type": "ADULT", "quantity": quantity}
        )
        assert not serializer.is_valid()
        assert "quantity" in serializer.errors


class TestPurchaseRequestSerializer:
    """Tests for PurchaseRequestSerializer."""

    def test_to_domain_keeps_request_order(self):
        serializer = PurchaseRequestSerializer(
            data={
                "account_id": 4,
                "tickets": [
                    {"ticket_type": "ADULT", "quantity": 2},
                    {"ticket_type": "INFANT", "quantity": 1},
                ],
            }
        )
        assert serializer.is_valid(), serializer.errors

        account_id, requests = serializer.to_domain()

        assert account_id == 4
        assert requests == [
            TicketTypeRequest(TicketCategory.ADULT, 2),
            TicketTypeRequest(TicketCategory.INFANT, 1),
        ]
