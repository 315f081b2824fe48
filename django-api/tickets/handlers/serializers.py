"""Serializers for purchase payloads and the Purchase domain model."""

from rest_framework import serializers

from tickets.domain import Purchase, TicketCategory, TicketTypeRequest


class StrictIntegerField(serializers.IntegerField):
    """Integer field that refuses strings, floats and booleans."""

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, int):
            self.fail("invalid")
        return super().to_internal_value(data)


class TicketTypeRequestSerializer(serializers.Serializer):
    """One line of a purchase request."""

    ticket_type = serializers.ChoiceField(choices=[c.value for c in TicketCategory])
    quantity = StrictIntegerField(min_value=0)

    @staticmethod
    def to_domain(data: dict) -> TicketTypeRequest:
        return TicketTypeRequest(
            category=TicketCategory(data["ticket_type"]),
            quantity=data["quantity"],
        )


class PurchaseRequestSerializer(serializers.Serializer):
    """Inbound purchase payload.

    Only the shape is checked here. Account and ticket rules belong to the
    service so the API reports the same errors as any other caller.
    """

    account_id = StrictIntegerField()
    tickets = TicketTypeRequestSerializer(many=True, allow_empty=True)

    def to_domain(self) -> tuple[int, list[TicketTypeRequest]]:
        return (
            self.validated_data["account_id"],
            [
                TicketTypeRequestSerializer.to_domain(line)
                for line in self.validated_data["tickets"]
            ],
        )


class PurchaseSerializer(serializers.Serializer):
    """Serializer for the Purchase domain model."""

    account_id = serializers.IntegerField(source="account_id.value")
    total_amount = serializers.IntegerField()
    total_seats = serializers.IntegerField()
    tickets = serializers.SerializerMethodField()

    def get_tickets(self, purchase: Purchase) -> dict[str, int]:
        return {category.value: count for category, count in purchase.counts.items()}
