"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from tickets.domain import (
    DomainError,
    InvalidPurchaseError,
    PaymentFailedError,
    SeatReservationFailedError,
)
from tickets.handlers.serializers import PurchaseRequestSerializer, PurchaseSerializer
from tickets.services import build_ticket_service

ERROR_STATUS = {
    InvalidPurchaseError: status.HTTP_400_BAD_REQUEST,
    PaymentFailedError: status.HTTP_502_BAD_GATEWAY,
    SeatReservationFailedError: status.HTTP_502_BAD_GATEWAY,
}


def error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=ERROR_STATUS.get(type(error), status.HTTP_400_BAD_REQUEST),
    )


class PurchaseView(APIView):
    """Handler for POST /api/purchases"""

    def post(self, request: Request) -> Response:
        payload = PurchaseRequestSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        account_id, ticket_type_requests = payload.to_domain()

        service = build_ticket_service()
        try:
            purchase = service.purchase_tickets(account_id, *ticket_type_requests)
        except DomainError as exc:
            return error_response(exc)

        return Response(PurchaseSerializer(purchase).data, status=status.HTTP_201_CREATED)
