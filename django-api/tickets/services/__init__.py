from tickets.services.ticket_service import TicketService, build_ticket_service

__all__ = ["TicketService", "build_ticket_service"]
