"""Venue-wide pricing and purchase limits."""

from types import MappingProxyType

from tickets.domain.value_objects import TicketCategory

# Unit prices in whole pounds
PRICE_TABLE = MappingProxyType(
    {
        TicketCategory.ADULT: 25,
        TicketCategory.CHILD: 15,
        TicketCategory.INFANT: 0,
    }
)

MAX_TICKETS_PER_PURCHASE = 25

# Infants sit on an adult's lap
SEATED_CATEGORIES = frozenset({TicketCategory.ADULT, TicketCategory.CHILD})
