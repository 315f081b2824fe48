"""Domain models derived during a single purchase.

Nothing here is persisted; each value lives for one purchase call.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Self

from tickets.domain.pricing import PRICE_TABLE, SEATED_CATEGORIES
from tickets.domain.value_objects import AccountId, TicketCategory, TicketTypeRequest


@dataclass(frozen=True)
class TicketCounts:
    """Number of tickets per category across all requests of a purchase."""

    adult: int = 0
    child: int = 0
    infant: int = 0

    @classmethod
    def from_requests(cls, requests: Iterable[TicketTypeRequest]) -> Self:
        totals = dict.fromkeys(TicketCategory, 0)
        for request in requests:
            totals[request.category] += request.quantity
        return cls(
            adult=totals[TicketCategory.ADULT],
            child=totals[TicketCategory.CHILD],
            infant=totals[TicketCategory.INFANT],
        )

    def __getitem__(self, category: TicketCategory) -> int:
        return getattr(self, category.name.lower())

    def items(self) -> list[tuple[TicketCategory, int]]:
        return [(category, self[category]) for category in TicketCategory]

    @property
    def total_tickets(self) -> int:
        return self.adult + self.child + self.infant

    @property
    def total_seats(self) -> int:
        return sum(self[category] for category in SEATED_CATEGORIES)

    @property
    def total_amount(self) -> int:
        return sum(count * PRICE_TABLE[category] for category, count in self.items())


@dataclass(frozen=True)
class Purchase:
    """Receipt for a purchase that was paid for and seated."""

    account_id: AccountId
    counts: TicketCounts
    total_amount: int
    total_seats: int
