"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Self

from tickets.domain.errors import ErrorCode, InvalidPurchaseError


class TicketCategory(Enum):
    """Closed set of ticket categories sold by the venue."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"


@dataclass(frozen=True)
class AccountId:
    """Identifier of the purchasing account."""

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass but never a valid account
        if isinstance(self.value, bool) or not isinstance(self.value, int) or self.value <= 0:
            raise InvalidPurchaseError(
                code=ErrorCode.INVALID_ACCOUNT_ID,
                message="Account ID must be a positive integer",
            )

    @classmethod
    def parse(cls, value: Any) -> Self:
        return cls(value=value)


@dataclass(frozen=True)
class TicketTypeRequest:
    """A number of tickets requested for a single category."""

    category: TicketCategory
    quantity: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "category", _coerce_category(self.category))

        quantity = self.quantity
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise TypeError("quantity must be an integer")
        if quantity < 0:
            raise TypeError("quantity must be a non-negative integer")


def _coerce_category(value: Any) -> TicketCategory:
    if isinstance(value, TicketCategory):
        return value
    if isinstance(value, str) and value in TicketCategory.__members__:
        return TicketCategory[value]
    raise TypeError(
        f"type must be {', '.join(TicketCategory.__members__)}"
    )
