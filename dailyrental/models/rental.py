from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..utils.constants import MovementState


@dataclass
class Customer:
    """
    Customer attached to a rental. Favorite customers are exempt from every
    checkout-time end adjustment.
    """
    customer_id: str
    name: str
    is_favorite: bool = False


@dataclass
class Movement:
    """
    Actual vehicle movement for a rental: when it left the garage and,
    once the checkin flow exists, when it came back.
    """
    checkout: datetime
    checkin: Optional[datetime] = None

    @property
    def state(self) -> str:
        if self.checkin is None:
            return MovementState.CHECKED_OUT
        return MovementState.CHECKED_IN


@dataclass
class Rental:
    """
    Planned rental window for one customer.
    `end` is mutated in place by the checkout adjustment; the store keeps
    the persisted copy.
    """
    rental_id: str
    start: datetime
    end: datetime
    category: str  # "garage" | "private"
    customer: Optional[Customer]
    movement: Optional[Movement] = None

    @property
    def movement_state(self) -> Optional[str]:
        """None until the first checkout."""
        return self.movement.state if self.movement else None
