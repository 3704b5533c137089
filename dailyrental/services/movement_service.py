"""Vehicle movements: checkout (with end adjustment) and checkin."""

import logging
from datetime import datetime
from typing import Optional

from dailyrental.exceptions import CheckoutPreconditionError
from dailyrental.models.rental import Movement, Rental
from dailyrental.models.store import Store
from dailyrental.services.checkout_rules import CheckoutRuleEngine
from dailyrental.services.rental_service import RentalService
from dailyrental.utils.constants import ALLOWED_CATEGORIES

logger = logging.getLogger(__name__)


def _check_naive(value, label: str) -> None:
    if not isinstance(value, datetime):
        raise CheckoutPreconditionError(f"Error: {label} must be a datetime, got {type(value).__name__}")
    if value.tzinfo is not None:
        raise CheckoutPreconditionError(f"Error: {label} must be a naive local timestamp")


def _validate_checkout(rental: Rental, checkout_at: datetime) -> None:
    """Fail before anything on the rental is touched."""
    if rental is None:
        raise CheckoutPreconditionError("Error: rental is required")
    _check_naive(checkout_at, "checkout timestamp")
    _check_naive(rental.start, "rental start")
    _check_naive(rental.end, "rental end")
    if rental.category not in ALLOWED_CATEGORIES:
        raise CheckoutPreconditionError(f"Error: unknown rental category '{rental.category}'")
    if rental.customer is None:
        raise CheckoutPreconditionError("Error: rental has no customer")


class MovementService:
    """
    Records vehicle movements on a rental.

    checkout() always records the movement; the planned end is adjusted by
    CheckoutRuleEngine and the rental is persisted exactly once afterwards.
    The in-memory mutation is not rolled back when persisting fails.
    """

    engine = CheckoutRuleEngine()

    @staticmethod
    def checkout(rental: Rental, checkout_at: datetime, store: Optional["Store"] = None) -> None:
        _validate_checkout(rental, checkout_at)

        # Each checkout replaces whatever movement was recorded before.
        rental.movement = Movement(checkout=checkout_at)

        old_end = rental.end
        adjustment = MovementService.engine.apply(rental, checkout_at)
        logger.info(
            "Checkout of rental %s at %s: rule=%s end %s -> %s",
            rental.rental_id, checkout_at.isoformat(), adjustment.rule or "none",
            old_end.isoformat(), rental.end.isoformat(),
        )

        RentalService.update_rental(rental, store=store)

    @staticmethod
    def checkin(rental: Rental) -> None:
        """Placeholder: checkin does nothing yet (movement.checkin stays unset)."""
        logger.debug("Checkin of rental %s ignored", getattr(rental, "rental_id", None))
