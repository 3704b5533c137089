"""Rental storage operations: the persistence collaborator of the checkout flow."""

from datetime import datetime
from typing import Optional

from dailyrental.exceptions import (
    CustomerNotFoundError,
    InvalidCategoryError,
    InvalidDateRangeError,
    RentalNotFoundError,
)
from dailyrental.models.rental import Rental
from dailyrental.models.store import Store
from dailyrental.services import common
from dailyrental.utils.constants import ALLOWED_CATEGORIES


def _resolve_store(store: Optional["Store"] = None):
    """Prefer an injected store (tests); otherwise the shared one."""
    return store if store is not None else common._store()


def _as_timestamp(x) -> datetime:
    """Coerce a datetime or ISO string to a naive datetime."""
    if isinstance(x, datetime):
        if x.tzinfo is not None:
            raise ValueError(f"Timezone-aware timestamp not supported: {x!r}")
        return x
    if isinstance(x, str):
        return common.parse_timestamp(x)
    raise ValueError(f"Unsupported timestamp: {x!r}")


class RentalService:
    """
    Create, load and persist rentals and their customers.
    Rentals leave this service as rich Rental objects and come back through
    update_rental once the checkout flow has mutated them.
    """

    @staticmethod
    def create_customer(name: str, is_favorite: bool = False, store: Optional["Store"] = None) -> str:
        st = _resolve_store(store)
        return st.create_customer((name or "").strip(), is_favorite=is_favorite)

    @staticmethod
    def create_rental(
            customer_id: str,
            category: str,
            start,
            end,
            store: Optional["Store"] = None,
    ) -> str:
        """
        Create a rental for an existing customer.
        `start`/`end` may be naive datetimes or ISO strings; start must not
        be after end.

        Returns:
            the new rental_id
        """
        st = _resolve_store(store)

        if not st.get_customer(customer_id):
            raise CustomerNotFoundError(f"Error: customer with ID '{customer_id}' not found")

        cat = (category or "").lower().strip()
        if cat not in ALLOWED_CATEGORIES:
            raise InvalidCategoryError(f"Error: unknown rental category '{category}'")

        try:
            t1 = _as_timestamp(start)
            t2 = _as_timestamp(end)
        except ValueError as e:
            raise InvalidDateRangeError(f"Error: {e}") from e
        if t1 > t2:
            raise InvalidDateRangeError("Error: rental start must not be after its end")

        return st.create_rental({
            "customer_id": customer_id,
            "category": cat,
            "start": common.format_timestamp(t1),
            "end": common.format_timestamp(t2),
            "movement": None,
            "created_at": common.format_timestamp(common._now()),
        })

    @staticmethod
    def get_rental(rental_id: str, store: Optional["Store"] = None) -> Rental:
        """Return the rental as a rich object or raise RentalNotFoundError."""
        st = _resolve_store(store)
        d = st.get_rental(rental_id)
        if d is None:
            raise RentalNotFoundError(f"Error: rental with ID '{rental_id}' not found")
        return common.rental_from_dict(d, st.get_customer(d.get("customer_id")))

    @staticmethod
    def update_rental(rental: Rental, store: Optional["Store"] = None) -> None:
        """
        Persist a mutated rental. Errors from the backing store propagate
        unchanged; nothing is retried.
        """
        st = _resolve_store(store)
        if not st.update_rental(rental.rental_id, common.rental_to_dict(rental)):
            raise RentalNotFoundError(f"Error: rental with ID '{rental.rental_id}' not found")
