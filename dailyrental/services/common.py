"""Shared service helpers and factories."""

from datetime import datetime
from typing import Optional

from dailyrental.models.rental import Customer, Movement, Rental
from dailyrental.models.store import Store


def _store() -> Store:
    """Get the singleton store instance."""
    return Store.instance()


# -------- timestamp helpers --------
def parse_timestamp(s: str) -> datetime:
    """
    Parse an ISO-8601 local timestamp ('YYYY-MM-DDTHH:MM[:SS]', a space is
    accepted instead of 'T'). Raise ValueError on bad input or when the
    value carries a UTC offset; only naive local timestamps are supported.
    """
    dt = datetime.fromisoformat(str(s).strip())
    if dt.tzinfo is not None:
        raise ValueError(f"Timezone-aware timestamp not supported: {s!r}")
    return dt


def format_timestamp(dt: Optional[datetime]) -> Optional[str]:
    if dt is None:
        return None
    return dt.isoformat()


def _now() -> datetime:
    """Wrapper for easier testing/mocking."""
    return datetime.now().replace(microsecond=0)


# -------- dict <-> rich model mappers --------
def customer_from_dict(d: Optional[dict]) -> Optional[Customer]:
    """Map a stored customer dict to a Customer."""
    if not d:
        return None
    return Customer(
        customer_id=d.get("customer_id"),
        name=d.get("name") or "",
        is_favorite=bool(d.get("is_favorite")),
    )


def movement_from_dict(d: Optional[dict]) -> Optional[Movement]:
    if not d:
        return None
    checkin = d.get("checkin")
    return Movement(
        checkout=parse_timestamp(d["checkout"]),
        checkin=parse_timestamp(checkin) if checkin else None,
    )


def rental_from_dict(d: Optional[dict], customer: Optional[dict]) -> Optional[Rental]:
    """
    Map a stored rental dict (plus its customer's dict) to a Rental.
    A rental whose customer record is gone keeps `customer=None`; checkout
    rejects it instead of guessing the favorite flag.
    """
    if not d:
        return None
    cust = customer_from_dict(customer)
    return Rental(
        rental_id=d.get("rental_id"),
        start=parse_timestamp(d["start"]),
        end=parse_timestamp(d["end"]),
        category=(d.get("category") or "").lower(),
        customer=cust,
        movement=movement_from_dict(d.get("movement")),
    )


def rental_to_dict(rental: Rental) -> dict:
    """Flatten a Rental into the dict layout the store persists."""
    movement = None
    if rental.movement is not None:
        movement = {
            "checkout": format_timestamp(rental.movement.checkout),
            "checkin": format_timestamp(rental.movement.checkin),
        }
    return {
        "rental_id": rental.rental_id,
        "customer_id": rental.customer.customer_id,
        "category": rental.category,
        "start": format_timestamp(rental.start),
        "end": format_timestamp(rental.end),
        "movement": movement,
    }
