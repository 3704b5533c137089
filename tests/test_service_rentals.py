from datetime import datetime

import pytest

from dailyrental.exceptions import (
    CheckoutPreconditionError,
    CustomerNotFoundError,
    InvalidCategoryError,
    InvalidDateRangeError,
    RentalNotFoundError,
)
from dailyrental.services.movement_service import MovementService
from dailyrental.services.rental_service import RentalService
from dailyrental.utils.constants import RentalCategory


def test_create_and_load_rental(fake_store):
    cid = RentalService.create_customer("Autohaus", is_favorite=True)
    rid = RentalService.create_rental(cid, "GARAGE", datetime(2020, 9, 9, 10), "2020-09-09 18:00")

    rental = RentalService.get_rental(rid)
    assert rental.category == RentalCategory.GARAGE
    assert rental.start == datetime(2020, 9, 9, 10)
    assert rental.end == datetime(2020, 9, 9, 18)
    assert rental.customer.is_favorite is True
    assert rental.movement is None


def test_unknown_customer_rejected(fake_store):
    with pytest.raises(CustomerNotFoundError):
        RentalService.create_rental("nope", RentalCategory.GARAGE, "2020-09-09T10:00", "2020-09-09T18:00")


def test_unknown_category_rejected(fake_store):
    cid = RentalService.create_customer("Demo")
    with pytest.raises(InvalidCategoryError):
        RentalService.create_rental(cid, "fleet", "2020-09-09T10:00", "2020-09-09T18:00")


@pytest.mark.parametrize("start, end", [
    ("2020-09-09T18:00", "2020-09-09T10:00"),
    ("not-a-date", "2020-09-09T10:00"),
    ("2020-09-09T10:00+02:00", "2020-09-09T18:00"),
])
def test_bad_range_rejected(fake_store, start, end):
    cid = RentalService.create_customer("Demo")
    with pytest.raises(InvalidDateRangeError):
        RentalService.create_rental(cid, RentalCategory.PRIVATE, start, end)


def test_get_unknown_rental(fake_store):
    with pytest.raises(RentalNotFoundError):
        RentalService.get_rental("missing")


def test_rental_without_customer_record_cannot_be_checked_out(fake_store):
    cid = RentalService.create_customer("Gone", is_favorite=True)
    rid = RentalService.create_rental(cid, RentalCategory.GARAGE, "2020-09-09T10:00", "2020-09-09T18:00")
    del fake_store.customers[cid]

    rental = RentalService.get_rental(rid)
    assert rental.customer is None

    with pytest.raises(CheckoutPreconditionError):
        MovementService.checkout(rental, datetime(2020, 9, 9, 5, 0))
    assert rental.end == datetime(2020, 9, 9, 18, 0)
    assert rental.movement is None
    assert fake_store.rentals[rid]["end"] == "2020-09-09T18:00:00"
    assert fake_store.update_calls == []
