import os
import sys, pathlib

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

os.environ.setdefault("APP_ENV", "test")

import uuid
from datetime import datetime

import pytest

from dailyrental.models.rental import Customer, Rental
from dailyrental.utils.constants import RentalCategory


class FakeStore:
    """In-memory stand-in exposing the Store methods the services call."""

    def __init__(self):
        self.customers = {}
        self.rentals = {}
        self.update_calls = []

    def create_customer(self, name, is_favorite=False):
        cid = str(uuid.uuid4())
        self.customers[cid] = {"customer_id": cid, "name": name, "is_favorite": bool(is_favorite)}
        return cid

    def get_customer(self, customer_id):
        return self.customers.get(customer_id)

    def create_rental(self, r):
        rid = str(uuid.uuid4())
        self.rentals[rid] = dict(r, rental_id=rid)
        return rid

    def get_rental(self, rid):
        return self.rentals.get(rid)

    def update_rental(self, rid, updates):
        self.update_calls.append((rid, dict(updates)))
        if rid not in self.rentals:
            return False
        self.rentals[rid].update(updates)
        return True


@pytest.fixture
def fake_store(monkeypatch):
    """
    Patch services.common._store() to a clean in-memory store so services
    called without an explicit store use it too.
    """
    from dailyrental.services import common as common_mod

    store = FakeStore()
    monkeypatch.setattr(common_mod, "_store", lambda: store)
    return store


@pytest.fixture
def make_rental():
    """Build a Rental; defaults to the 2020-09-09 10:00 -> 18:00 garage rental."""

    def _make(category=RentalCategory.GARAGE, is_favorite=False,
              start=datetime(2020, 9, 9, 10, 0), end=datetime(2020, 9, 9, 18, 0),
              rental_id="r1"):
        customer = Customer(customer_id="c1", name="Demo", is_favorite=is_favorite)
        return Rental(rental_id=rental_id, start=start, end=end, category=category, customer=customer)

    return _make


@pytest.fixture
def file_store(tmp_path):
    """A real pickle-backed Store in a temp directory."""
    from dailyrental.models.store import Store
    return Store(tmp_path / "data.pkl")


@pytest.fixture
def client(file_store):
    from dailyrental import create_app
    app = create_app({"TESTING": True, "SECRET_KEY": "test", "STORE": file_store})
    with app.test_client() as c:
        yield c
