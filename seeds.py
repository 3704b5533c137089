from datetime import datetime

from dailyrental import create_app
from dailyrental.services.rental_service import RentalService
from dailyrental.utils.constants import RentalCategory


def ensure_customer(store, name: str, is_favorite: bool = False) -> str:
    """
    Ensure a customer called `name` exists in the store.
    - If exists: update the favorite flag (idempotent).
    - If not:   create a new customer.
    """
    for c in store.customers.values():
        if c["name"] == name:
            c["is_favorite"] = is_favorite
            return c["customer_id"]
    return RentalService.create_customer(name, is_favorite=is_favorite, store=store)


def main():
    app = create_app()
    with app.app_context():
        store = app.extensions["rental_store"]

        # ---- Demo customers ----
        garage = ensure_customer(store, "Autohaus Demo GmbH")
        favorite = ensure_customer(store, "Favorite Fleet AG", is_favorite=True)
        private = ensure_customer(store, "Erika Mustermann")

        # ---- Demo rentals (create only if none exist) ----
        if not store.rentals:
            start = datetime(2020, 9, 9, 10, 0)
            end = datetime(2020, 9, 9, 18, 0)
            RentalService.create_rental(garage, RentalCategory.GARAGE, start, end, store=store)
            RentalService.create_rental(favorite, RentalCategory.GARAGE, start, end, store=store)
            RentalService.create_rental(private, RentalCategory.PRIVATE, start, end, store=store)

        store.save()

        print("Seed complete.")
        for r in store.rentals.values():
            c = store.customers.get(r["customer_id"], {})
            print(f"  {r['rental_id']}  {r['category']:<7}  {r['start']} -> {r['end']}  {c.get('name', '')}")


if __name__ == "__main__":
    main()
