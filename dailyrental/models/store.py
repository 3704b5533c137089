import atexit
import os
import pickle
import threading
import uuid
from pathlib import Path

# ---- Paths ----
BASE_DIR = Path(__file__).resolve().parents[2]
DEFAULT_DATA_PATH = BASE_DIR / "data.pkl"


class Store:
    _inst = None
    _inst_lock = threading.Lock()
    _atexit_registered = False

    def __init__(self, path: str | os.PathLike | None = None):
        self.path = str(path or DEFAULT_DATA_PATH)
        self.customers: dict[str, dict] = {}
        self.rentals: dict[str, dict] = {}
        self._rw = threading.RLock()

        print(f"[Store] Using file: {self.path}")
        self._load()

        # Automatically save on exit (skipped in test environments)
        if not Store._atexit_registered and os.getenv("APP_ENV") != "test":
            atexit.register(self.save)
            Store._atexit_registered = True

    # ---------- Singleton ----------
    @classmethod
    def instance(cls, path: str | os.PathLike | None = None):
        """Return the global singleton instance of Store."""
        with cls._inst_lock:
            if cls._inst is None:
                cls._inst = Store(path or os.getenv("DAILYRENTAL_DATA_PATH") or DEFAULT_DATA_PATH)
        return cls._inst

    # ---------- Persistence ----------
    def _load(self):
        """Load data from the pickle file, or start empty if unavailable or invalid."""
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "rb") as f:
                data = pickle.load(f)
        except Exception as e:
            print(f"[Store] Load failed ({e}); starting empty.")
            return

        if isinstance(data, dict):
            self.customers = data.get("customers", {}) or {}
            self.rentals = data.get("rentals", {}) or {}
            print(f"[Store] Loaded: customers={len(self.customers)}, rentals={len(self.rentals)}")
        else:
            # Incompatible data format: back up the old file and start empty
            try:
                bak = self.path + ".bak"
                os.replace(self.path, bak)
                print(f"[Store] Incompatible store ({type(data).__name__}); backed up to {bak}. Starting empty.")
            except OSError as e:
                print(f"[Store] Backup failed: {e}")

    def _dump(self):
        """Write the in-memory data to the pickle file safely (atomic replace)."""
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        tmp = self.path + ".tmp"
        payload = {
            "customers": self.customers,
            "rentals": self.rentals,
        }
        with open(tmp, "wb") as f:
            pickle.dump(payload, f, protocol=pickle.HIGHEST_PROTOCOL)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, self.path)

    def save(self):
        """Thread-safe save method."""
        with self._rw:
            print(f"[Store] Saving to {self.path} ...")
            self._dump()

    def clear(self):
        """Drop every customer and rental (does not write to disk)."""
        with self._rw:
            self.customers.clear()
            self.rentals.clear()

    # ---------- Customers ----------
    def create_customer(self, name: str, is_favorite: bool = False) -> str:
        """Create a new customer and return its ID."""
        with self._rw:
            cid = str(uuid.uuid4())
            self.customers[cid] = {
                "customer_id": cid,
                "name": name,
                "is_favorite": bool(is_favorite),
            }
            self._dump()
            return cid

    def get_customer(self, customer_id: str) -> dict | None:
        """Get customer data by ID."""
        return self.customers.get(customer_id)

    # ---------- Rentals ----------
    def create_rental(self, r: dict) -> str:
        """Create a new rental record."""
        with self._rw:
            rid = str(uuid.uuid4())
            r = dict(r)
            r["rental_id"] = rid
            self.rentals[rid] = r
            self._dump()
            return rid

    def get_rental(self, rid: str) -> dict | None:
        """Get rental data by ID."""
        return self.rentals.get(rid)

    def update_rental(self, rid: str, updates: dict) -> bool:
        """Update an existing rental by ID."""
        with self._rw:
            if rid in self.rentals:
                self.rentals[rid].update(updates)
                self._dump()
                return True
            return False
