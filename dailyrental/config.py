"""Application configuration defaults and environment overrides."""
import os


class DefaultConfig:
    SECRET_KEY = "dev-secret-change-me"
    # None -> Store falls back to DAILYRENTAL_DATA_PATH or <project>/data.pkl
    DATA_PATH = None
    # A ready-made store object (tests inject one here)
    STORE = None


def from_env() -> dict:
    """Collect overrides from the process environment."""
    out = {}
    if os.getenv("DAILYRENTAL_DATA_PATH"):
        out["DATA_PATH"] = os.getenv("DAILYRENTAL_DATA_PATH")
    if os.getenv("SECRET_KEY"):
        out["SECRET_KEY"] = os.getenv("SECRET_KEY")
    return out
