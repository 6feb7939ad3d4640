import os
from dotenv import load_dotenv

load_dotenv(override=True)


def _get_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


DATABASE_URL = os.getenv("DATABASE_URL")
DB_DRIVER = os.getenv("STOREFRONT_DB_DRIVER", "postgresql+asyncpg")
DB_HOST = os.getenv("STOREFRONT_DB_HOST", "localhost")
DB_PASSWORD = os.getenv("STOREFRONT_DB_PASSWORD", "")


NEARBY_RADIUS = float(os.getenv("NEARBY_RADIUS", "30"))
RECENT_LIMIT = int(os.getenv("RECENT_LIMIT", "5"))
POPULAR_LIMIT = int(os.getenv("POPULAR_LIMIT", "5"))

# Refuse orders that would take a product below zero units
ENFORCE_STOCK_LEVELS = _get_bool("ENFORCE_STOCK_LEVELS", True)


LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
LOG_FILE = os.getenv("LOG_FILE")
