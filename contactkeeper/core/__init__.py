"""Settings, database session and security primitives."""

from contactkeeper.core.config import Settings, get_settings, settings
from contactkeeper.core.database import SessionLocal, check_db_connected, get_db

__all__ = ["Settings", "SessionLocal", "check_db_connected", "get_db", "get_settings", "settings"]
