from .config import settings, get_settings, Settings
from .database import Database, Base, get_db

__all__ = ["settings", "get_settings", "Settings", "Database", "Base", "get_db"]
