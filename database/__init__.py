# Session and engine helpers re-exported for `from database import ...`
from .database import (
    engine,
    SessionLocal,
    Base,
    get_db,
    DATABASE_URL
)

__all__ = ['engine', 'SessionLocal', 'Base', 'get_db', 'DATABASE_URL']
