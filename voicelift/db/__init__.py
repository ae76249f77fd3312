"""Database package: engine, session, base."""

from voicelift.db.session import SessionLocal, get_db, init_db

__all__ = ["SessionLocal", "get_db", "init_db"]
