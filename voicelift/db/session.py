"""Database engine and session factory."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from voicelift.core.config import get_settings
from voicelift.db.base import Base

logger = logging.getLogger(__name__)


def build_engine(url: str, echo: bool = False, **kwargs) -> Engine:
    """Create an engine; SQLite connections get foreign keys (and ON DELETE CASCADE) enabled."""
    sa_url = make_url(url)
    if sa_url.get_backend_name() == "sqlite":
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    engine = create_engine(url, echo=echo, **kwargs)
    if sa_url.get_backend_name() == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


settings = get_settings()

engine = build_engine(settings.sqlalchemy_url, echo=settings.debug)

SessionLocal = sessionmaker(
    engine,
    class_=Session,
    expire_on_commit=False,
    autoflush=False,
)


def init_db(bind: Engine | None = None) -> None:
    """Create any missing tables (use Alembic for upgrades of existing databases)."""
    import voicelift.models  # noqa: F401 - register all models

    target = bind or engine
    if target.url.get_backend_name() == "sqlite" and target.url.database not in (None, "", ":memory:"):
        Path(target.url.database).parent.mkdir(parents=True, exist_ok=True)
    logger.info("Creating tables on %s", target.url.render_as_string(hide_password=True))
    Base.metadata.create_all(target)


def get_db() -> Generator[Session, None, None]:
    """Dependency that yields a DB session, committing on success."""
    with SessionLocal() as session:
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
