import sys
import os

from sqlalchemy import text

# Add project root to path
sys.path.append(os.getcwd())

from voicelift.db.base import Base
from voicelift.db.session import engine
# Import all models
from voicelift.models import *  # noqa: F401, F403


def drop_tables():
    print("Dropping all tables...")
    with engine.begin() as conn:
        conn.execute(text("DROP TABLE IF EXISTS alembic_version"))
        Base.metadata.drop_all(conn)
    print("Tables dropped.")
    engine.dispose()


if __name__ == "__main__":
    drop_tables()
