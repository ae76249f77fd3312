import sys
import os

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

# Add project root to sys.path
sys.path.append(os.getcwd())

from voicelift.db.session import SessionLocal, engine


def check_data():
    print(f"Database: {engine.url.render_as_string(hide_password=True)}")
    tables = ["workouts", "exercises", "exercise_sets", "workout_media"]
    with SessionLocal() as session:
        for table in tables:
            try:
                count = session.execute(text(f"SELECT count(*) FROM {table}")).scalar()
                print(f"Table '{table}' row count: {count}")
                if count:
                    sample_id = session.execute(text(f"SELECT id FROM {table} LIMIT 1")).scalar()
                    print(f"  Sample ID from {table}: {sample_id}")
            except SQLAlchemyError as e:
                print(f"Error querying {table}: {e}")
                session.rollback()


if __name__ == "__main__":
    check_data()
