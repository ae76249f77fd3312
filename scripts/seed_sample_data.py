import os
import sys

# Add parent directory to path so we can import voicelift modules
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from voicelift.core.config import get_settings
from voicelift.core.logging_config import configure_logging
from voicelift.db.session import SessionLocal, init_db
from voicelift.services.sample_data import clear_all_workouts, populate_week_of_workouts


def main(reset: bool = False):
    configure_logging(get_settings())
    init_db()
    with SessionLocal() as session:
        if reset:
            clear_all_workouts(session)
        workouts = populate_week_of_workouts(session)
        session.commit()
        for w in workouts:
            print(f"{w.formatted_date} {w.formatted_time}: {w.summary}")


if __name__ == "__main__":
    main(reset="--reset" in sys.argv)
