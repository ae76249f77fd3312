"""Shared fixtures: in-memory database, API client and a temporary documents root."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import voicelift.models  # noqa: F401 - register all models
from voicelift.core.app_state import AppState
from voicelift.core.config import get_settings
from voicelift.db.base import Base
from voicelift.db.session import build_engine, get_db
from voicelift.models import Exercise, ExerciseSet, Workout


@pytest.fixture(autouse=True)
def documents_dir(tmp_path, monkeypatch):
    """Point the documents root at a temp dir for every test."""
    root = tmp_path / "Documents"
    monkeypatch.setenv("VOICELIFT_DOCUMENTS_DIR", str(root))
    get_settings.cache_clear()
    yield root
    get_settings.cache_clear()


@pytest.fixture
def engine():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    with Session(engine, expire_on_commit=False, autoflush=False) as session:
        yield session


@pytest.fixture
def client(engine):
    """TestClient on a fresh app whose get_db uses the in-memory engine."""
    from voicelift.main import create_application

    app = create_application(app_state=AppState())
    testing_session = sessionmaker(engine, expire_on_commit=False, autoflush=False)

    def override_get_db():
        with testing_session() as session:
            try:
                yield session
                session.commit()
            except Exception:
                session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def bench_press():
    """Bench Press: 10x135, 8x155, 6x175 lbs."""
    exercise = Exercise(name="Bench Press")
    exercise.sets = [
        ExerciseSet(set_number=1, reps=10, weight=135),
        ExerciseSet(set_number=2, reps=8, weight=155),
        ExerciseSet(set_number=3, reps=6, weight=175),
    ]
    return exercise


@pytest.fixture
def workout(bench_press):
    workout = Workout(notes="Push day")
    squats = Exercise(name="Squats")
    squats.sets = [
        ExerciseSet(set_number=1, reps=5, weight=225),
        ExerciseSet(set_number=2, reps=5, weight=245),
    ]
    workout.exercises = [bench_press, squats]
    return workout
