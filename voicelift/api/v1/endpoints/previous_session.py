"""Previous session context - what you did last time for an exercise, and the trend since."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from voicelift.api.v1.endpoints.exercises import get_exercise_or_404
from voicelift.api.v1.endpoints.workouts import all_workouts, get_workout_or_404
from voicelift.db.session import get_db
from voicelift.schemas.progression import (
    ExerciseProgression,
    PreviousSession,
    SetComparison,
    WorkoutProgressionSummary,
)
from voicelift.services import ghost_sets

router = APIRouter()

NO_PREVIOUS_SESSION = "No previous session for this exercise."


def _previous(db: Session, name: str, exclude_workout_id: uuid.UUID | None) -> PreviousSession:
    ghost = ghost_sets.find_previous_session(name, all_workouts(db), exclude_workout_id)
    if ghost is None:
        return PreviousSession(message=NO_PREVIOUS_SESSION)
    return PreviousSession(previous=ghost)


@router.get("/previous-session", response_model=PreviousSession)
def get_previous_session_by_name(
    name: str = Query(..., min_length=1),
    exclude_workout_id: uuid.UUID | None = None,
    db: Session = Depends(get_db),
):
    """
    Sets from the most recent workout that has an exercise called `name` (any case).
    Pass exclude_workout_id (the workout being logged) to skip it.
    """
    return _previous(db, name, exclude_workout_id)


@router.get("/exercises/{exercise_id}/previous-session", response_model=PreviousSession)
def get_previous_session_sets(
    exercise_id: uuid.UUID,
    exclude_workout_id: uuid.UUID | None = None,
    db: Session = Depends(get_db),
):
    """Last time this exercise was done. Its own workout is skipped unless another id is given."""
    exercise = get_exercise_or_404(db, exercise_id)
    return _previous(db, exercise.name, exclude_workout_id or exercise.workout_id)


@router.get("/exercises/{exercise_id}/comparison", response_model=list[SetComparison])
def compare_with_previous_session(
    exercise_id: uuid.UUID,
    db: Session = Depends(get_db),
):
    """Each set against the set in the same position last session (empty without one)."""
    exercise = get_exercise_or_404(db, exercise_id)
    ghost = ghost_sets.find_previous_session(exercise.name, all_workouts(db), exercise.workout_id)
    if ghost is None:
        return []
    return ghost_sets.compare_sets(exercise, ghost)


@router.get("/exercises/{exercise_id}/progression", response_model=ExerciseProgression)
def get_exercise_progression(
    exercise_id: uuid.UUID,
    db: Session = Depends(get_db),
):
    """This session's average E1RM against the exercise's history."""
    exercise = get_exercise_or_404(db, exercise_id)
    return ghost_sets.exercise_progression(
        exercise.name, exercise.sets, all_workouts(db), exercise.workout_id
    )


@router.get("/workouts/{workout_id}/progression", response_model=WorkoutProgressionSummary)
def get_workout_progression(
    workout_id: uuid.UUID,
    db: Session = Depends(get_db),
):
    """Progression of every weighted exercise in the workout."""
    workout = get_workout_or_404(db, workout_id)
    return ghost_sets.workout_progression_summary(workout.exercises, all_workouts(db), workout.id)
