"""Workout CRUD endpoints, plus per-workout lookup, validation and strength views."""

from __future__ import annotations

import uuid
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from voicelift.core.enums import ExerciseCategory
from voicelift.db.session import get_db
from voicelift.models import Exercise, ExerciseSet, Workout
from voicelift.schemas.exercise import ExerciseCreate, ExerciseRead, ExerciseSetCreate
from voicelift.schemas.stats import ExerciseStrength, WorkoutStrength
from voicelift.schemas.validation import ValidationIssue
from voicelift.schemas.workout import (
    WorkoutCreate,
    WorkoutRead,
    WorkoutReadWithExercises,
    WorkoutUpdate,
)
from voicelift.services import strength, validation

router = APIRouter()


def _workout_query():
    return select(Workout).options(
        selectinload(Workout.exercises).selectinload(Exercise.sets),
        selectinload(Workout.media),
    )


def all_workouts(db: Session) -> list[Workout]:
    """Every workout with exercises, sets and media loaded, oldest first."""
    return list(db.execute(_workout_query().order_by(Workout.date)).scalars().all())


def get_workout_or_404(db: Session, workout_id: uuid.UUID) -> Workout:
    workout = db.execute(_workout_query().where(Workout.id == workout_id)).scalar_one_or_none()
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")
    return workout


def build_set(payload: ExerciseSetCreate, default_number: int) -> ExerciseSet:
    data = payload.model_dump()
    if data["set_number"] is None:
        data["set_number"] = default_number
    return ExerciseSet(**data)


def build_exercise(payload: ExerciseCreate) -> Exercise:
    """Exercise with its sets; sets without a number are numbered after the previous one."""
    exercise = Exercise(**payload.model_dump(exclude={"sets"}))
    for set_payload in payload.sets:
        next_number = max((s.set_number for s in exercise.sets), default=0) + 1
        exercise.sets.append(build_set(set_payload, next_number))
    return exercise


@router.get("", response_model=list[WorkoutRead])
def list_workouts(
    db: Session = Depends(get_db),
    skip: int = 0,
    limit: int = 50,
    from_date: datetime | None = None,
    to_date: datetime | None = None,
):
    """List workouts newest first, optionally filtered by date range."""
    stmt = _workout_query()
    if from_date:
        stmt = stmt.where(Workout.date >= from_date)
    if to_date:
        stmt = stmt.where(Workout.date <= to_date)
    stmt = stmt.order_by(Workout.date.desc()).offset(skip).limit(limit)
    return db.execute(stmt).scalars().all()


@router.post("", response_model=WorkoutReadWithExercises, status_code=201)
def create_workout(
    payload: WorkoutCreate,
    db: Session = Depends(get_db),
):
    """Log a workout, optionally with its exercises and sets in one request."""
    data = payload.model_dump(exclude={"exercises"}, exclude_none=True)
    workout = Workout(**data)
    workout.exercises = [build_exercise(e) for e in payload.exercises]
    db.add(workout)
    db.flush()
    return workout


@router.get("/{workout_id}", response_model=WorkoutReadWithExercises)
def get_workout(
    workout_id: uuid.UUID,
    db: Session = Depends(get_db),
):
    """Workout with exercises, sets, media and aggregates."""
    return get_workout_or_404(db, workout_id)


@router.patch("/{workout_id}", response_model=WorkoutReadWithExercises)
def update_workout(
    workout_id: uuid.UUID,
    payload: WorkoutUpdate,
    db: Session = Depends(get_db),
):
    """Update date, notes or transcription."""
    workout = get_workout_or_404(db, workout_id)
    for k, v in payload.model_dump(exclude_unset=True).items():
        setattr(workout, k, v)
    db.flush()
    return workout


@router.delete("/{workout_id}", status_code=204)
def delete_workout(
    workout_id: uuid.UUID,
    db: Session = Depends(get_db),
):
    """Delete a workout with its exercises, sets and media records (files stay on disk)."""
    workout = get_workout_or_404(db, workout_id)
    db.delete(workout)
    return None


@router.post("/{workout_id}/exercises", response_model=ExerciseRead, status_code=201)
def add_exercise(
    workout_id: uuid.UUID,
    payload: ExerciseCreate,
    db: Session = Depends(get_db),
):
    """Add an exercise (and optional sets) to a workout."""
    workout = get_workout_or_404(db, workout_id)
    exercise = build_exercise(payload)
    workout.exercises.append(exercise)
    db.flush()
    return exercise


@router.get("/{workout_id}/exercises/lookup", response_model=ExerciseRead)
def lookup_exercise(
    workout_id: uuid.UUID,
    name: str,
    db: Session = Depends(get_db),
):
    """Find an exercise in the workout by name (case-insensitive)."""
    workout = get_workout_or_404(db, workout_id)
    exercise = workout.exercise_named(name)
    if exercise is None:
        raise HTTPException(status_code=404, detail=f"No exercise named {name!r} in this workout")
    return exercise


@router.get("/{workout_id}/validation", response_model=list[ValidationIssue])
def validate_workout(
    workout_id: uuid.UUID,
    db: Session = Depends(get_db),
):
    """Suspicious weights (bar-only, implausibly high, below the bar)."""
    workout = get_workout_or_404(db, workout_id)
    return validation.validate_all(workout.exercises)


@router.get("/{workout_id}/strength", response_model=WorkoutStrength)
def workout_strength(
    workout_id: uuid.UUID,
    db: Session = Depends(get_db),
):
    """Estimated 1RM per weighted exercise and the session strength score."""
    workout = get_workout_or_404(db, workout_id)
    exercises = [
        ExerciseStrength(
            name=e.name,
            average_one_rep_max=round(strength.average_one_rep_max(e.sets), 1),
            best_one_rep_max=round(max((strength.set_one_rep_max(s) for s in e.sets), default=0.0), 1),
        )
        for e in workout.exercises
        if e.category == ExerciseCategory.WEIGHTED and e.sets
    ]
    return WorkoutStrength(
        workout_id=workout.id,
        strength_score=round(strength.session_strength_score(workout.exercises), 1),
        exercises=exercises,
    )
