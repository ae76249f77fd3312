"""Exercise and set endpoints (exercises are created through /workouts/{id}/exercises)."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from voicelift.api.v1.endpoints.workouts import build_set
from voicelift.db.session import get_db
from voicelift.models import Exercise, ExerciseSet
from voicelift.schemas.exercise import (
    ExerciseRead,
    ExerciseSetCreate,
    ExerciseSetRead,
    ExerciseSetUpdate,
    ExerciseUpdate,
)
from voicelift.schemas.validation import ValidationIssue
from voicelift.services import validation

router = APIRouter()
sets_router = APIRouter()

# Columns that can't be cleared with an explicit null in a PATCH
_REQUIRED_SET_FIELDS = ("set_number", "reps", "weight", "unit", "set_type")


def get_exercise_or_404(db: Session, exercise_id: uuid.UUID) -> Exercise:
    result = db.execute(
        select(Exercise).where(Exercise.id == exercise_id).options(selectinload(Exercise.sets))
    )
    exercise = result.scalar_one_or_none()
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise


def _get_set_or_404(db: Session, set_id: uuid.UUID) -> ExerciseSet:
    set_ = db.get(ExerciseSet, set_id)
    if not set_:
        raise HTTPException(status_code=404, detail="Set not found")
    return set_


@router.get("/{exercise_id}", response_model=ExerciseRead)
def get_exercise(
    exercise_id: uuid.UUID,
    db: Session = Depends(get_db),
):
    """Exercise with sets and aggregates."""
    return get_exercise_or_404(db, exercise_id)


@router.patch("/{exercise_id}", response_model=ExerciseRead)
def update_exercise(
    exercise_id: uuid.UUID,
    payload: ExerciseUpdate,
    db: Session = Depends(get_db),
):
    """Update an exercise (partial). Category/equipment/muscles are written as raw strings."""
    exercise = get_exercise_or_404(db, exercise_id)
    for k, v in payload.model_dump(exclude_unset=True).items():
        if v is None and k in ("category", "equipment", "primary_muscles"):
            # Clearing falls back to the read defaults
            setattr(exercise, f"{k}_raw", None)
            continue
        if v is None and k == "name":
            continue
        setattr(exercise, k, v)
    db.flush()
    return exercise


@router.delete("/{exercise_id}", status_code=204)
def delete_exercise(
    exercise_id: uuid.UUID,
    db: Session = Depends(get_db),
):
    """Delete an exercise and its sets."""
    exercise = get_exercise_or_404(db, exercise_id)
    db.delete(exercise)
    return None


@router.get("/{exercise_id}/validation", response_model=list[ValidationIssue])
def validate_exercise(
    exercise_id: uuid.UUID,
    db: Session = Depends(get_db),
):
    return validation.validate(get_exercise_or_404(db, exercise_id))


@router.post("/{exercise_id}/sets", response_model=ExerciseSetRead, status_code=201)
def add_set(
    exercise_id: uuid.UUID,
    payload: ExerciseSetCreate,
    db: Session = Depends(get_db),
):
    """Add a set. Without set_number it becomes the next number; numbers are never resequenced."""
    exercise = get_exercise_or_404(db, exercise_id)
    next_number = max((s.set_number for s in exercise.sets), default=0) + 1
    set_ = build_set(payload, next_number)
    exercise.sets.append(set_)
    db.flush()
    return set_


@sets_router.get("/{set_id}", response_model=ExerciseSetRead)
def get_set(
    set_id: uuid.UUID,
    db: Session = Depends(get_db),
):
    return _get_set_or_404(db, set_id)


@sets_router.patch("/{set_id}", response_model=ExerciseSetRead)
def update_set(
    set_id: uuid.UUID,
    payload: ExerciseSetUpdate,
    db: Session = Depends(get_db),
):
    """Update an existing set (reps, weight, unit, intensity details)."""
    set_ = _get_set_or_404(db, set_id)
    for k, v in payload.model_dump(exclude_unset=True).items():
        if v is None and k in _REQUIRED_SET_FIELDS:
            continue
        setattr(set_, k, v)
    db.flush()
    return set_


@sets_router.delete("/{set_id}", status_code=204)
def delete_set(
    set_id: uuid.UUID,
    db: Session = Depends(get_db),
):
    """Delete a set; remaining set numbers are left as they are."""
    set_ = _get_set_or_404(db, set_id)
    db.delete(set_)
    return None
