"""Aggregated statistics across workouts."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from voicelift.api.v1.endpoints.workouts import all_workouts
from voicelift.core.formatting import volume_string
from voicelift.db.session import get_db
from voicelift.schemas.stats import ExerciseProgress, ProgressPoint, StatsOverview
from voicelift.services import strength

router = APIRouter()


@router.get("/overview", response_model=StatsOverview)
def stats_overview(db: Session = Depends(get_db)):
    """Totals over every logged workout. Volume adds lbs and kg sets as logged."""
    workouts = all_workouts(db)
    total_volume = sum(w.total_volume for w in workouts)
    return StatsOverview(
        total_workouts=len(workouts),
        total_exercises=sum(w.exercise_count for w in workouts),
        total_sets=sum(w.total_sets for w in workouts),
        total_reps=sum(w.total_reps for w in workouts),
        total_volume=total_volume,
        volume_display=volume_string(total_volume),
        last_workout_date=workouts[-1].date if workouts else None,
    )


@router.get("/exercises/progress", response_model=ExerciseProgress)
def exercise_progress(
    name: str,
    db: Session = Depends(get_db),
):
    """Per-workout progress for one exercise (matched by name, case-insensitive), oldest first."""
    points: list[ProgressPoint] = []
    best = 0.0
    previous = 0.0
    for workout in all_workouts(db):
        exercise = workout.exercise_named(name)
        if exercise is None or not exercise.sets:
            continue
        e1rm = strength.average_one_rep_max(exercise.sets)
        points.append(ProgressPoint(
            workout_id=workout.id,
            date=workout.date,
            max_weight=exercise.max_weight,
            total_volume=exercise.total_volume,
            average_one_rep_max=round(e1rm, 1),
            improvement_pct=round(strength.improvement(e1rm, previous), 1),
            is_personal_best=bool(points) and strength.is_personal_best(e1rm, best),
        ))
        best = max(best, e1rm)
        previous = e1rm
    if not points:
        raise HTTPException(status_code=404, detail=f"No sets logged for {name!r}")
    return ExerciseProgress(name=name, points=points)
