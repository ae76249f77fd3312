"""Ghost sets: what was lifted last time, and how today compares.

A previous session is the most recent other workout containing an exercise with
the same name (case-insensitive). Progression compares today's average E1RM
against a trimmed average of every earlier session of that exercise.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Sequence

from voicelift.core.enums import ExerciseCategory, ProgressionTrend
from voicelift.models import Exercise, ExerciseSet, Workout
from voicelift.schemas.progression import (
    ExerciseProgression,
    GhostExercise,
    GhostSet,
    SetComparison,
    WorkoutProgressionSummary,
)
from voicelift.services import strength

MIN_SESSIONS_FOR_PROGRESSION = 3
TREND_BAND_PCT = 3.0


def _ghost_set(set_: ExerciseSet, workout: Workout) -> GhostSet:
    if set_.weight > 0:
        display = f"{set_.reps} × {int(set_.weight)} {set_.unit.value}"
    else:
        display = f"{set_.reps} reps"
    return GhostSet(
        set_number=set_.set_number,
        reps=set_.reps,
        weight=set_.weight,
        unit=set_.unit,
        e1rm=strength.set_one_rep_max(set_),
        date=workout.date,
        display=display,
    )


def find_previous_session(
    name: str,
    workouts: Iterable[Workout],
    exclude_workout_id: uuid.UUID | None = None,
) -> GhostExercise | None:
    """Sets of `name` from the most recent workout other than exclude_workout_id."""
    candidates = sorted(
        (w for w in workouts if w.id != exclude_workout_id),
        key=lambda w: w.date,
        reverse=True,
    )
    for workout in candidates:
        exercise = workout.exercise_named(name)
        if exercise is None:
            continue
        return GhostExercise(
            exercise_name=exercise.name,
            workout_id=workout.id,
            date=workout.date,
            sets=[_ghost_set(s, workout) for s in exercise.sorted_sets],
            average_e1rm=strength.average_one_rep_max(exercise.sets),
        )
    return None


def find_previous_sessions(
    names: Iterable[str],
    workouts: Sequence[Workout],
    exclude_workout_id: uuid.UUID | None = None,
) -> dict[str, GhostExercise]:
    """Previous sessions keyed by lowercased name; names never logged before are left out."""
    result = {}
    for name in names:
        ghost = find_previous_session(name, workouts, exclude_workout_id)
        if ghost is not None:
            result[name.lower()] = ghost
    return result


def improvement_display(improvement: float) -> str:
    if improvement > 0:
        return f"+{improvement:.1f}%"
    if improvement < 0:
        return f"{improvement:.1f}%"
    return "Same"


def compare_set(current: ExerciseSet, ghost: GhostSet) -> SetComparison:
    current_e1rm = strength.set_one_rep_max(current)
    improvement = strength.improvement(current_e1rm, ghost.e1rm)
    return SetComparison(
        set_number=current.set_number,
        current_e1rm=current_e1rm,
        previous_e1rm=ghost.e1rm,
        improvement=improvement,
        improvement_display=improvement_display(improvement),
        is_personal_best=strength.is_personal_best(current_e1rm, ghost.e1rm),
    )


def compare_sets(exercise: Exercise, ghost: GhostExercise) -> list[SetComparison]:
    """Pair sets by position (first with first, ...); extra sets on either side are skipped."""
    return [compare_set(current, previous) for current, previous in zip(exercise.sorted_sets, ghost.sets)]


def _trend(percentage_change: float) -> ProgressionTrend:
    if percentage_change > TREND_BAND_PCT:
        return ProgressionTrend.IMPROVING
    if percentage_change < -TREND_BAND_PCT:
        return ProgressionTrend.DECLINING
    return ProgressionTrend.MAINTAINING


def trimmed_average(values: Sequence[float]) -> float:
    """Mean after dropping 10% (at least one value) from each end; plain mean if nothing is left."""
    ordered = sorted(values)
    trim = max(1, len(ordered) // 10)
    trimmed = ordered[trim:len(ordered) - trim]
    kept = trimmed or ordered
    return sum(kept) / len(kept)


def exercise_progression(
    name: str,
    current_sets: Sequence[ExerciseSet],
    workouts: Iterable[Workout],
    exclude_workout_id: uuid.UUID | None = None,
) -> ExerciseProgression:
    """Compare current_sets with every other session of `name` that has sets."""
    history = []
    for workout in workouts:
        if workout.id == exclude_workout_id:
            continue
        exercise = workout.exercise_named(name)
        if exercise is not None and exercise.sets:
            history.append(strength.average_one_rep_max(exercise.sets))

    current = strength.average_one_rep_max(current_sets)
    session_count = len(history)
    if session_count < MIN_SESSIONS_FOR_PROGRESSION:
        trend = ProgressionTrend.INSUFFICIENT_DATA
        historical = 0.0
        change = 0.0
    else:
        historical = trimmed_average(history)
        change = (current - historical) / historical * 100 if historical > 0 else 0.0
        trend = _trend(change)

    return ExerciseProgression(
        exercise_name=name,
        current_e1rm=current,
        historical_average_e1rm=historical,
        session_count=session_count,
        trend=trend,
        trend_description=trend.description,
        percentage_change=change,
        has_enough_data=session_count >= MIN_SESSIONS_FOR_PROGRESSION,
    )


def workout_progression_summary(
    exercises: Iterable[Exercise],
    workouts: Sequence[Workout],
    exclude_workout_id: uuid.UUID | None = None,
) -> WorkoutProgressionSummary:
    """Progression of every weighted exercise with sets, plus an overall trend."""
    progressions = [
        exercise_progression(e.name, e.sets, workouts, exclude_workout_id)
        for e in exercises
        if e.category == ExerciseCategory.WEIGHTED and e.sets
    ]
    ready = [p for p in progressions if p.has_enough_data]
    if ready:
        average_change = sum(p.percentage_change for p in ready) / len(ready)
        overall = _trend(average_change)
    else:
        average_change = 0.0
        overall = ProgressionTrend.INSUFFICIENT_DATA

    if not progressions:
        message = "Add weighted exercises to track progression"
    elif not ready:
        message = (
            "Keep training! Progression insights unlock after "
            f"{MIN_SESSIONS_FOR_PROGRESSION} sessions per exercise."
        )
    else:
        message = f"{len(ready)} of {len(progressions)} exercises have progression data"

    return WorkoutProgressionSummary(
        progressions=progressions,
        exercises_with_enough_data=len(ready),
        total_exercises=len(progressions),
        overall_trend=overall,
        average_percentage_change=average_change,
        message=message,
    )
