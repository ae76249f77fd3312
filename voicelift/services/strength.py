"""Estimated one-rep max (Epley) and session strength score.

E1RM = weight × (1 + reps/30), computed in pounds so lbs and kg sets compare.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from voicelift.core.enums import ExerciseCategory
from voicelift.models import Exercise, ExerciseSet


def estimate_one_rep_max(weight: float, reps: int) -> float:
    """Epley estimate; a single (or zero) rep is the weight itself."""
    if reps <= 1:
        return weight
    return weight * (1.0 + reps / 30.0)


def set_one_rep_max(set_: ExerciseSet) -> float:
    return estimate_one_rep_max(set_.weight_in_pounds, set_.reps)


def average_one_rep_max(sets: Sequence[ExerciseSet]) -> float:
    if not sets:
        return 0.0
    return sum(set_one_rep_max(s) for s in sets) / len(sets)


def session_strength_score(exercises: Iterable[Exercise]) -> float:
    """Mean of each weighted exercise's average E1RM; exercises without sets are skipped."""
    weighted = [e for e in exercises if e.category == ExerciseCategory.WEIGHTED and e.sets]
    if not weighted:
        return 0.0
    return sum(average_one_rep_max(e.sets) for e in weighted) / len(weighted)


def improvement(current: float, previous: float) -> float:
    """Percentage change from previous to current (0 without a previous value)."""
    if previous <= 0:
        return 0.0
    return (current - previous) / previous * 100


def is_personal_best(current: float, previous: float, threshold: float = 0) -> bool:
    return current > previous + threshold
