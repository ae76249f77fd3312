"""Statistics schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel


class StatsOverview(BaseModel):
    total_workouts: int
    total_exercises: int
    total_sets: int
    total_reps: int
    total_volume: float
    volume_display: str
    last_workout_date: datetime | None = None


class ExerciseStrength(BaseModel):
    name: str
    average_one_rep_max: float
    best_one_rep_max: float


class WorkoutStrength(BaseModel):
    workout_id: UUID
    strength_score: float
    exercises: list[ExerciseStrength]


class ProgressPoint(BaseModel):
    workout_id: UUID
    date: datetime
    max_weight: float
    total_volume: float
    average_one_rep_max: float
    improvement_pct: float
    is_personal_best: bool


class ExerciseProgress(BaseModel):
    name: str
    points: list[ProgressPoint]
