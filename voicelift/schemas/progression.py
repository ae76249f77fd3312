"""Previous-session (ghost set) and progression schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from voicelift.core.enums import ProgressionTrend, WeightUnit


class GhostSet(BaseModel):
    """A set from the last session of an exercise, shown next to the current one."""

    set_number: int
    reps: int
    weight: float
    unit: WeightUnit
    e1rm: float
    date: datetime
    display: str


class GhostExercise(BaseModel):
    exercise_name: str
    workout_id: UUID
    date: datetime
    sets: list[GhostSet]
    average_e1rm: float


class PreviousSession(BaseModel):
    previous: GhostExercise | None = None
    message: str | None = None


class SetComparison(BaseModel):
    set_number: int
    current_e1rm: float
    previous_e1rm: float
    improvement: float
    improvement_display: str
    is_personal_best: bool


class ExerciseProgression(BaseModel):
    exercise_name: str
    current_e1rm: float
    historical_average_e1rm: float
    session_count: int
    trend: ProgressionTrend
    trend_description: str
    percentage_change: float
    has_enough_data: bool


class WorkoutProgressionSummary(BaseModel):
    progressions: list[ExerciseProgression]
    exercises_with_enough_data: int
    total_exercises: int
    overall_trend: ProgressionTrend
    average_percentage_change: float
    message: str
