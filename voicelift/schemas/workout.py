"""Workout schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from voicelift.schemas.exercise import ExerciseCreate, ExerciseRead
from voicelift.schemas.media import WorkoutMediaRead


class WorkoutBase(BaseModel):
    notes: str | None = None
    raw_transcription: str | None = None


class WorkoutCreate(WorkoutBase):
    date: datetime | None = None
    exercises: list[ExerciseCreate] = []


class WorkoutUpdate(BaseModel):
    date: datetime | None = None
    notes: str | None = None
    raw_transcription: str | None = None

    @field_validator("date")
    @classmethod
    def date_not_null(cls, value: datetime | None) -> datetime:
        # Omit date to keep it; a workout always has one
        if value is None:
            raise ValueError("date cannot be null")
        return value


class WorkoutRead(WorkoutBase):
    """List view: aggregates only, no nested exercises."""

    model_config = ConfigDict(from_attributes=True)
    id: UUID
    date: datetime
    exercise_count: int
    total_sets: int
    total_reps: int
    total_volume: float
    media_count: int
    summary: str


class WorkoutReadWithExercises(WorkoutRead):
    """Detail view with exercises, sets and media."""

    formatted_date: str
    formatted_time: str
    exercises: list[ExerciseRead] = []
    media: list[WorkoutMediaRead] = []
