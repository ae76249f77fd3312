"""Exercise and ExerciseSet schemas."""

from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from voicelift.core.enums import (
    Equipment,
    ExerciseCategory,
    GripType,
    MuscleGroup,
    SetType,
    StanceType,
    WeightUnit,
)


class ExerciseSetBase(BaseModel):
    set_number: int | None = Field(None, ge=1)  # next number in the exercise when omitted
    reps: int = Field(0, ge=0)
    weight: float = Field(0.0, ge=0)
    unit: WeightUnit = WeightUnit.LBS
    duration: int | None = Field(None, ge=0)
    set_type: SetType = SetType.NORMAL
    rpe: int | None = None
    rir: int | None = None
    rest_time: int | None = Field(None, ge=0)
    tempo: str | None = Field(None, max_length=20)
    grip_type: GripType | None = None
    stance_type: StanceType | None = None


class ExerciseSetCreate(ExerciseSetBase):
    pass


class ExerciseSetUpdate(BaseModel):
    set_number: int | None = Field(None, ge=1)
    reps: int | None = Field(None, ge=0)
    weight: float | None = Field(None, ge=0)
    unit: WeightUnit | None = None
    duration: int | None = None
    set_type: SetType | None = None
    rpe: int | None = None
    rir: int | None = None
    rest_time: int | None = None
    tempo: str | None = Field(None, max_length=20)
    grip_type: GripType | None = None
    stance_type: StanceType | None = None


class ExerciseSetRead(ExerciseSetBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    exercise_id: UUID
    set_number: int
    volume: float
    weight_in_pounds: float
    weight_in_kilograms: float
    formatted_weight: str


class ExerciseBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    category: ExerciseCategory = ExerciseCategory.WEIGHTED
    equipment: Equipment = Equipment.OTHER
    primary_muscles: list[MuscleGroup] = []
    notes: str | None = None


class ExerciseCreate(ExerciseBase):
    sets: list[ExerciseSetCreate] = []


class ExerciseUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    category: ExerciseCategory | None = None
    equipment: Equipment | None = None
    primary_muscles: list[MuscleGroup] | None = None
    notes: str | None = None


class ExerciseRead(ExerciseBase):
    """Exercise with its sets (ordered by set number) and aggregates."""

    model_config = ConfigDict(from_attributes=True)
    id: UUID
    workout_id: UUID | None = None
    total_volume: float
    total_reps: int
    max_weight: float
    max_reps: int
    summary: str
    sets: list[ExerciseSetRead] = Field([], validation_alias=AliasChoices("sorted_sets", "sets"))
