"""Exercise model - a named movement within a workout, owning its sets."""

from __future__ import annotations

import uuid

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from voicelift.core.constants import MUSCLE_SEPARATOR
from voicelift.core.enums import Equipment, ExerciseCategory, MuscleGroup, WeightUnit, from_raw
from voicelift.core.formatting import pluralize
from voicelift.db.base import Base


class Exercise(Base):
    """Exercise performed in a workout.

    Category, equipment and primary muscles are stored as nullable raw strings so rows
    written before those fields existed still load. The typed accessors substitute
    defaults on read (weighted / Other / no muscles) and serialize on write.
    """

    __tablename__ = "exercises"
    __table_args__ = (Index("ix_exercises_workout_id", "workout_id"),)

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    workout_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("workouts.id", ondelete="CASCADE"), nullable=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    category_raw: Mapped[str | None] = mapped_column(String(20), nullable=True)
    equipment_raw: Mapped[str | None] = mapped_column(String(30), nullable=True)
    primary_muscles_raw: Mapped[str | None] = mapped_column(String(255), nullable=True)  # "Chest,Triceps"
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    workout: Mapped["Workout | None"] = relationship("Workout", back_populates="exercises")
    sets: Mapped[list["ExerciseSet"]] = relationship(
        "ExerciseSet",
        back_populates="exercise",
        cascade="all, delete-orphan",
        order_by="ExerciseSet.created_at",
    )

    def __init__(self, **kwargs):
        kwargs.setdefault("id", uuid.uuid4())
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return f"<Exercise {self.name!r} sets={len(self.sets)}>"

    # Typed accessors over the raw columns

    @property
    def category(self) -> ExerciseCategory:
        return from_raw(ExerciseCategory, self.category_raw, ExerciseCategory.WEIGHTED)

    @category.setter
    def category(self, value: ExerciseCategory) -> None:
        self.category_raw = ExerciseCategory(value).value

    @property
    def equipment(self) -> Equipment:
        return from_raw(Equipment, self.equipment_raw, Equipment.OTHER)

    @equipment.setter
    def equipment(self, value: Equipment) -> None:
        self.equipment_raw = Equipment(value).value

    @property
    def primary_muscles(self) -> list[MuscleGroup]:
        """Muscles parsed from the raw list; unknown entries are dropped."""
        tokens = (self.primary_muscles_raw or "").split(MUSCLE_SEPARATOR)
        parsed = (from_raw(MuscleGroup, token.strip()) for token in tokens if token.strip())
        return [muscle for muscle in parsed if muscle is not None]

    @primary_muscles.setter
    def primary_muscles(self, value: list[MuscleGroup]) -> None:
        self.primary_muscles_raw = MUSCLE_SEPARATOR.join(MuscleGroup(m).value for m in value)

    # Aggregates (0 for no sets)

    @property
    def total_volume(self) -> float:
        # Sums each set in its own unit; mixed lbs/kg sets are not normalized.
        return sum((s.volume for s in self.sets), 0.0)

    @property
    def total_reps(self) -> int:
        return sum(s.reps for s in self.sets)

    @property
    def total_sets(self) -> int:
        return len(self.sets)

    @property
    def total_duration(self) -> int:
        """Seconds across timed sets."""
        return sum(s.duration or 0 for s in self.sets)

    @property
    def max_weight(self) -> float:
        return max((s.weight for s in self.sets), default=0.0)

    @property
    def max_reps(self) -> int:
        return max((s.reps for s in self.sets), default=0)

    @property
    def is_bodyweight(self) -> bool:
        return self.category == ExerciseCategory.BODYWEIGHT

    @property
    def sorted_sets(self) -> list["ExerciseSet"]:
        return sorted(self.sets, key=lambda s: s.set_number)

    @property
    def summary(self) -> str:
        """e.g. '3 sets • 24 reps • max 175 lbs' or '3 sets • 30 total reps' for bodyweight."""
        sets_text = pluralize(len(self.sets), "set")
        if self.is_bodyweight:
            return f"{sets_text} • {self.total_reps} total reps"
        unit = self.sets[0].unit if self.sets else WeightUnit.LBS
        return f"{sets_text} • {self.total_reps} reps • max {int(self.max_weight)} {WeightUnit(unit).value}"
