"""ExerciseSet model - one performed set (e.g. 10 reps at 135 lbs)."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, Float, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from voicelift.core.constants import LBS_PER_KG
from voicelift.core.enums import GripType, SetType, StanceType, WeightUnit, enum_values, from_raw
from voicelift.core.formatting import format_weight
from voicelift.db.base import Base


class ExerciseSet(Base):
    """A single set: reps/weight/unit, optional duration for timed exercises, set type
    and optional intensity details (RPE, RIR, rest, tempo, grip, stance).

    Grip and stance are stored as raw strings and parsed on read; an unknown stored
    value reads as None.
    """

    __tablename__ = "exercise_sets"
    __table_args__ = (Index("ix_exercise_sets_exercise_id", "exercise_id"),)

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    exercise_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False
    )
    set_number: Mapped[int] = mapped_column(Integer, nullable=False)
    reps: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    weight: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    unit: Mapped[WeightUnit] = mapped_column(
        Enum(WeightUnit, values_callable=enum_values, native_enum=False),
        nullable=False,
        default=WeightUnit.LBS,
    )
    duration: Mapped[int | None] = mapped_column(Integer, nullable=True)  # seconds, timed exercises
    set_type: Mapped[SetType] = mapped_column(
        Enum(SetType, values_callable=enum_values, native_enum=False),
        nullable=False,
        default=SetType.NORMAL,
        server_default=SetType.NORMAL.value,
    )

    # Intensity & execution (all optional, RPE is not range checked here)
    rpe: Mapped[int | None] = mapped_column(Integer, nullable=True)
    rir: Mapped[int | None] = mapped_column(Integer, nullable=True)
    rest_time: Mapped[int | None] = mapped_column(Integer, nullable=True)  # seconds
    tempo: Mapped[str | None] = mapped_column(String(20), nullable=True)  # e.g. "3-1-2-0"
    grip_type_raw: Mapped[str | None] = mapped_column(String(20), nullable=True)
    stance_type_raw: Mapped[str | None] = mapped_column(String(20), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)
    )

    exercise: Mapped["Exercise"] = relationship("Exercise", back_populates="sets")

    def __init__(self, **kwargs):
        # Column defaults only apply at flush; computed properties need them in memory.
        kwargs.setdefault("id", uuid.uuid4())
        kwargs.setdefault("reps", 0)
        kwargs.setdefault("weight", 0.0)
        kwargs.setdefault("unit", WeightUnit.LBS)
        kwargs.setdefault("set_type", SetType.NORMAL)
        kwargs.setdefault("created_at", datetime.now(timezone.utc))
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return f"<ExerciseSet #{self.set_number} {self.reps}x{self.weight:g} {self.unit.value}>"

    @property
    def grip_type(self) -> GripType | None:
        return from_raw(GripType, self.grip_type_raw)

    @grip_type.setter
    def grip_type(self, value: GripType | None) -> None:
        self.grip_type_raw = value.value if value is not None else None

    @property
    def stance_type(self) -> StanceType | None:
        return from_raw(StanceType, self.stance_type_raw)

    @stance_type.setter
    def stance_type(self, value: StanceType | None) -> None:
        self.stance_type_raw = value.value if value is not None else None

    @property
    def volume(self) -> float:
        """weight × reps, in the stored unit."""
        return self.weight * self.reps

    @property
    def weight_in_pounds(self) -> float:
        if self.unit == WeightUnit.KG:
            return self.weight * LBS_PER_KG
        return self.weight

    @property
    def weight_in_kilograms(self) -> float:
        if self.unit == WeightUnit.LBS:
            return self.weight / LBS_PER_KG
        return self.weight

    @property
    def formatted_weight(self) -> str:
        return format_weight(self.weight, self.unit)
