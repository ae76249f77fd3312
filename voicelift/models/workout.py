"""Workout model - a session owning its exercises and media."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from voicelift.core.formatting import pluralize
from voicelift.db.base import Base


class Workout(Base):
    """A single workout session. Deleting it deletes its exercises (and their sets) and media rows."""

    __tablename__ = "workouts"
    __table_args__ = (Index("ix_workouts_date", "date"),)

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    raw_transcription: Mapped[str | None] = mapped_column(Text, nullable=True)

    exercises: Mapped[list["Exercise"]] = relationship(
        "Exercise", back_populates="workout", cascade="all, delete-orphan"
    )
    media: Mapped[list["WorkoutMedia"]] = relationship(
        "WorkoutMedia",
        back_populates="workout",
        cascade="all, delete-orphan",
        order_by="WorkoutMedia.created_at",
    )

    def __init__(self, **kwargs):
        kwargs.setdefault("id", uuid.uuid4())
        kwargs.setdefault("date", datetime.now(timezone.utc))
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return f"<Workout {self.id} {self.date:%Y-%m-%d} exercises={len(self.exercises)}>"

    @property
    def media_count(self) -> int:
        return len(self.media)

    @property
    def has_media(self) -> bool:
        return bool(self.media)

    @property
    def exercise_count(self) -> int:
        return len(self.exercises)

    @property
    def total_volume(self) -> float:
        return sum((e.total_volume for e in self.exercises), 0.0)

    @property
    def total_sets(self) -> int:
        return sum(len(e.sets) for e in self.exercises)

    @property
    def total_reps(self) -> int:
        return sum(e.total_reps for e in self.exercises)

    @property
    def formatted_date(self) -> str:
        """e.g. 'Oct 18, 2026'."""
        return f"{self.date:%b} {self.date.day}, {self.date.year}"

    @property
    def formatted_time(self) -> str:
        """e.g. '7:30 AM'."""
        return self.date.strftime("%I:%M %p").lstrip("0")

    @property
    def summary(self) -> str:
        return (
            f"{pluralize(self.exercise_count, 'exercise')} • {self.total_sets} sets • "
            f"{int(self.total_volume)} lbs volume"
        )

    def exercise_named(self, name: str) -> "Exercise | None":
        """First exercise whose name matches case-insensitively, or None."""
        wanted = name.lower()
        return next((e for e in self.exercises if e.name.lower() == wanted), None)

    def contains_exercise(self, name: str) -> bool:
        return self.exercise_named(name) is not None
