"""WorkoutMedia model - a photo or video file attached to a workout."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from pathlib import Path

from sqlalchemy import DateTime, Enum, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from voicelift.core.config import get_settings
from voicelift.core.enums import MediaType, enum_values
from voicelift.db.base import Base


class WorkoutMedia(Base):
    """Reference to a media file stored under <documents>/WorkoutMedia/<filename>.

    Only the filename is persisted. If the file is removed outside the app the row
    still exists and file_exists reports False.
    """

    __tablename__ = "workout_media"
    __table_args__ = (Index("ix_workout_media_workout_id", "workout_id"),)

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    workout_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("workouts.id", ondelete="CASCADE"), nullable=True
    )
    filename: Mapped[str] = mapped_column(String(255), nullable=False)
    media_type: Mapped[MediaType] = mapped_column(
        Enum(MediaType, values_callable=enum_values, native_enum=False), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)
    )
    caption: Mapped[str | None] = mapped_column(String(500), nullable=True)

    workout: Mapped["Workout | None"] = relationship("Workout", back_populates="media")

    def __init__(self, **kwargs):
        kwargs.setdefault("id", uuid.uuid4())
        kwargs.setdefault("created_at", datetime.now(timezone.utc))
        super().__init__(**kwargs)

    def path_in(self, media_dir: Path | None) -> Path | None:
        return media_dir / self.filename if media_dir is not None else None

    @property
    def file_path(self) -> Path | None:
        """Full path of the file, or None if the documents root can't be resolved."""
        return self.path_in(get_settings().media_dir)

    @property
    def file_exists(self) -> bool:
        path = self.file_path
        return path is not None and path.is_file()
