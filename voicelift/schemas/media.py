"""WorkoutMedia schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from voicelift.core.enums import MediaType


class WorkoutMediaCreate(BaseModel):
    """Register a file that already exists in the media directory."""

    filename: str = Field(..., min_length=1, max_length=255, pattern=r"^[^/\\]+$")
    media_type: MediaType
    caption: str | None = Field(None, max_length=500)

    @field_validator("filename")
    @classmethod
    def filename_is_a_file_name(cls, value: str) -> str:
        if value in (".", ".."):
            raise ValueError("filename must name a file inside the media directory")
        return value


class WorkoutMediaUpdate(BaseModel):
    caption: str | None = Field(None, max_length=500)


class WorkoutMediaRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    workout_id: UUID | None = None
    filename: str
    media_type: MediaType
    created_at: datetime
    caption: str | None = None
    file_exists: bool
