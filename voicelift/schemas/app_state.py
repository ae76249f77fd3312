"""App state update schema (reads use voicelift.core.app_state.AppState)."""

from pydantic import BaseModel, Field


class AppStateUpdate(BaseModel):
    has_completed_onboarding: bool | None = None
    notifications_enabled: bool | None = None
    reminder_hour: int | None = Field(None, ge=0, le=23)
    reminder_minute: int | None = Field(None, ge=0, le=59)
