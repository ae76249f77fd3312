"""Process-wide app state (onboarding flag, reminder preference).

Loaded once at startup and handed to the API through app.state; endpoints that
change it write it back with save_app_state.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class AppState(BaseModel):
    has_completed_onboarding: bool = False
    notifications_enabled: bool = False
    reminder_hour: int = Field(20, ge=0, le=23)
    reminder_minute: int = Field(0, ge=0, le=59)


def load_app_state(path: Path | None) -> AppState:
    """Read state from path; defaults when there is no file or it can't be parsed."""
    if path is None or not path.exists():
        return AppState()
    try:
        return AppState.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as exc:
        logger.warning("Ignoring unreadable app state at %s: %s", path, exc)
        return AppState()


def save_app_state(state: AppState, path: Path | None) -> None:
    if path is None:
        logger.warning("No documents directory; app state not saved")
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(state.model_dump_json(indent=2), encoding="utf-8")
