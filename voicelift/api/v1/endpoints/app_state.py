"""Onboarding flag and reminder preferences."""

from fastapi import APIRouter, Request

from voicelift.core.app_state import AppState, save_app_state
from voicelift.core.config import get_settings
from voicelift.schemas.app_state import AppStateUpdate

router = APIRouter()


@router.get("", response_model=AppState)
def get_app_state(request: Request):
    return request.app.state.app_state


@router.patch("", response_model=AppState)
def update_app_state(payload: AppStateUpdate, request: Request):
    """Merge the given fields and persist the result."""
    current: AppState = request.app.state.app_state
    updated = current.model_copy(update=payload.model_dump(exclude_unset=True, exclude_none=True))
    save_app_state(updated, get_settings().app_state_path)
    request.app.state.app_state = updated
    return updated
