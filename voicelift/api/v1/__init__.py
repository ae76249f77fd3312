"""API v1 router aggregation."""

from fastapi import APIRouter

from voicelift.api.v1.endpoints import (
    app_state,
    catalog,
    exercises,
    health,
    media,
    previous_session,
    stats,
    tools,
    workouts,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(workouts.router, prefix="/workouts", tags=["workouts"])
api_router.include_router(media.workout_media_router, prefix="/workouts", tags=["media"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
api_router.include_router(exercises.sets_router, prefix="/sets", tags=["sets"])
api_router.include_router(previous_session.router, tags=["progression"])
api_router.include_router(media.router, prefix="/media", tags=["media"])
api_router.include_router(catalog.router, prefix="/catalog", tags=["catalog"])
api_router.include_router(stats.router, prefix="/stats", tags=["stats"])
api_router.include_router(app_state.router, prefix="/app-state", tags=["app-state"])
api_router.include_router(tools.router, prefix="/tools", tags=["tools"])
