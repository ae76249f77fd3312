"""Workout media endpoints: register or upload files and manage their records."""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session

from voicelift.api.v1.endpoints.workouts import get_workout_or_404
from voicelift.core.enums import MediaType
from voicelift.db.session import get_db
from voicelift.models import WorkoutMedia
from voicelift.schemas.media import WorkoutMediaCreate, WorkoutMediaRead, WorkoutMediaUpdate
from voicelift.services import media_storage

logger = logging.getLogger(__name__)
router = APIRouter()
workout_media_router = APIRouter()


def _get_media_or_404(db: Session, media_id: uuid.UUID) -> WorkoutMedia:
    media = db.get(WorkoutMedia, media_id)
    if not media:
        raise HTTPException(status_code=404, detail="Media not found")
    return media


@workout_media_router.get("/{workout_id}/media", response_model=list[WorkoutMediaRead])
def list_workout_media(
    workout_id: uuid.UUID,
    db: Session = Depends(get_db),
):
    """Media attached to a workout, oldest first. file_exists is checked per item."""
    return get_workout_or_404(db, workout_id).media


@workout_media_router.post("/{workout_id}/media", response_model=WorkoutMediaRead, status_code=201)
def register_media(
    workout_id: uuid.UUID,
    payload: WorkoutMediaCreate,
    db: Session = Depends(get_db),
):
    """Attach a file that is already in the media directory. The file is not checked."""
    workout = get_workout_or_404(db, workout_id)
    media = WorkoutMedia(**payload.model_dump())
    workout.media.append(media)
    db.flush()
    return media


@workout_media_router.post("/{workout_id}/media/upload", response_model=WorkoutMediaRead, status_code=201)
def upload_media(
    workout_id: uuid.UUID,
    file: UploadFile = File(...),
    media_type: MediaType = Form(...),
    caption: str | None = Form(None),
    db: Session = Depends(get_db),
):
    """Store an uploaded photo/video under a generated filename and attach it."""
    workout = get_workout_or_404(db, workout_id)
    try:
        filename = media_storage.save_media(file.file.read(), media_type)
    except media_storage.MediaStorageUnavailable as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    media = WorkoutMedia(filename=filename, media_type=media_type, caption=caption)
    workout.media.append(media)
    db.flush()
    return media


@router.get("/{media_id}", response_model=WorkoutMediaRead)
def get_media(
    media_id: uuid.UUID,
    db: Session = Depends(get_db),
):
    return _get_media_or_404(db, media_id)


@router.get("/{media_id}/file")
def get_media_file(
    media_id: uuid.UUID,
    db: Session = Depends(get_db),
):
    """Serve the file behind a media record; 404 if it has gone missing."""
    media = _get_media_or_404(db, media_id)
    path = media.file_path
    if path is None or not path.is_file():
        raise HTTPException(status_code=404, detail="Media file missing")
    return FileResponse(path)


@router.patch("/{media_id}", response_model=WorkoutMediaRead)
def update_media(
    media_id: uuid.UUID,
    payload: WorkoutMediaUpdate,
    db: Session = Depends(get_db),
):
    media = _get_media_or_404(db, media_id)
    for k, v in payload.model_dump(exclude_unset=True).items():
        setattr(media, k, v)
    db.flush()
    return media


@router.delete("/{media_id}", status_code=204)
def delete_media(
    media_id: uuid.UUID,
    delete_file: bool = False,
    db: Session = Depends(get_db),
):
    """Delete a media record; the file is removed only when delete_file=true."""
    media = _get_media_or_404(db, media_id)
    if delete_file:
        try:
            media_storage.delete_media(media.filename)
        except media_storage.MediaStorageUnavailable:
            logger.warning("Media directory unavailable; %s left on disk", media.filename)
    db.delete(media)
    return None
