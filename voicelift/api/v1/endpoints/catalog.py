"""Exercise catalog suggestions and name normalization."""

from fastapi import APIRouter, Query

from voicelift.schemas.catalog import CatalogEntry, NormalizationResult
from voicelift.services.exercise_catalog import get_catalog, search
from voicelift.services.exercise_normalization import normalize

router = APIRouter()


@router.get("", response_model=list[CatalogEntry])
def search_catalog(
    q: str = "",
    limit: int = Query(10, ge=1, le=100),
):
    """Suggest exercises whose name contains q (prefix matches first)."""
    return search(get_catalog(), q, limit)


@router.get("/normalize", response_model=NormalizationResult)
def normalize_exercise_name(name: str = ""):
    """Canonical name for a spoken or typed exercise ("rdl" -> "Romanian Deadlift")."""
    return normalize(name)
