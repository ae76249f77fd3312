"""Bundled exercise catalog used for name/equipment/muscle suggestions."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path

from pydantic import TypeAdapter

from voicelift.core.config import get_settings
from voicelift.schemas.catalog import CatalogEntry

logger = logging.getLogger(__name__)

BUNDLED_CATALOG = Path(__file__).resolve().parent.parent / "data" / "exercise_database.json"

_entries_adapter = TypeAdapter(list[CatalogEntry])


def load_catalog(path: Path | None = None) -> list[CatalogEntry]:
    """Parse a catalog file (the bundled one unless a path is given)."""
    path = path or BUNDLED_CATALOG
    with path.open(encoding="utf-8") as fh:
        entries = _entries_adapter.validate_python(json.load(fh))
    logger.debug("Loaded %d catalog entries from %s", len(entries), path)
    return entries


@lru_cache
def get_catalog() -> tuple[CatalogEntry, ...]:
    """Catalog from settings.exercise_catalog_path (or the bundled file), loaded once."""
    return tuple(load_catalog(get_settings().exercise_catalog_path))


def search(entries: tuple[CatalogEntry, ...] | list[CatalogEntry], query: str, limit: int = 10) -> list[CatalogEntry]:
    """Case-insensitive substring match; names starting with the query come first."""
    q = query.strip().lower()
    if not q:
        return list(entries[:limit])
    matches = [e for e in entries if q in e.name.lower()]
    matches.sort(key=lambda e: (not e.name.lower().startswith(q), e.name))
    return matches[:limit]
