"""Map spoken or typed exercise names ("rdl", "flat bench") to canonical names.

Exact alias hits win, then the closest alias within FUZZY_MAX_DISTANCE edits.
Anything else is unrecognized and comes back with the nearest canonical names.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path

from rapidfuzz import process
from rapidfuzz.distance import Levenshtein

from voicelift.core.enums import MatchConfidence
from voicelift.schemas.catalog import NormalizationResult

ALIASES_PATH = Path(__file__).resolve().parent.parent / "data" / "exercise_aliases.json"

FUZZY_MAX_DISTANCE = 3
SUGGESTION_LIMIT = 3


@lru_cache
def get_aliases() -> dict[str, str]:
    """Lowercase alias -> canonical name."""
    with ALIASES_PATH.open(encoding="utf-8") as fh:
        return json.load(fh)


@lru_cache
def canonical_names() -> tuple[str, ...]:
    return tuple(sorted(set(get_aliases().values())))


def normalize(name: str) -> NormalizationResult:
    key = name.strip().lower()
    if not key:
        return NormalizationResult(original_input=name, confidence=MatchConfidence.UNRECOGNIZED)

    aliases = get_aliases()
    if key in aliases:
        return NormalizationResult(
            original_input=name, canonical_name=aliases[key], confidence=MatchConfidence.EXACT
        )
    if name.strip() in canonical_names():
        return NormalizationResult(
            original_input=name, canonical_name=name.strip(), confidence=MatchConfidence.EXACT
        )

    match = process.extractOne(
        key, list(aliases), scorer=Levenshtein.distance, score_cutoff=FUZZY_MAX_DISTANCE
    )
    if match is not None:
        alias = match[0]
        return NormalizationResult(
            original_input=name, canonical_name=aliases[alias], confidence=MatchConfidence.FUZZY
        )

    closest = process.extract(
        key,
        canonical_names(),
        scorer=Levenshtein.distance,
        processor=str.lower,
        limit=SUGGESTION_LIMIT,
    )
    return NormalizationResult(
        original_input=name,
        confidence=MatchConfidence.UNRECOGNIZED,
        suggestions=[candidate for candidate, _, _ in closest],
    )


def canonical_name(name: str) -> str | None:
    """Canonical name, or None when the input isn't recognized."""
    return normalize(name).canonical_name


def is_recognized(name: str) -> bool:
    return normalize(name).is_recognized
