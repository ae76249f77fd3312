"""Exercise catalog schemas."""

from pydantic import BaseModel, Field

from voicelift.core.enums import Equipment, ExerciseCategory, MatchConfidence


class CatalogEntry(BaseModel):
    name: str = Field(..., min_length=1)
    category: ExerciseCategory = ExerciseCategory.WEIGHTED
    equipment: Equipment = Equipment.OTHER
    primary_muscles: list[str] = []


class NormalizationResult(BaseModel):
    """Canonical form of a spoken or typed exercise name."""

    original_input: str
    canonical_name: str | None = None
    confidence: MatchConfidence
    suggestions: list[str] = []

    @property
    def is_recognized(self) -> bool:
        return self.confidence != MatchConfidence.UNRECOGNIZED
