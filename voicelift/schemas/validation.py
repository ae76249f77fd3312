"""Workout validation issue schema."""

from pydantic import BaseModel

from voicelift.core.enums import ValidationSeverity


class ValidationIssue(BaseModel):
    """A problem found in an exercise's sets (code WV001..WV003)."""

    code: str
    severity: ValidationSeverity
    message: str
    exercise_name: str
    set_number: int | None = None
