"""Sanity checks on logged weights.

- WV001 (warning): bar-type equipment logged at 0 (plates forgotten?)
- WV002 (warning): weight above 1000 (likely a typo)
- WV003 (error): weight below the empty bar

Only weighted exercises are checked. Each code is reported at most once per exercise.
"""

from __future__ import annotations

from collections.abc import Iterable

from voicelift.core.constants import MAX_REASONABLE_WEIGHT
from voicelift.core.enums import ExerciseCategory, ValidationSeverity
from voicelift.models import Exercise
from voicelift.schemas.validation import ValidationIssue
from voicelift.services import equipment as equipment_service

_SEVERITY_ORDER = (ValidationSeverity.ERROR, ValidationSeverity.WARNING, ValidationSeverity.INFO)


def validate(exercise: Exercise) -> list[ValidationIssue]:
    """Issues for one exercise, first occurrence of each code only."""
    if exercise.category != ExerciseCategory.WEIGHTED:
        return []

    equipment = exercise.equipment
    has_bar = equipment_service.has_base_weight(equipment)
    issues: list[ValidationIssue] = []

    for set_number, s in enumerate(exercise.sets, start=1):
        if has_bar and s.weight == 0:
            bar = int(equipment_service.base_weight(equipment))
            issues.append(ValidationIssue(
                code="WV001",
                severity=ValidationSeverity.WARNING,
                message=f"{equipment.display_name} weighs {bar} lbs. Add plate weight?",
                exercise_name=exercise.name,
                set_number=set_number,
            ))

        if s.weight > MAX_REASONABLE_WEIGHT:
            issues.append(ValidationIssue(
                code="WV002",
                severity=ValidationSeverity.WARNING,
                message=f"This weight seems high ({int(s.weight)} {s.unit.value}). Please verify.",
                exercise_name=exercise.name,
                set_number=set_number,
            ))

        if has_bar:
            bar = equipment_service.base_weight(equipment, s.unit)
            if 0 < s.weight < bar:
                issues.append(ValidationIssue(
                    code="WV003",
                    severity=ValidationSeverity.ERROR,
                    message=(
                        f"Weight can't be less than {equipment.display_name.lower()} weight "
                        f"({int(bar)} {s.unit.value})"
                    ),
                    exercise_name=exercise.name,
                    set_number=set_number,
                ))

    seen: set[str] = set()
    unique = []
    for issue in issues:
        if issue.code not in seen:
            seen.add(issue.code)
            unique.append(issue)
    return unique


def validate_all(exercises: Iterable[Exercise]) -> list[ValidationIssue]:
    return [issue for exercise in exercises for issue in validate(exercise)]


def has_issues(exercise: Exercise) -> bool:
    return bool(validate(exercise))


def most_severe_issue(exercise: Exercise) -> ValidationIssue | None:
    """Error before warning before info; None when the exercise is clean."""
    issues = validate(exercise)
    for severity in _SEVERITY_ORDER:
        for issue in issues:
            if issue.severity == severity:
                return issue
    return None
