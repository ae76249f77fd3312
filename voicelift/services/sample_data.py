"""Sample workouts for previews, tests and seeding a development database.

Nothing here commits; callers own the session transaction.
"""

from __future__ import annotations

import logging
from datetime import datetime, time, timedelta, timezone

from sqlalchemy import select
from sqlalchemy.orm import Session

from voicelift.core.enums import Equipment, ExerciseCategory, MuscleGroup
from voicelift.models import Exercise, ExerciseSet, Workout

logger = logging.getLogger(__name__)

E, M = Equipment, MuscleGroup

# (name, equipment, muscles, [(reps, weight), ...]); bodyweight entries use weight 0
PUSH_DAY = [
    ("Bench Press", E.BARBELL, [M.CHEST, M.TRICEPS], [(10, 135), (8, 155), (6, 185), (4, 205)]),
    ("Incline Dumbbell Press", E.DUMBBELL, [M.CHEST, M.SHOULDERS], [(12, 50), (10, 55), (8, 60)]),
    ("Overhead Press", E.BARBELL, [M.SHOULDERS], [(10, 85), (8, 95), (6, 105)]),
    ("Tricep Pushdowns", E.CABLE, [M.TRICEPS], [(15, 40), (12, 50), (10, 60)]),
]
PULL_DAY = [
    ("Deadlift", E.BARBELL, [M.BACK, M.HAMSTRINGS, M.GLUTES], [(8, 185), (6, 225), (5, 275), (3, 315)]),
    ("Barbell Rows", E.BARBELL, [M.BACK, M.BICEPS], [(10, 135), (8, 155), (6, 175)]),
    ("Pull-ups", E.BODYWEIGHT, [M.BACK, M.BICEPS], [(12, 0), (10, 0), (8, 0)]),
    ("Bicep Curls", E.DUMBBELL, [M.BICEPS], [(12, 25), (10, 30), (8, 35)]),
]
LEG_DAY = [
    ("Squats", E.BARBELL, [M.QUADS, M.GLUTES], [(10, 135), (8, 185), (6, 225), (4, 255)]),
    ("Romanian Deadlift", E.BARBELL, [M.HAMSTRINGS, M.GLUTES], [(12, 135), (10, 155), (8, 175)]),
    ("Leg Press", E.MACHINE, [M.QUADS], [(12, 270), (10, 360), (8, 450)]),
    ("Calf Raises", E.MACHINE, [M.CALVES], [(15, 90), (12, 110), (10, 130)]),
]
UPPER_BODY = [
    ("Dumbbell Press", E.DUMBBELL, [M.CHEST], [(10, 60), (8, 70), (6, 80)]),
    ("Cable Rows", E.CABLE, [M.BACK], [(12, 100), (10, 120), (8, 140)]),
    ("Lateral Raises", E.DUMBBELL, [M.SHOULDERS], [(15, 15), (12, 20), (10, 25)]),
    ("Face Pulls", E.CABLE, [M.SHOULDERS, M.BACK], [(15, 30), (12, 40), (10, 50)]),
]
LOWER_BODY = [
    ("Front Squats", E.BARBELL, [M.QUADS], [(8, 115), (6, 135), (5, 155)]),
    ("Hip Thrusts", E.BARBELL, [M.GLUTES], [(12, 135), (10, 185), (8, 225)]),
    ("Leg Curls", E.MACHINE, [M.HAMSTRINGS], [(12, 60), (10, 70), (8, 80)]),
    ("Lunges", E.DUMBBELL, [M.QUADS, M.GLUTES], [(12, 30), (10, 35), (8, 40)]),
]
FULL_BODY = [
    ("Bench Press", E.BARBELL, [M.CHEST, M.TRICEPS], [(8, 155), (6, 175), (5, 195)]),
    ("Squats", E.BARBELL, [M.QUADS, M.GLUTES], [(8, 185), (6, 205), (5, 225)]),
    ("Dumbbell Rows", E.DUMBBELL, [M.BACK], [(10, 55), (8, 65), (6, 75)]),
    ("Push-ups", E.BODYWEIGHT, [M.CHEST, M.TRICEPS], [(20, 0), (15, 0)]),
]

# (days ago, hour, minute, notes, exercises)
WEEK_PLAN = [
    (6, 7, 30, "Great push session, hit a PR on bench", PUSH_DAY),
    (5, 18, 15, "Evening pull session", PULL_DAY),
    (4, 6, 45, "Early morning leg session", LEG_DAY),
    # 3 days ago: rest day
    (2, 17, 0, None, UPPER_BODY),
    (1, 8, 0, None, LOWER_BODY),
    (0, 10, 30, "Full body pump session", FULL_BODY),
    # Older sessions so progress charts have history
    (13, 7, 0, None, [
        ("Bench Press", E.BARBELL, [M.CHEST], [(10, 125), (8, 145), (6, 165)]),
        ("Squats", E.BARBELL, [M.QUADS], [(10, 135), (8, 165), (6, 195)]),
    ]),
    (10, 18, 30, None, [
        ("Deadlift", E.BARBELL, [M.BACK], [(8, 175), (6, 205), (4, 245)]),
        ("Bench Press", E.BARBELL, [M.CHEST], [(8, 135), (6, 155), (5, 175)]),
    ]),
    (8, 9, 0, None, [
        ("Squats", E.BARBELL, [M.QUADS], [(8, 155), (6, 185), (5, 215)]),
        ("Overhead Press", E.BARBELL, [M.SHOULDERS], [(10, 75), (8, 85), (6, 95)]),
    ]),
]


def build_exercise(
    name: str,
    sets: list[tuple[int, float]],
    equipment: Equipment = Equipment.OTHER,
    muscles: list[MuscleGroup] | None = None,
    category: ExerciseCategory | None = None,
) -> Exercise:
    """Exercise with sets numbered 1..n. Bodyweight equipment implies the bodyweight category."""
    if category is None:
        category = ExerciseCategory.BODYWEIGHT if equipment == Equipment.BODYWEIGHT else ExerciseCategory.WEIGHTED
    exercise = Exercise(
        name=name,
        category=category,
        equipment=equipment,
        primary_muscles=muscles or [],
    )
    exercise.sets = [
        ExerciseSet(set_number=i, reps=reps, weight=float(weight))
        for i, (reps, weight) in enumerate(sets, start=1)
    ]
    return exercise


def sample_workout(when: datetime | None = None) -> Workout:
    """Bench press and squats, three sets each."""
    workout = Workout(date=when or datetime.now(timezone.utc))
    workout.exercises = [
        build_exercise("Bench Press", [(10, 135), (8, 155), (6, 175)]),
        build_exercise("Squats", [(10, 185), (8, 205), (6, 225)]),
    ]
    return workout


def sample_workouts(today: datetime | None = None) -> list[Workout]:
    """Two weeks of bench press sessions with a steadily increasing load."""
    today = today or datetime.now(timezone.utc)
    workouts = []
    for days_ago in (0, 2, 4, 7, 9, 11, 14):
        base = 135.0 + (14 - days_ago) * 2.5
        workout = Workout(date=today - timedelta(days=days_ago))
        workout.exercises = [
            build_exercise("Bench Press", [(10, base), (8, base + 20), (6, base + 40)]),
        ]
        workouts.append(workout)
    return workouts


def week_of_workouts(today: datetime | None = None) -> list[Workout]:
    """A push/pull/legs week plus three older sessions."""
    today = today or datetime.now(timezone.utc)
    workouts = []
    for days_ago, hour, minute, notes, exercises in WEEK_PLAN:
        day = (today - timedelta(days=days_ago)).date()
        workout = Workout(
            date=datetime.combine(day, time(hour, minute), tzinfo=today.tzinfo),
            notes=notes,
        )
        workout.exercises = [
            build_exercise(name, sets, equipment, muscles)
            for name, equipment, muscles, sets in exercises
        ]
        workouts.append(workout)
    return workouts


def populate_week_of_workouts(db: Session, today: datetime | None = None) -> list[Workout]:
    """Add week_of_workouts() to the session and flush."""
    workouts = week_of_workouts(today)
    db.add_all(workouts)
    db.flush()
    logger.info("Seeded %d sample workouts", len(workouts))
    return workouts


def clear_all_workouts(db: Session) -> int:
    """Delete every workout through the ORM so exercises, sets and media rows cascade."""
    workouts = db.scalars(select(Workout)).all()
    for workout in workouts:
        db.delete(workout)
    db.flush()
    logger.info("Deleted %d workouts", len(workouts))
    return len(workouts)
