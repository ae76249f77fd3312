"""ORM models - import all so Base.metadata is complete for migrations."""

from voicelift.models.exercise import Exercise
from voicelift.models.exercise_set import ExerciseSet
from voicelift.models.workout import Workout
from voicelift.models.workout_media import WorkoutMedia

__all__ = [
    "Exercise",
    "ExerciseSet",
    "Workout",
    "WorkoutMedia",
]
