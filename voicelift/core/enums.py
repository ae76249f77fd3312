"""Shared enums for models and API.

Enum values are the raw strings written to the database. Changing one breaks
rows saved by earlier versions.
"""

from enum import Enum


class WeightUnit(str, Enum):
    """Unit a set's weight was recorded in."""

    LBS = "lbs"
    KG = "kg"

    @property
    def display_name(self) -> str:
        return self.value


class SetType(str, Enum):
    """How a set was performed."""

    NORMAL = "normal"
    WARMUP = "warmup"
    DROP_SET = "dropSet"
    SUPERSET = "superset"
    REST_PAUSE = "restPause"
    AMRAP = "amrap"
    FAILURE = "failure"
    CLUSTER = "cluster"

    @property
    def display_name(self) -> str:
        return _SET_TYPE_NAMES[self]


_SET_TYPE_NAMES = {
    SetType.NORMAL: "Normal",
    SetType.WARMUP: "Warm-up",
    SetType.DROP_SET: "Drop Set",
    SetType.SUPERSET: "Superset",
    SetType.REST_PAUSE: "Rest-Pause",
    SetType.AMRAP: "AMRAP",
    SetType.FAILURE: "To Failure",
    SetType.CLUSTER: "Cluster",
}


class GripType(str, Enum):
    """Hand position on the bar or handle."""

    STANDARD = "standard"
    WIDE = "wide"
    NARROW = "narrow"
    UNDERHAND = "underhand"
    OVERHAND = "overhand"
    NEUTRAL = "neutral"
    MIXED = "mixed"
    REVERSE = "reverse"

    @property
    def display_name(self) -> str:
        if self is GripType.STANDARD:
            return "Standard"
        return f"{self.value.capitalize()} Grip"


class StanceType(str, Enum):
    """Foot position."""

    STANDARD = "standard"
    WIDE = "wide"
    SUMO = "sumo"
    NARROW = "narrow"
    STAGGERED = "staggered"
    SINGLE_LEG = "singleLeg"

    @property
    def display_name(self) -> str:
        if self is StanceType.SINGLE_LEG:
            return "Single Leg"
        return self.value.capitalize()


class ExerciseCategory(str, Enum):
    """Weighted (track weight), bodyweight (track reps) or timed (track duration)."""

    WEIGHTED = "weighted"
    BODYWEIGHT = "bodyweight"
    TIMED = "timed"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def tracking_metric(self) -> str:
        return {
            ExerciseCategory.WEIGHTED: "Weight",
            ExerciseCategory.BODYWEIGHT: "Reps",
            ExerciseCategory.TIMED: "Duration",
        }[self]


class Equipment(str, Enum):
    """Equipment used for an exercise."""

    BARBELL = "Barbell"
    DUMBBELL = "Dumbbell"
    CABLE = "Cable"
    MACHINE = "Machine"
    KETTLEBELL = "Kettlebell"
    BODYWEIGHT = "Bodyweight"
    RESISTANCE_BAND = "Band"
    SMITH_MACHINE = "Smith Machine"
    TRAP_BAR = "Trap Bar"
    EZ_BAR = "EZ Bar"
    OTHER = "Other"

    @property
    def display_name(self) -> str:
        return self.value


class MuscleGroup(str, Enum):
    """Primary muscle groups an exercise can target."""

    CHEST = "Chest"
    BACK = "Back"
    SHOULDERS = "Shoulders"
    BICEPS = "Biceps"
    TRICEPS = "Triceps"
    FOREARMS = "Forearms"
    QUADS = "Quads"
    HAMSTRINGS = "Hamstrings"
    GLUTES = "Glutes"
    CALVES = "Calves"
    CORE = "Core"
    FULL_BODY = "Full Body"

    @property
    def display_name(self) -> str:
        return self.value


class MediaType(str, Enum):
    """Kind of file attached to a workout."""

    PHOTO = "photo"
    VIDEO = "video"


class ValidationSeverity(str, Enum):
    """Severity of a workout validation issue."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class MatchConfidence(str, Enum):
    """How an exercise name was matched to its canonical form."""

    EXACT = "exact"
    FUZZY = "fuzzy"
    UNRECOGNIZED = "unrecognized"


class ProgressionTrend(str, Enum):
    """Current session compared with the historical average."""

    IMPROVING = "improving"
    MAINTAINING = "maintaining"
    DECLINING = "declining"
    INSUFFICIENT_DATA = "insufficientData"

    @property
    def description(self) -> str:
        return {
            ProgressionTrend.IMPROVING: "Improving",
            ProgressionTrend.MAINTAINING: "Steady",
            ProgressionTrend.DECLINING: "Below average",
            ProgressionTrend.INSUFFICIENT_DATA: "Need more data",
        }[self]


def from_raw(enum_cls, raw, default=None):
    """Parse a stored raw string into enum_cls, falling back to default when absent or unknown."""
    if raw is None:
        return default
    try:
        return enum_cls(raw)
    except ValueError:
        return default


def enum_values(enum_cls) -> list[str]:
    """Raw values for SQLAlchemy Enum columns (store values, not member names)."""
    return [member.value for member in enum_cls]
