"""Application constants."""

# 1 kg = 2.20462 lbs
LBS_PER_KG = 2.20462

# Media files live under <documents root>/<MEDIA_DIRECTORY_NAME>/<filename>
MEDIA_DIRECTORY_NAME = "WorkoutMedia"

# Separator for Exercise.primary_muscles_raw
MUSCLE_SEPARATOR = ","

# Validation
MAX_REASONABLE_WEIGHT = 1000
