"""Previous-session lookups, set comparison and progression trends."""

from datetime import datetime, timezone

import pytest

from voicelift.core.enums import ExerciseCategory, ProgressionTrend, WeightUnit
from voicelift.models import Exercise, ExerciseSet, Workout
from voicelift.services import ghost_sets


def _session(day, name="Bench Press", sets=((5, 100),), category=None):
    workout = Workout(date=datetime(2026, 10, day, 7, 30, tzinfo=timezone.utc))
    exercise = Exercise(name=name)
    if category is not None:
        exercise.category = category
    exercise.sets = [
        ExerciseSet(set_number=i, reps=reps, weight=weight)
        for i, (reps, weight) in enumerate(sets, start=1)
    ]
    workout.exercises = [exercise]
    return workout


class TestPreviousSession:
    def test_most_recent_other_workout(self):
        older = _session(10, sets=[(5, 100)])
        newer = _session(12, sets=[(5, 110)])
        today = _session(14, sets=[(5, 120)])

        ghost = ghost_sets.find_previous_session("bench press", [older, today, newer], today.id)
        assert ghost.workout_id == newer.id
        assert ghost.exercise_name == "Bench Press"
        assert [s.weight for s in ghost.sets] == [110]
        assert ghost.date == newer.date

    def test_without_exclusion_latest_wins(self):
        older = _session(10)
        today = _session(14)
        assert ghost_sets.find_previous_session("Bench Press", [older, today]).workout_id == today.id

    def test_never_logged(self):
        assert ghost_sets.find_previous_session("Deadlift", [_session(10)]) is None

    def test_only_the_current_workout(self):
        today = _session(14)
        assert ghost_sets.find_previous_session("Bench Press", [today], today.id) is None

    def test_keyed_by_lowercased_name(self):
        workouts = [_session(10), _session(11, name="Squats")]
        found = ghost_sets.find_previous_sessions(["Bench Press", "Squats", "Deadlift"], workouts)
        assert set(found) == {"bench press", "squats"}

    def test_ghost_set_display_and_e1rm(self):
        ghost = ghost_sets.find_previous_session("Bench Press", [_session(10, sets=[(10, 135), (12, 0)])])
        weighted, bodyweight = ghost.sets
        assert weighted.display == "10 × 135 lbs"
        assert weighted.unit == WeightUnit.LBS
        assert weighted.e1rm == pytest.approx(180)
        assert bodyweight.display == "12 reps"
        assert ghost.average_e1rm == pytest.approx(90)


class TestComparison:
    def test_sets_paired_by_position(self):
        previous = ghost_sets.find_previous_session("Bench Press", [_session(10, sets=[(10, 135), (8, 155)])])
        current = _session(14, sets=[(10, 150), (8, 155), (6, 175)]).exercises[0]

        first, second = ghost_sets.compare_sets(current, previous)
        assert first.set_number == 1
        assert first.current_e1rm == pytest.approx(200)
        assert first.previous_e1rm == pytest.approx(180)
        assert first.improvement_display == "+11.1%"
        assert first.is_personal_best
        assert second.improvement == 0
        assert second.improvement_display == "Same"
        assert not second.is_personal_best

    def test_improvement_display(self):
        assert ghost_sets.improvement_display(5) == "+5.0%"
        assert ghost_sets.improvement_display(-2) == "-2.0%"
        assert ghost_sets.improvement_display(0) == "Same"


class TestProgression:
    def test_trimmed_average(self):
        assert ghost_sets.trimmed_average([300, 100, 200]) == 200
        assert ghost_sets.trimmed_average([100, 120]) == 110
        assert ghost_sets.trimmed_average([50]) == 50

    def test_needs_three_sessions(self):
        history = [_session(10, sets=[(1, 100)]), _session(11, sets=[(1, 100)])]
        today = _session(14, sets=[(1, 120)])

        result = ghost_sets.exercise_progression(
            "Bench Press", today.exercises[0].sets, history + [today], today.id
        )
        assert result.session_count == 2
        assert result.trend == ProgressionTrend.INSUFFICIENT_DATA
        assert result.trend_description == "Need more data"
        assert result.historical_average_e1rm == 0
        assert result.percentage_change == 0
        assert not result.has_enough_data

    @pytest.mark.parametrize(
        "weight, trend",
        [
            (110, ProgressionTrend.IMPROVING),
            (102, ProgressionTrend.MAINTAINING),
            (98, ProgressionTrend.MAINTAINING),
            (90, ProgressionTrend.DECLINING),
        ],
    )
    def test_trend_bands(self, weight, trend):
        history = [_session(day, sets=[(1, 100)]) for day in (8, 10, 12)]
        today = _session(14, sets=[(1, weight)])

        result = ghost_sets.exercise_progression(
            "Bench Press", today.exercises[0].sets, history + [today], today.id
        )
        assert result.session_count == 3
        assert result.has_enough_data
        assert result.historical_average_e1rm == pytest.approx(100)
        assert result.percentage_change == pytest.approx(weight - 100)
        assert result.trend == trend

    def test_sessions_without_sets_do_not_count(self):
        history = [_session(day, sets=[(1, 100)]) for day in (8, 10)] + [_session(12, sets=[])]
        today = _session(14, sets=[(1, 110)])
        result = ghost_sets.exercise_progression("Bench Press", today.exercises[0].sets, history, today.id)
        assert result.session_count == 2


class TestSummary:
    def test_no_weighted_exercises(self):
        today = _session(14, name="Pull Ups", sets=[(12, 0)], category=ExerciseCategory.BODYWEIGHT)
        summary = ghost_sets.workout_progression_summary(today.exercises, [today], today.id)
        assert summary.total_exercises == 0
        assert summary.overall_trend == ProgressionTrend.INSUFFICIENT_DATA
        assert summary.message == "Add weighted exercises to track progression"

    def test_not_enough_history(self):
        today = _session(14)
        summary = ghost_sets.workout_progression_summary(today.exercises, [_session(10), today], today.id)
        assert summary.total_exercises == 1
        assert summary.exercises_with_enough_data == 0
        assert summary.message.startswith("Keep training!")

    def test_overall_trend(self):
        history = [_session(day, sets=[(1, 100)]) for day in (8, 10, 12)]
        today = _session(14, sets=[(1, 110)])
        today.exercises.append(_session(14, name="Squats", sets=[(5, 225)]).exercises[0])

        summary = ghost_sets.workout_progression_summary(today.exercises, history + [today], today.id)
        assert summary.total_exercises == 2
        assert summary.exercises_with_enough_data == 1
        assert summary.average_percentage_change == pytest.approx(10)
        assert summary.overall_trend == ProgressionTrend.IMPROVING
        assert summary.message == "1 of 2 exercises have progression data"
