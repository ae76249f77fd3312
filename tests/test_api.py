"""HTTP API against an in-memory database."""

import json

import pytest

from voicelift.core.config import get_settings

API = "/api/v1"

PUSH_DAY = {
    "date": "2026-10-18T07:30:00",
    "notes": "Push day",
    "exercises": [
        {
            "name": "Bench Press",
            "equipment": "Barbell",
            "primary_muscles": ["Chest", "Triceps"],
            "sets": [
                {"reps": 10, "weight": 135},
                {"reps": 8, "weight": 155},
                {"reps": 6, "weight": 175},
            ],
        },
        {
            "name": "Pull-ups",
            "category": "bodyweight",
            "equipment": "Bodyweight",
            "sets": [{"reps": 12}, {"reps": 10}],
        },
    ],
}


@pytest.fixture
def created(client):
    response = client.post(f"{API}/workouts", json=PUSH_DAY)
    assert response.status_code == 201
    return response.json()


def _bench(workout):
    return next(e for e in workout["exercises"] if e["name"] == "Bench Press")


def test_root_and_health(client):
    assert client.get("/").json()["status"] == "ok"
    assert client.get(f"{API}/health").json() == {"status": "ok"}
    assert client.get(f"{API}/health/ready").json() == {"status": "ok", "database": "connected"}


class TestWorkouts:
    def test_create_returns_aggregates(self, created):
        assert created["exercise_count"] == 2
        assert created["total_sets"] == 5
        assert created["total_reps"] == 46
        assert created["total_volume"] == 3640
        assert created["summary"] == "2 exercises • 5 sets • 3640 lbs volume"
        assert created["formatted_date"] == "Oct 18, 2026"
        assert created["formatted_time"] == "7:30 AM"

        bench = _bench(created)
        assert [s["set_number"] for s in bench["sets"]] == [1, 2, 3]
        assert bench["summary"] == "3 sets • 24 reps • max 175 lbs"
        assert bench["sets"][0]["unit"] == "lbs"
        assert bench["sets"][0]["set_type"] == "normal"
        assert bench["sets"][0]["volume"] == 1350
        assert bench["sets"][0]["formatted_weight"] == "135 lbs"

        pullups = next(e for e in created["exercises"] if e["name"] == "Pull-ups")
        assert pullups["summary"] == "2 sets • 22 total reps"

    def test_get(self, client, created):
        response = client.get(f"{API}/workouts/{created['id']}")
        assert response.status_code == 200
        body = response.json()
        assert body["notes"] == "Push day"
        assert _bench(body)["primary_muscles"] == ["Chest", "Triceps"]
        assert _bench(body)["max_weight"] == 175

    def test_get_missing(self, client):
        response = client.get(f"{API}/workouts/00000000-0000-0000-0000-000000000000")
        assert response.status_code == 404

    def test_list_newest_first(self, client, created):
        client.post(f"{API}/workouts", json={"date": "2026-10-20T18:00:00"})
        client.post(f"{API}/workouts", json={"date": "2026-10-01T18:00:00"})
        workouts = client.get(f"{API}/workouts").json()
        assert [w["date"][:10] for w in workouts] == ["2026-10-20", "2026-10-18", "2026-10-01"]
        assert "exercises" not in workouts[0]

        filtered = client.get(f"{API}/workouts", params={"from_date": "2026-10-10T00:00:00"}).json()
        assert len(filtered) == 2

    def test_empty_workout(self, client):
        body = client.post(f"{API}/workouts", json={}).json()
        assert body["summary"] == "0 exercises • 0 sets • 0 lbs volume"
        assert body["exercises"] == []

    def test_update_notes(self, client, created):
        response = client.patch(f"{API}/workouts/{created['id']}", json={"notes": "Heavy"})
        assert response.json()["notes"] == "Heavy"
        assert response.json()["exercise_count"] == 2

    def test_delete_cascades(self, client, created):
        bench = _bench(created)
        set_id = bench["sets"][0]["id"]

        assert client.delete(f"{API}/workouts/{created['id']}").status_code == 204
        assert client.get(f"{API}/workouts/{created['id']}").status_code == 404
        assert client.get(f"{API}/exercises/{bench['id']}").status_code == 404
        assert client.get(f"{API}/sets/{set_id}").status_code == 404

    def test_null_date_rejected(self, client, created):
        url = f"{API}/workouts/{created['id']}"
        assert client.patch(url, json={"date": None}).status_code == 422
        assert client.get(url).json()["formatted_date"] == "Oct 18, 2026"

    def test_lookup_is_case_insensitive(self, client, created):
        url = f"{API}/workouts/{created['id']}/exercises/lookup"
        assert client.get(url, params={"name": "bench press"}).json()["name"] == "Bench Press"
        assert client.get(url, params={"name": "BENCH PRESS"}).status_code == 200
        assert client.get(url, params={"name": "bench"}).status_code == 404

    def test_invalid_unit_rejected(self, client):
        payload = {"exercises": [{"name": "Squat", "sets": [{"reps": 5, "weight": 100, "unit": "stone"}]}]}
        assert client.post(f"{API}/workouts", json=payload).status_code == 422

    def test_negative_weight_rejected(self, client):
        payload = {"exercises": [{"name": "Squat", "sets": [{"reps": 5, "weight": -5}]}]}
        assert client.post(f"{API}/workouts", json=payload).status_code == 422

    def test_add_exercise(self, client, created):
        response = client.post(
            f"{API}/workouts/{created['id']}/exercises",
            json={"name": "Squats", "sets": [{"reps": 5, "weight": 100, "unit": "kg"}]},
        )
        assert response.status_code == 201
        assert response.json()["summary"] == "1 set • 5 reps • max 100 kg"
        assert client.get(f"{API}/workouts/{created['id']}").json()["exercise_count"] == 3


class TestExercisesAndSets:
    def test_add_set_gets_next_number(self, client, created):
        bench = _bench(created)
        response = client.post(f"{API}/exercises/{bench['id']}/sets", json={"reps": 4, "weight": 185})
        assert response.status_code == 201
        assert response.json()["set_number"] == 4

        exercise = client.get(f"{API}/exercises/{bench['id']}").json()
        assert exercise["max_weight"] == 185
        assert exercise["total_reps"] == 28

    def test_delete_set_keeps_numbers(self, client, created):
        bench = _bench(created)
        assert client.delete(f"{API}/sets/{bench['sets'][1]['id']}").status_code == 204
        exercise = client.get(f"{API}/exercises/{bench['id']}").json()
        assert [s["set_number"] for s in exercise["sets"]] == [1, 3]

        added = client.post(f"{API}/exercises/{bench['id']}/sets", json={"reps": 3, "weight": 185})
        assert added.json()["set_number"] == 4

    def test_update_set_details(self, client, created):
        set_id = _bench(created)["sets"][2]["id"]
        response = client.patch(
            f"{API}/sets/{set_id}",
            json={"grip_type": "wide", "rpe": 9, "set_type": "failure", "unit": "kg"},
        )
        body = response.json()
        assert body["grip_type"] == "wide"
        assert body["stance_type"] is None
        assert body["rpe"] == 9
        assert body["set_type"] == "failure"
        assert body["weight_in_pounds"] == pytest.approx(175 * 2.20462)

    def test_update_set_ignores_null_required_fields(self, client, created):
        set_id = _bench(created)["sets"][0]["id"]
        body = client.patch(f"{API}/sets/{set_id}", json={"reps": None, "grip_type": None}).json()
        assert body["reps"] == 10

    def test_update_exercise(self, client, created):
        bench = _bench(created)
        body = client.patch(
            f"{API}/exercises/{bench['id']}",
            json={"name": "Flat Bench", "primary_muscles": ["Chest"], "equipment": None},
        ).json()
        assert body["name"] == "Flat Bench"
        assert body["primary_muscles"] == ["Chest"]
        assert body["equipment"] == "Other"

    def test_delete_exercise_keeps_workout(self, client, created):
        bench = _bench(created)
        assert client.delete(f"{API}/exercises/{bench['id']}").status_code == 204
        workout = client.get(f"{API}/workouts/{created['id']}").json()
        assert workout["exercise_count"] == 1
        assert workout["total_sets"] == 2


class TestValidationAndStrength:
    def test_workout_validation(self, client):
        payload = {
            "exercises": [
                {"name": "Bench Press", "equipment": "Barbell", "sets": [{"reps": 10, "weight": 0}]},
                {"name": "Curl", "equipment": "EZ Bar", "sets": [{"reps": 10, "weight": 15}]},
            ]
        }
        workout = client.post(f"{API}/workouts", json=payload).json()
        issues = client.get(f"{API}/workouts/{workout['id']}/validation").json()
        assert sorted((i["code"], i["exercise_name"]) for i in issues) == [("WV001", "Bench Press"), ("WV003", "Curl")]

        curl_id = next(e["id"] for e in workout["exercises"] if e["name"] == "Curl")
        issues = client.get(f"{API}/exercises/{curl_id}/validation").json()
        assert issues[0]["severity"] == "error"

    def test_clean_workout_has_no_issues(self, client, created):
        assert client.get(f"{API}/workouts/{created['id']}/validation").json() == []

    def test_strength(self, client):
        payload = {"exercises": [{"name": "Deadlift", "sets": [{"reps": 1, "weight": 300}, {"reps": 1, "weight": 200}]}]}
        workout = client.post(f"{API}/workouts", json=payload).json()
        body = client.get(f"{API}/workouts/{workout['id']}/strength").json()
        assert body["strength_score"] == 250
        assert body["exercises"] == [
            {"name": "Deadlift", "average_one_rep_max": 250.0, "best_one_rep_max": 300.0}
        ]

    def test_strength_skips_bodyweight(self, client, created):
        body = client.get(f"{API}/workouts/{created['id']}/strength").json()
        assert [e["name"] for e in body["exercises"]] == ["Bench Press"]


class TestMedia:
    def test_register_and_get(self, client, created, documents_dir):
        url = f"{API}/workouts/{created['id']}/media"
        response = client.post(url, json={"filename": "abc.jpg", "media_type": "photo", "caption": "Top set"})
        assert response.status_code == 201
        media = response.json()
        assert media["file_exists"] is False

        listed = client.get(url).json()
        assert [m["id"] for m in listed] == [media["id"]]
        assert client.get(f"{API}/workouts/{created['id']}").json()["media_count"] == 1
        assert client.get(f"{API}/media/{media['id']}/file").status_code == 404

    def test_register_rejects_paths(self, client, created):
        url = f"{API}/workouts/{created['id']}/media"
        assert client.post(url, json={"filename": "../etc/passwd", "media_type": "photo"}).status_code == 422

    def test_register_rejects_directory_names(self, client, created):
        url = f"{API}/workouts/{created['id']}/media"
        for filename in (".", ".."):
            response = client.post(url, json={"filename": filename, "media_type": "photo"})
            assert response.status_code == 422
        assert client.get(url).json() == []

    def test_upload_serve_and_delete(self, client, created, documents_dir):
        response = client.post(
            f"{API}/workouts/{created['id']}/media/upload",
            files={"file": ("clip.mov", b"video-bytes", "video/quicktime")},
            data={"media_type": "video", "caption": "Last rep"},
        )
        assert response.status_code == 201
        media = response.json()
        assert media["filename"].endswith(".mp4")
        assert media["file_exists"] is True
        assert (documents_dir / "WorkoutMedia" / media["filename"]).read_bytes() == b"video-bytes"

        assert client.get(f"{API}/media/{media['id']}/file").content == b"video-bytes"

        patched = client.patch(f"{API}/media/{media['id']}", json={"caption": "PR"}).json()
        assert patched["caption"] == "PR"

        assert client.delete(f"{API}/media/{media['id']}", params={"delete_file": True}).status_code == 204
        assert client.get(f"{API}/media/{media['id']}").status_code == 404
        assert not (documents_dir / "WorkoutMedia" / media["filename"]).exists()

    def test_deleting_workout_keeps_files(self, client, created, documents_dir):
        media = client.post(
            f"{API}/workouts/{created['id']}/media/upload",
            files={"file": ("p.jpg", b"jpeg", "image/jpeg")},
            data={"media_type": "photo"},
        ).json()
        client.delete(f"{API}/workouts/{created['id']}")
        assert client.get(f"{API}/media/{media['id']}").status_code == 404
        assert (documents_dir / "WorkoutMedia" / media["filename"]).exists()


class TestStats:
    def test_overview(self, client, created):
        client.post(f"{API}/workouts", json={"date": "2026-10-19T08:00:00"})
        body = client.get(f"{API}/stats/overview").json()
        assert body["total_workouts"] == 2
        assert body["total_exercises"] == 2
        assert body["total_sets"] == 5
        assert body["total_volume"] == 3640
        assert body["volume_display"] == "3.6K"
        assert body["last_workout_date"].startswith("2026-10-19")

    def test_overview_empty(self, client):
        body = client.get(f"{API}/stats/overview").json()
        assert body["total_workouts"] == 0
        assert body["last_workout_date"] is None

    def test_exercise_progress(self, client, created):
        heavier = {
            "date": "2026-10-21T07:30:00",
            "exercises": [{"name": "bench press", "sets": [{"reps": 10, "weight": 145}, {"reps": 8, "weight": 165}]}],
        }
        client.post(f"{API}/workouts", json=heavier)

        body = client.get(f"{API}/stats/exercises/progress", params={"name": "Bench Press"}).json()
        first, second = body["points"]
        assert first["max_weight"] == 175
        assert first["is_personal_best"] is False
        assert first["improvement_pct"] == 0
        assert second["max_weight"] == 165
        assert second["is_personal_best"] is True
        assert second["improvement_pct"] > 0

    def test_progress_unknown_exercise(self, client, created):
        response = client.get(f"{API}/stats/exercises/progress", params={"name": "Snatch"})
        assert response.status_code == 404


class TestProgression:
    @pytest.fixture
    def earlier(self, client):
        payload = {
            "date": "2026-10-15T07:30:00",
            "exercises": [{"name": "bench press", "sets": [{"reps": 10, "weight": 135}]}],
        }
        return client.post(f"{API}/workouts", json=payload).json()

    def test_previous_session_by_name(self, client, created, earlier):
        params = {"name": "Bench Press", "exclude_workout_id": created["id"]}
        body = client.get(f"{API}/previous-session", params=params).json()
        assert body["message"] is None
        assert body["previous"]["workout_id"] == earlier["id"]
        assert [s["display"] for s in body["previous"]["sets"]] == ["10 × 135 lbs"]

        body = client.get(f"{API}/previous-session", params={"name": "Snatch"}).json()
        assert body == {"previous": None, "message": "No previous session for this exercise."}
        assert client.get(f"{API}/previous-session").status_code == 422

    def test_previous_session_for_exercise(self, client, created, earlier):
        bench = _bench(created)
        body = client.get(f"{API}/exercises/{bench['id']}/previous-session").json()
        assert body["previous"]["workout_id"] == earlier["id"]

        pullups = next(e for e in created["exercises"] if e["name"] == "Pull-ups")
        body = client.get(f"{API}/exercises/{pullups['id']}/previous-session").json()
        assert body["previous"] is None
        assert body["message"] == "No previous session for this exercise."

    def test_comparison(self, client, created, earlier):
        bench = _bench(created)
        comparisons = client.get(f"{API}/exercises/{bench['id']}/comparison").json()
        assert len(comparisons) == 1
        assert comparisons[0]["set_number"] == 1
        assert comparisons[0]["improvement_display"] == "Same"
        assert comparisons[0]["is_personal_best"] is False

    def test_comparison_without_history(self, client, created):
        bench = _bench(created)
        assert client.get(f"{API}/exercises/{bench['id']}/comparison").json() == []

    def test_exercise_progression(self, client, created, earlier):
        body = client.get(f"{API}/exercises/{_bench(created)['id']}/progression").json()
        assert body["exercise_name"] == "Bench Press"
        assert body["session_count"] == 1
        assert body["trend"] == "insufficientData"
        assert body["has_enough_data"] is False

    def test_workout_progression(self, client, created, earlier):
        body = client.get(f"{API}/workouts/{created['id']}/progression").json()
        assert body["total_exercises"] == 1
        assert body["overall_trend"] == "insufficientData"
        assert body["message"].startswith("Keep training!")

    def test_unknown_ids(self, client):
        missing = "00000000-0000-0000-0000-000000000000"
        assert client.get(f"{API}/exercises/{missing}/progression").status_code == 404
        assert client.get(f"{API}/workouts/{missing}/progression").status_code == 404


class TestCatalogAndTools:
    def test_catalog_search(self, client):
        names = [e["name"] for e in client.get(f"{API}/catalog", params={"q": "curl"}).json()]
        assert "Bicep Curls" in names
        assert "Leg Curls" in names
        assert client.get(f"{API}/catalog", params={"limit": 0}).status_code == 422

    def test_normalize_name(self, client):
        body = client.get(f"{API}/catalog/normalize", params={"name": "RDL"}).json()
        assert body["canonical_name"] == "Romanian Deadlift"
        assert body["confidence"] == "exact"

        body = client.get(f"{API}/catalog/normalize", params={"name": "zercher carry"}).json()
        assert body["canonical_name"] is None
        assert body["confidence"] == "unrecognized"
        assert len(body["suggestions"]) == 3

    def test_base_weight(self, client):
        body = client.get(f"{API}/tools/base-weight", params={"equipment": "Barbell"}).json()
        assert body["base_weight"] == 45
        assert body["description"] == "45 lbs"
        body = client.get(f"{API}/tools/base-weight", params={"equipment": "Dumbbell"}).json()
        assert body["base_weight"] == 0
        assert body["description"] is None

    def test_sample_data_and_clear(self, client):
        assert client.post(f"{API}/tools/sample-data").json() == {"created": 9}
        assert len(client.get(f"{API}/workouts").json()) == 9
        assert client.delete(f"{API}/tools/workouts").json() == {"deleted": 9}
        assert client.get(f"{API}/workouts").json() == []

    def test_tools_disabled_outside_development(self, client, monkeypatch):
        monkeypatch.setenv("VOICELIFT_ENVIRONMENT", "production")
        get_settings.cache_clear()
        assert client.post(f"{API}/tools/sample-data").status_code == 403


class TestAppState:
    def test_defaults(self, client):
        body = client.get(f"{API}/app-state").json()
        assert body == {
            "has_completed_onboarding": False,
            "notifications_enabled": False,
            "reminder_hour": 20,
            "reminder_minute": 0,
        }

    def test_update_persists(self, client, documents_dir):
        body = client.patch(f"{API}/app-state", json={"has_completed_onboarding": True, "reminder_hour": 7}).json()
        assert body["has_completed_onboarding"] is True
        assert body["reminder_hour"] == 7
        assert body["reminder_minute"] == 0

        saved = json.loads((documents_dir / "app_state.json").read_text())
        assert saved["reminder_hour"] == 7
        assert client.get(f"{API}/app-state").json()["has_completed_onboarding"] is True

    def test_invalid_hour(self, client):
        assert client.patch(f"{API}/app-state", json={"reminder_hour": 24}).status_code == 422
