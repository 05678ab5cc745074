from datetime import date, timedelta

import pytest
from sqlalchemy.exc import OperationalError

from fitlife.errors import ValidationError
from fitlife.extensions import db
from fitlife.models import DailyLog, HealthProfile
from fitlife.services import daily_log_service
from fitlife.services.daily_log_service import DailyLogService

from .conftest import OTHER_USER_ID, USER_ID


def test_water_is_added_to_a_single_log(client, auth_headers):
    client.post("/api/logs/water", json={"amount": 250}, headers=auth_headers)
    response = client.post("/api/logs/water", json={"amount": 500}, headers=auth_headers)

    body = response.get_json()
    assert response.status_code == 200
    assert body["success"] is True
    assert body["log"]["waterIntake"] == 750
    assert body["log"]["date"] == date.today().isoformat()
    assert DailyLog.query.filter_by(user_id=USER_ID).count() == 1


def test_calories_accumulate(client, auth_headers):
    client.post("/api/logs/calories", json={"amount": 400}, headers=auth_headers)
    body = client.post("/api/logs/calories", json={"amount": 650.5}, headers=auth_headers).get_json()

    assert body["log"]["calories"] == 1050.5
    assert body["log"]["waterIntake"] == 0


@pytest.mark.parametrize("amount", [0, -100, "250", True, None])
def test_invalid_water_amount_rejected(client, auth_headers, amount):
    response = client.post("/api/logs/water", json={"amount": amount}, headers=auth_headers)

    assert response.status_code == 400
    assert response.get_json()["message"] == "Please provide a valid water amount (in ml)"
    assert DailyLog.query.count() == 0


def test_invalid_calorie_amount_rejected(client, auth_headers):
    response = client.post("/api/logs/calories", json={}, headers=auth_headers)

    assert response.status_code == 400
    assert response.get_json()["message"] == "Please provide a valid calorie amount"


def test_add_workout(client, auth_headers):
    response = client.post(
        "/api/logs/workout",
        json={"name": "Run", "duration": 30, "type": "Cardio"},
        headers=auth_headers,
    )
    client.post(
        "/api/logs/workout",
        json={"name": "Squats", "duration": 20, "type": "Strength"},
        headers=auth_headers,
    )
    log = client.get("/api/logs/today", headers=auth_headers).get_json()["log"]

    assert response.status_code == 200
    assert response.get_json()["log"]["workouts"][0]["name"] == "Run"
    assert [(w["name"], w["duration"], w["type"]) for w in log["workouts"]] == [
        ("Run", 30, "Cardio"),
        ("Squats", 20, "Strength"),
    ]


@pytest.mark.parametrize("payload, message", [
    ({"name": "Run", "duration": 0, "type": "Cardio"}, "Duration must be a positive number (in minutes)"),
    ({"duration": 30, "type": "Cardio"}, "Please provide workout name, duration, and type"),
    ({"name": "Run", "duration": 30}, "Please provide workout name, duration, and type"),
    ({"name": "Run", "duration": -5, "type": "Cardio"}, "Duration must be a positive number (in minutes)"),
    ({"name": "Run", "duration": "30", "type": "Cardio"}, "Duration must be a positive number (in minutes)"),
    ({"name": "Run", "duration": 12.5, "type": "Cardio"}, "Duration must be a whole number of minutes"),
    ({"name": "Run", "duration": 30, "type": "Pilates"},
     "Invalid workout type. Must be one of: Cardio, Strength, HIIT, Yoga, Flexibility"),
    ({"name": "   ", "duration": 30, "type": "Cardio"}, "Workout name must be a non-empty string"),
])
def test_invalid_workout_rejected(client, auth_headers, payload, message):
    response = client.post("/api/logs/workout", json=payload, headers=auth_headers)

    assert response.status_code == 400
    assert response.get_json()["message"] == message


def test_duration_zero_is_rejected_by_the_service(app):
    with pytest.raises(ValidationError):
        DailyLogService.add_workout(USER_ID, {"name": "Run", "duration": 0, "type": "Cardio"})

    assert DailyLog.query.count() == 0


def test_weight_updates_profile_metrics(client, auth_headers, create_profile):
    create_profile(auth_headers, height=180, weight=90)

    body = client.post("/api/logs/weight", json={"weight": 75}, headers=auth_headers).get_json()

    assert body["log"]["weight"] == 75
    assert body["updatedProfile"] == {
        "weight": 75,
        "bmi": 23.1,
        "bmiCategory": "Normal",
        "recommendedCalories": 2200,
    }
    profile = HealthProfile.query.filter_by(user_id=USER_ID).one()
    assert profile.bmi == 23.1


def test_weight_without_profile_still_logs(client, auth_headers):
    response = client.post("/api/logs/weight", json={"weight": 75}, headers=auth_headers)

    assert response.status_code == 200
    assert response.get_json()["updatedProfile"] is None
    assert response.get_json()["log"]["weight"] == 75


def test_weight_can_be_overwritten_same_day(client, auth_headers):
    client.post("/api/logs/weight", json={"weight": 75}, headers=auth_headers)
    body = client.post("/api/logs/weight", json={"weight": 74.5}, headers=auth_headers).get_json()

    assert body["log"]["weight"] == 74.5
    assert DailyLog.query.count() == 1


@pytest.mark.parametrize("weight, message", [
    (19.9, "Weight must be between 20 and 500 kg"),
    (501, "Weight must be between 20 and 500 kg"),
    (0, "Please provide a valid weight (in kg)"),
    ("80", "Please provide a valid weight (in kg)"),
])
def test_invalid_weight_rejected(client, auth_headers, weight, message):
    response = client.post("/api/logs/weight", json={"weight": weight}, headers=auth_headers)

    assert response.status_code == 400
    assert response.get_json()["message"] == message


def test_profile_sync_failure_keeps_the_log(app, create_profile, auth_headers, monkeypatch):
    create_profile(auth_headers, height=180, weight=90)

    session = db.session()
    real_commit = session.commit

    def commit_failing_for_profiles():
        if any(isinstance(obj, HealthProfile) for obj in session.dirty):
            raise OperationalError("UPDATE health_profiles", {}, Exception("database is locked"))
        return real_commit()

    monkeypatch.setattr(session, "commit", commit_failing_for_profiles)

    log, profile = DailyLogService.add_weight(USER_ID, 75)
    monkeypatch.undo()

    assert profile is None
    assert DailyLog.query.filter_by(user_id=USER_ID).one().weight == 75
    assert HealthProfile.query.filter_by(user_id=USER_ID).one().weight == 90


def test_today_creates_empty_log(client, auth_headers):
    body = client.get("/api/logs/today", headers=auth_headers).get_json()

    assert body["log"]["waterIntake"] == 0
    assert body["log"]["calories"] == 0
    assert body["log"]["workouts"] == []
    assert body["log"]["weight"] is None


def test_logs_are_scoped_per_user(client, auth_headers, other_headers):
    client.post("/api/logs/water", json={"amount": 300}, headers=auth_headers)

    other = client.get("/api/logs/today", headers=other_headers).get_json()["log"]

    assert other["waterIntake"] == 0
    assert DailyLog.query.filter_by(user_id=OTHER_USER_ID).count() == 1


def test_range_is_sorted_descending(client, auth_headers, make_log):
    base = date(2024, 2, 1)
    for offset in range(5):
        make_log(base + timedelta(days=offset), water=offset * 100)
    make_log(base, user_id=OTHER_USER_ID)

    body = client.get(
        "/api/logs/range?startDate=2024-02-02&endDate=2024-02-04",
        headers=auth_headers,
    ).get_json()

    assert body["count"] == 3
    assert [log["date"] for log in body["logs"]] == ["2024-02-04", "2024-02-03", "2024-02-02"]


@pytest.mark.parametrize("query, status", [
    ("", 400),
    ("?startDate=2024-02-01", 400),
    ("?startDate=2024-13-01&endDate=2024-12-01", 400),
    ("?startDate=2024-03-01&endDate=2024-02-01", 400),
    ("?startDate=2024-02-01T10:00:00&endDate=2024-02-01", 200),
])
def test_range_validation(client, auth_headers, query, status):
    response = client.get(f"/api/logs/range{query}", headers=auth_headers)

    assert response.status_code == status


def test_get_logs_in_range_ascending(app, make_log):
    base = date(2024, 2, 1)
    for offset in (3, 0, 2):
        make_log(base + timedelta(days=offset))

    logs = DailyLogService.get_logs_in_range(USER_ID, base, base + timedelta(days=3))

    assert [log.log_date for log in logs] == [base, base + timedelta(days=2), base + timedelta(days=3)]


def test_get_or_create_recovers_from_create_race(app, make_log, monkeypatch):
    today = date(2024, 4, 1)
    existing_id = make_log(today, water=100).id

    real_find = daily_log_service.find_log
    calls = []

    def find_missing_first(*args):
        calls.append(args)
        return None if len(calls) == 1 else real_find(*args)

    monkeypatch.setattr(daily_log_service, "find_log", find_missing_first)

    log = DailyLogService.get_or_create_today_log(USER_ID, today=today)

    assert log.id == existing_id
    assert log.water_intake == 100
    assert DailyLog.query.filter_by(user_id=USER_ID).count() == 1


@pytest.mark.parametrize("path, body, message", [
    ("/api/logs/water", '{"amount": NaN}', "Please provide a valid water amount (in ml)"),
    ("/api/logs/water", '{"amount": Infinity}', "Please provide a valid water amount (in ml)"),
    ("/api/logs/calories", '{"amount": NaN}', "Please provide a valid calorie amount"),
    ("/api/logs/calories", '{"amount": Infinity}', "Please provide a valid calorie amount"),
    ("/api/logs/weight", '{"weight": NaN}', "Please provide a valid weight (in kg)"),
    ("/api/logs/weight", '{"weight": -Infinity}', "Please provide a valid weight (in kg)"),
    ("/api/logs/workout", '{"name": "Run", "duration": NaN, "type": "Cardio"}',
     "Duration must be a positive number (in minutes)"),
    ("/api/logs/workout", '{"name": "Run", "duration": Infinity, "type": "Cardio"}',
     "Duration must be a positive number (in minutes)"),
])
def test_non_finite_numbers_rejected(client, auth_headers, path, body, message):
    response = client.post(path, data=body, content_type="application/json", headers=auth_headers)

    assert response.status_code == 400
    assert response.get_json()["message"] == message
    assert DailyLog.query.count() == 0


def test_range_accepts_utc_timestamps(client, auth_headers, make_log):
    make_log(date(2024, 2, 1), water=100)

    response = client.get(
        "/api/logs/range?startDate=2024-02-01T00:00:00Z&endDate=2024-02-02T00:00:00Z",
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.get_json()["count"] == 1
