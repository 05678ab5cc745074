from datetime import date, timedelta
from unittest import mock

from fitlife.enums.app_enum import ChallengeTypeEnum
from fitlife.extensions import db
from fitlife.models import Challenge
from fitlife.services import challenge_service
from fitlife.services.challenge_service import ChallengeService
from fitlife.utils.date_utils import get_week_start

from .conftest import OTHER_USER_ID, USER_ID


def _first_option_rng():
    rng = mock.Mock()
    rng.choice.side_effect = lambda options: options[0]
    return rng


def test_week_start_is_always_monday():
    day = date(2024, 1, 1)  # a Monday
    for offset in range(60):
        current = day + timedelta(days=offset)
        start = get_week_start(current)
        assert start.weekday() == 0
        assert 0 <= (current - start).days <= 6


def test_week_start_for_sunday_is_previous_monday():
    assert get_week_start(date(2024, 3, 10)) == date(2024, 3, 4)  # Sunday
    assert get_week_start(date(2024, 3, 11)) == date(2024, 3, 11)  # Monday


def test_get_or_create_requires_profile(client, auth_headers):
    response = client.get("/api/challenges/daily", headers=auth_headers)

    assert response.status_code == 404
    assert response.get_json()["message"] == "Health profile not found. Please create your profile first."


def test_daily_challenge_is_idempotent_within_the_day(client, auth_headers, create_profile):
    create_profile(auth_headers, goals="Weight Loss")

    first = client.get("/api/challenges/daily", headers=auth_headers).get_json()["challenge"]
    second = client.get("/api/challenges/daily", headers=auth_headers).get_json()["challenge"]

    assert first == second
    assert first["type"] == "Daily"
    assert first["isCompleted"] is False
    assert first["dateAssigned"] == date.today().isoformat()
    assert Challenge.query.count() == 1


def test_weekly_challenge_anchored_to_monday(client, auth_headers, create_profile):
    create_profile(auth_headers)

    challenge = client.get("/api/challenges/weekly", headers=auth_headers).get_json()["challenge"]

    assert challenge["type"] == "Weekly"
    assert challenge["dateAssigned"] == get_week_start(date.today()).isoformat()


def test_weekly_challenge_shared_across_the_week(app, create_profile, auth_headers):
    create_profile(auth_headers)
    monday = date(2024, 5, 6)

    first = ChallengeService.get_or_create(USER_ID, "Weekly", today=monday, rng=_first_option_rng())
    sunday = ChallengeService.get_or_create(USER_ID, "Weekly", today=monday + timedelta(days=6))
    next_week = ChallengeService.get_or_create(USER_ID, "Weekly", today=monday + timedelta(days=7))

    assert sunday.id == first.id
    assert next_week.id != first.id
    assert next_week.date_assigned == date(2024, 5, 13)


def test_obese_profile_gets_special_challenge(client, auth_headers, create_profile):
    create_profile(auth_headers, height=160, weight=100)

    challenge = client.get("/api/challenges/daily", headers=auth_headers).get_json()["challenge"]

    assert challenge["title"] == "Low-Impact Cardio Session"


def test_get_or_create_recovers_from_create_race(app, create_profile, auth_headers, monkeypatch):
    create_profile(auth_headers)
    today = date(2024, 5, 8)
    existing = ChallengeService.get_or_create(USER_ID, ChallengeTypeEnum.daily, today=today)
    existing_id = existing.id

    real_find = challenge_service.find_challenge
    calls = []

    def find_missing_first(*args):
        calls.append(args)
        # the first lookup happens "before" the other request committed
        return None if len(calls) == 1 else real_find(*args)

    monkeypatch.setattr(challenge_service, "find_challenge", find_missing_first)

    challenge = ChallengeService.get_or_create(USER_ID, ChallengeTypeEnum.daily, today=today)

    assert challenge.id == existing_id
    assert len(calls) == 2
    assert Challenge.query.filter_by(user_id=USER_ID).count() == 1


def test_complete_challenge_once(client, auth_headers, create_profile):
    create_profile(auth_headers)
    challenge_id = client.get("/api/challenges/daily", headers=auth_headers).get_json()["challenge"]["id"]

    first = client.put(f"/api/challenges/complete/{challenge_id}", headers=auth_headers)
    second = client.put(f"/api/challenges/complete/{challenge_id}", headers=auth_headers)

    assert first.status_code == 200
    assert first.get_json()["challenge"]["isCompleted"] is True
    assert second.status_code == 400
    assert second.get_json()["message"] == "Challenge already completed"
    assert db.session.get(Challenge, challenge_id).is_completed is True


def test_complete_rejects_other_users_challenge(client, auth_headers, other_headers, create_profile):
    create_profile(auth_headers)
    challenge_id = client.get("/api/challenges/daily", headers=auth_headers).get_json()["challenge"]["id"]

    response = client.put(f"/api/challenges/complete/{challenge_id}", headers=other_headers)

    assert response.status_code == 404
    assert db.session.get(Challenge, challenge_id).is_completed is False


def test_complete_unknown_or_malformed_id(client, auth_headers):
    assert client.put("/api/challenges/complete/9999", headers=auth_headers).status_code == 404
    assert client.put("/api/challenges/complete/abc", headers=auth_headers).status_code == 404


def _add_challenge(user_id, challenge_type, day, completed=False):
    challenge = Challenge(
        user_id=user_id,
        type=ChallengeTypeEnum(challenge_type),
        title=f"{challenge_type} {day}",
        description="test",
        date_assigned=day,
        is_completed=completed,
    )
    db.session.add(challenge)
    db.session.commit()
    return challenge


def test_history_stats_and_ordering(app):
    today = date(2024, 6, 20)
    _add_challenge(USER_ID, "Daily", today, completed=True)
    _add_challenge(USER_ID, "Daily", today - timedelta(days=1), completed=True)
    _add_challenge(USER_ID, "Daily", today - timedelta(days=2))
    _add_challenge(USER_ID, "Weekly", get_week_start(today))
    _add_challenge(USER_ID, "Daily", today - timedelta(days=40), completed=True)
    _add_challenge(OTHER_USER_ID, "Daily", today, completed=True)

    challenges, stats = ChallengeService.history(USER_ID, 30, today=today)

    assert [c.date_assigned for c in challenges] == sorted((c.date_assigned for c in challenges), reverse=True)
    assert stats == {"total": 4, "completed": 2, "pending": 2, "completionRate": 50}

    daily, daily_stats = ChallengeService.history(USER_ID, 30, "Daily", today=today)
    assert all(c.type == ChallengeTypeEnum.daily for c in daily)
    assert daily_stats["total"] == 3
    assert daily_stats["completionRate"] == 67


def test_history_caps_results(app):
    today = date(2024, 6, 20)
    for offset in range(60):
        _add_challenge(USER_ID, "Daily", today - timedelta(days=offset))

    challenges, stats = ChallengeService.history(USER_ID, 90, today=today)

    assert len(challenges) == 50
    assert stats["total"] == 50
    assert challenges[0].date_assigned == today


def test_history_endpoint(client, auth_headers):
    empty = client.get("/api/challenges/history", headers=auth_headers).get_json()
    bad_type = client.get("/api/challenges/history?type=Monthly", headers=auth_headers)

    assert empty["success"] is True
    assert empty["challenges"] == []
    assert empty["stats"] == {"total": 0, "completed": 0, "pending": 0, "completionRate": 0}
    assert bad_type.status_code == 400
