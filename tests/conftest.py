import pytest
from flask_jwt_extended import create_access_token

from fitlife import create_app
from fitlife.config import Config
from fitlife.enums.app_enum import WorkoutTypeEnum
from fitlife.extensions import db
from fitlife.models import DailyLog, Workout

USER_ID = "user-1"
OTHER_USER_ID = "user-2"

PROFILE_PAYLOAD = {
    "age": 30,
    "gender": "Male",
    "height": 180,
    "weight": 80,
    "activityLevel": "Moderate",
    "goals": "Maintain",
    "healthConditions": "",
}


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET_KEY = "test-secret-key-which-is-long-enough-for-hs256"
    LOG_LEVEL = "WARNING"


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_headers(app):
    def _make(user_id=USER_ID, **kwargs):
        token = create_access_token(identity=user_id, **kwargs)
        return {"Authorization": f"Bearer {token}"}
    return _make


@pytest.fixture
def auth_headers(make_headers):
    return make_headers(USER_ID)


@pytest.fixture
def other_headers(make_headers):
    return make_headers(OTHER_USER_ID)


@pytest.fixture
def create_profile(client):
    def _create(headers, **overrides):
        payload = {**PROFILE_PAYLOAD, **overrides}
        response = client.post("/api/health/profile", json=payload, headers=headers)
        assert response.status_code == 201, response.get_json()
        return response.get_json()["profile"]
    return _create


@pytest.fixture
def make_log(app):
    """Insert a DailyLog directly; workouts are (name, minutes, type) tuples."""
    def _make(day, user_id=USER_ID, water=0, calories=0, weight=None, workouts=()):
        log = DailyLog(
            user_id=user_id,
            log_date=day,
            water_intake=water,
            calories=calories,
            weight=weight,
        )
        db.session.add(log)
        db.session.flush()
        for name, minutes, workout_type in workouts:
            db.session.add(Workout(
                daily_log_id=log.id,
                name=name,
                duration=minutes,
                type=WorkoutTypeEnum(workout_type),
            ))
        db.session.commit()
        return log
    return _make
