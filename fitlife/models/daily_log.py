from datetime import datetime

from fitlife.enums.app_enum import WorkoutTypeEnum
from fitlife.extensions import BigIntegerPK, db
from fitlife.models.types import enum_column_type


class DailyLog(db.Model):
    __tablename__ = "daily_logs"

    id = db.Column(BigIntegerPK, primary_key=True)
    user_id = db.Column(db.String(64), nullable=False, index=True)
    log_date = db.Column(db.Date, nullable=False)
    water_intake = db.Column(db.Float, nullable=False, default=0)  # ml
    calories = db.Column(db.Float, nullable=False, default=0)
    weight = db.Column(db.Float)  # kg
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    workouts = db.relationship(
        "Workout",
        order_by="Workout.id",
        lazy="selectin",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        db.UniqueConstraint("user_id", "log_date", name="uk_daily_log_user_date"),
    )

    @property
    def workout_minutes(self):
        return sum(w.duration for w in self.workouts)

    def to_dict(self):
        return {
            "id": self.id,
            "date": self.log_date.isoformat(),
            "waterIntake": self.water_intake or 0,
            "calories": self.calories or 0,
            "weight": self.weight,
            "workouts": [w.to_dict() for w in self.workouts],
        }


class Workout(db.Model):
    __tablename__ = "daily_log_workouts"

    id = db.Column(BigIntegerPK, primary_key=True)

    daily_log_id = db.Column(
        BigIntegerPK,
        db.ForeignKey("daily_logs.id"),
        nullable=False,
        index=True
    )

    name = db.Column(db.String(120), nullable=False)
    duration = db.Column(db.Integer, nullable=False)  # minutes
    type = db.Column(enum_column_type(WorkoutTypeEnum), nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "duration": self.duration,
            "type": self.type.value,
        }
