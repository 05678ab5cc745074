from datetime import datetime

from fitlife.enums.app_enum import ActivityLevelEnum, BMICategoryEnum, GenderEnum, GoalTypeEnum
from fitlife.extensions import BigIntegerPK, db
from fitlife.models.types import enum_column_type


class HealthProfile(db.Model):
    __tablename__ = "health_profiles"

    id = db.Column(BigIntegerPK, primary_key=True)
    user_id = db.Column(db.String(64), nullable=False, unique=True, index=True)
    name = db.Column(db.String(120))

    age = db.Column(db.Integer, nullable=False)
    gender = db.Column(enum_column_type(GenderEnum), nullable=False)
    height = db.Column(db.Float, nullable=False)  # cm
    weight = db.Column(db.Float, nullable=False)  # kg
    activity_level = db.Column(enum_column_type(ActivityLevelEnum), nullable=False)
    goals = db.Column(enum_column_type(GoalTypeEnum), nullable=False)
    health_conditions = db.Column(db.JSON, nullable=False, default=list)

    # derived, see fitlife.utils.health_utils.apply_health_metrics
    bmi = db.Column(db.Float, nullable=False)
    bmi_category = db.Column(enum_column_type(BMICategoryEnum), nullable=False)
    recommended_calories = db.Column(db.Integer, nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "age": self.age,
            "gender": self.gender.value,
            "height": self.height,
            "weight": self.weight,
            "activityLevel": self.activity_level.value,
            "goals": self.goals.value,
            "healthConditions": list(self.health_conditions or []),
            "bmi": self.bmi,
            "bmiCategory": self.bmi_category.value,
            "recommendedCalories": self.recommended_calories,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
