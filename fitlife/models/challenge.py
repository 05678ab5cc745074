from datetime import datetime

from fitlife.enums.app_enum import ChallengeTypeEnum
from fitlife.extensions import BigIntegerPK, db
from fitlife.models.types import enum_column_type


class Challenge(db.Model):
    __tablename__ = "challenges"

    id = db.Column(BigIntegerPK, primary_key=True)
    user_id = db.Column(db.String(64), nullable=False, index=True)
    type = db.Column(enum_column_type(ChallengeTypeEnum), nullable=False)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    is_completed = db.Column(db.Boolean, nullable=False, default=False)
    # period anchor: the day for Daily, the Monday of the week for Weekly
    date_assigned = db.Column(db.Date, nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        db.UniqueConstraint("user_id", "type", "date_assigned", name="uk_challenge_user_type_date"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "type": self.type.value,
            "title": self.title,
            "description": self.description,
            "isCompleted": self.is_completed,
            "dateAssigned": self.date_assigned.isoformat(),
        }
