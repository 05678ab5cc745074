# fitlife/services/daily_log_service.py
import logging
from datetime import datetime

from sqlalchemy.exc import IntegrityError

from fitlife.enums.app_enum import WorkoutTypeEnum
from fitlife.errors import ValidationError
from fitlife.extensions import db
from fitlife.models.daily_log import DailyLog, Workout
from fitlife.services.health_profile_service import HealthProfileService
from fitlife.utils.date_utils import local_today, parse_date
from fitlife.utils.utils import is_number
from fitlife.utils.validators import require_enum, require_number_in_range, require_positive_amount

logger = logging.getLogger(__name__)


def find_log(user_id: str, log_date):
    return DailyLog.query.filter_by(user_id=user_id, log_date=log_date).first()


def get_or_create_log(user_id: str, log_date):
    """
    Return the user's log for ``log_date``, creating an empty one if needed.
    If a concurrent request inserts the same (user, day) first, the unique
    constraint rejects our insert and the winner's row is returned instead.
    """
    log = find_log(user_id, log_date)
    if log:
        return log

    log = DailyLog(user_id=user_id, log_date=log_date, water_intake=0, calories=0)
    db.session.add(log)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        log = find_log(user_id, log_date)
        if log is None:
            raise
        logger.warning("[DailyLogService] Lost create race for %s on %s, using existing log", user_id, log_date)
        return log

    logger.info("[DailyLogService] Created DailyLog for %s on %s", user_id, log_date)
    return log


def _increment(log, column, amount):
    # Single UPDATE so concurrent increments are never lost
    (
        DailyLog.query
        .filter_by(id=log.id)
        .update(
            {column: column + amount, DailyLog.updated_at: datetime.utcnow()},
            synchronize_session=False
        )
    )
    db.session.commit()
    return log


class DailyLogService:

    @staticmethod
    def get_or_create_today_log(user_id: str, today=None):
        return get_or_create_log(user_id, today or local_today())

    @staticmethod
    def add_water(user_id: str, amount, today=None):
        require_positive_amount(amount, "Please provide a valid water amount (in ml)")

        log = DailyLogService.get_or_create_today_log(user_id, today)
        return _increment(log, DailyLog.water_intake, amount)

    @staticmethod
    def add_calories(user_id: str, amount, today=None):
        require_positive_amount(amount, "Please provide a valid calorie amount")

        log = DailyLogService.get_or_create_today_log(user_id, today)
        return _increment(log, DailyLog.calories, amount)

    @staticmethod
    def add_workout(user_id: str, payload: dict, today=None):
        payload = payload or {}
        name = payload.get("name")
        duration = payload.get("duration")
        workout_type = payload.get("type")

        if any(value in (None, "") for value in (name, duration, workout_type)):
            raise ValidationError("Please provide workout name, duration, and type")

        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Workout name must be a non-empty string")

        workout_type = require_enum(workout_type, WorkoutTypeEnum, "workout type")

        if not is_number(duration) or duration <= 0:
            raise ValidationError("Duration must be a positive number (in minutes)")
        if int(duration) != duration:
            raise ValidationError("Duration must be a whole number of minutes")

        log = DailyLogService.get_or_create_today_log(user_id, today)

        # Appending is a plain INSERT of a child row, never a rewrite of the log
        db.session.add(Workout(
            daily_log_id=log.id,
            name=name.strip(),
            duration=int(duration),
            type=workout_type
        ))
        db.session.commit()
        return log

    @staticmethod
    def add_weight(user_id: str, weight, today=None):
        """
        Record today's weight and push it to the health profile.
        Returns (log, profile); profile is None when the user has none.
        """
        if not is_number(weight) or weight <= 0:
            raise ValidationError("Please provide a valid weight (in kg)")
        require_number_in_range(weight, "Weight", 20, 500, "kg")

        log = DailyLogService.get_or_create_today_log(user_id, today)
        (
            DailyLog.query
            .filter_by(id=log.id)
            .update(
                {DailyLog.weight: weight, DailyLog.updated_at: datetime.utcnow()},
                synchronize_session=False
            )
        )
        db.session.commit()

        profile = HealthProfileService.sync_weight(user_id, weight)
        return log, profile

    @staticmethod
    def get_logs_in_range(user_id: str, start, end, descending: bool = False):
        order = DailyLog.log_date.desc() if descending else DailyLog.log_date.asc()
        return (
            DailyLog.query
            .filter(DailyLog.user_id == user_id)
            .filter(DailyLog.log_date >= start)
            .filter(DailyLog.log_date <= end)
            .order_by(order)
            .all()
        )

    @staticmethod
    def get_logs_by_date_range(user_id: str, start_date: str | None, end_date: str | None):
        if not start_date or not end_date:
            raise ValidationError("Please provide startDate and endDate")

        start = parse_date(start_date, "startDate")
        end = parse_date(end_date, "endDate")
        if start > end:
            raise ValidationError("startDate must not be after endDate")

        return DailyLogService.get_logs_in_range(user_id, start, end, descending=True)
