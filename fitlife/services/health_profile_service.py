import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from fitlife.enums.app_enum import ActivityLevelEnum, GenderEnum, GoalTypeEnum
from fitlife.errors import ConflictError, NotFoundError, ValidationError
from fitlife.extensions import db
from fitlife.models.health_profile import HealthProfile
from fitlife.utils.health_utils import apply_health_metrics
from fitlife.utils.validators import require_enum, require_number_in_range

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("age", "gender", "height", "weight", "activityLevel", "goals")


def _validate_age(value):
    require_number_in_range(value, "Age", 1, 150)
    if int(value) != value:
        raise ValidationError("Age must be a whole number")
    return int(value)


def _parse_health_conditions(value):
    """
    Accept the single free-text field the web form sends, or a list.
    Blank entries are dropped.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [value.strip()] if value.strip() else []
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return [item.strip() for item in value if item.strip()]
    raise ValidationError("healthConditions must be a string or a list of strings")


def _parse_name(value):
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError("name must be a string")
    return value.strip() or None


# payload key -> (model attribute, parser)
FIELD_PARSERS = {
    "name": ("name", _parse_name),
    "age": ("age", _validate_age),
    "gender": ("gender", lambda v: require_enum(v, GenderEnum, "gender")),
    "height": ("height", lambda v: require_number_in_range(v, "Height", 50, 300, "cm")),
    "weight": ("weight", lambda v: require_number_in_range(v, "Weight", 20, 500, "kg")),
    "activityLevel": ("activity_level", lambda v: require_enum(v, ActivityLevelEnum, "activity level")),
    "goals": ("goals", lambda v: require_enum(v, GoalTypeEnum, "goal")),
    "healthConditions": ("health_conditions", _parse_health_conditions),
}


def _parse_payload(payload: dict):
    values = {}
    for key, (attribute, parser) in FIELD_PARSERS.items():
        if key in payload:
            values[attribute] = parser(payload[key])
    return values


class HealthProfileService:

    @staticmethod
    def find_profile(user_id: str):
        return HealthProfile.query.filter_by(user_id=user_id).first()

    @staticmethod
    def require_profile(user_id: str):
        profile = HealthProfileService.find_profile(user_id)
        if not profile:
            raise NotFoundError("Health profile not found. Please create your profile first.")
        return profile

    @staticmethod
    def get_profile(user_id: str):
        profile = HealthProfileService.find_profile(user_id)
        if not profile:
            raise NotFoundError("Health profile not found")
        return profile

    @staticmethod
    def create_profile(user_id: str, payload: dict):
        if HealthProfileService.find_profile(user_id):
            raise ConflictError("Health profile already exists. Use PUT to update.")

        payload = payload or {}
        if any(payload.get(field) in (None, "") for field in REQUIRED_FIELDS):
            raise ValidationError("Please provide all required fields")

        values = _parse_payload(payload)
        values.setdefault("health_conditions", [])

        profile = HealthProfile(user_id=user_id, **values)
        apply_health_metrics(profile)
        db.session.add(profile)
        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            if HealthProfileService.find_profile(user_id) is None:
                raise
            logger.warning("Lost create race for health profile of user %s", user_id)
            raise ConflictError("Health profile already exists. Use PUT to update.")

        logger.info("Created health profile for user %s (BMI %s)", user_id, profile.bmi)
        return profile

    @staticmethod
    def update_profile(user_id: str, payload: dict):
        profile = HealthProfileService.find_profile(user_id)
        if not profile:
            raise NotFoundError("Health profile not found. Please create one first.")

        values = _parse_payload(payload or {})
        for attribute, value in values.items():
            setattr(profile, attribute, value)

        apply_health_metrics(profile)
        db.session.commit()
        return profile

    @staticmethod
    def sync_weight(user_id: str, weight):
        """
        Copy a newly logged weight onto the profile and refresh its derived
        metrics. Returns the profile, or None when the user has none yet or
        the update failed. The daily log stays the source of truth either way.
        """
        profile = HealthProfileService.find_profile(user_id)
        if not profile:
            return None

        profile.weight = weight
        apply_health_metrics(profile)
        try:
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            logger.warning("Could not sync weight to health profile for user %s", user_id, exc_info=True)
            return None
        return profile
