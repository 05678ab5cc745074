from fitlife.enums.app_enum import ActivityLevelEnum, BMICategoryEnum, GoalTypeEnum, parse_enum
from fitlife.mappers.health_mapper import (
    ACTIVITY_BASE_CALORIES,
    BMI_CATEGORY_THRESHOLDS,
    GOAL_CALORIE_FACTOR,
)
from fitlife.utils.utils import round_half_up


def calc_bmi(height_cm, weight_kg):
    """
    BMI = weight (kg) / height (m)^2, rounded to one decimal place
    """
    height_m = height_cm / 100
    return round_half_up(weight_kg / (height_m * height_m), 1)


def get_bmi_category(bmi):
    for lower_bound, category in BMI_CATEGORY_THRESHOLDS:
        if bmi >= lower_bound:
            return BMICategoryEnum(category)
    return BMICategoryEnum.underweight


def calc_recommended_calories(activity_level, goals):
    """
    Daily calorie target: base calories for the activity level,
    scaled by the goal (-12.5% for weight loss, +15% for muscle gain).
    """
    level = parse_enum(ActivityLevelEnum, activity_level)
    if level is None:
        raise ValueError(f"Unknown activity level: {activity_level!r}")

    goal = parse_enum(GoalTypeEnum, goals, GoalTypeEnum.maintain)
    return round_half_up(ACTIVITY_BASE_CALORIES[level] * GOAL_CALORIE_FACTOR[goal])


def apply_health_metrics(profile):
    """Recompute every derived field of a HealthProfile from its inputs."""
    profile.bmi = calc_bmi(profile.height, profile.weight)
    profile.bmi_category = get_bmi_category(profile.bmi)
    profile.recommended_calories = calc_recommended_calories(profile.activity_level, profile.goals)
    return profile
