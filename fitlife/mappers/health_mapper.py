from fitlife.enums.app_enum import ActivityLevelEnum, GoalTypeEnum


ACTIVITY_BASE_CALORIES = {
    ActivityLevelEnum.low: 1800,
    ActivityLevelEnum.moderate: 2200,
    ActivityLevelEnum.high: 2600,
}

GOAL_CALORIE_FACTOR = {
    GoalTypeEnum.weight_loss: 0.875,
    GoalTypeEnum.maintain: 1.0,
    GoalTypeEnum.muscle_gain: 1.15,
}

ACTIVITY_TO_DURATION_FACTOR = {
    ActivityLevelEnum.low: 0.7,
    ActivityLevelEnum.moderate: 1.0,
    ActivityLevelEnum.high: 1.2,
}

ACTIVITY_TO_LEVEL_TAG = {
    ActivityLevelEnum.low: "Beginner level: ",
    ActivityLevelEnum.moderate: "",
    ActivityLevelEnum.high: "Advanced level: ",
}

# (lower bound inclusive, category); checked top-down
BMI_CATEGORY_THRESHOLDS = [
    (30.0, "Obese"),
    (25.0, "Overweight"),
    (18.5, "Normal"),
]
