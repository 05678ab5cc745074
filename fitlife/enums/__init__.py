from .app_enum import (
    ActivityLevelEnum,
    BMICategoryEnum,
    ChallengeTypeEnum,
    DietTypeEnum,
    GenderEnum,
    GoalTypeEnum,
    WorkoutTypeEnum,
)
