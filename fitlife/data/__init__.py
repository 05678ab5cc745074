from fitlife.enums.app_enum import BMICategoryEnum, ChallengeTypeEnum, DietTypeEnum, GoalTypeEnum

from .challenge_templates import CHALLENGE_TEMPLATES, SPECIAL_CHALLENGES
from .recommendation_plans import (
    DIET_PLANS,
    EXERCISE_PLANS,
    GOAL_DIET_TIPS,
    GOAL_EXERCISE_TIPS,
    GOAL_EXTRA_WORKOUTS,
    PORTION_NOTES,
)


def check_exhaustive(table, enum_cls, name):
    """Fail at import time if a lookup table is missing a key of enum_cls."""
    missing = [member.value for member in enum_cls if member not in table]
    if missing:
        raise RuntimeError(f"{name} is missing entries for: {', '.join(missing)}")


check_exhaustive(EXERCISE_PLANS, BMICategoryEnum, "EXERCISE_PLANS")
check_exhaustive(GOAL_EXTRA_WORKOUTS, GoalTypeEnum, "GOAL_EXTRA_WORKOUTS")
check_exhaustive(PORTION_NOTES, BMICategoryEnum, "PORTION_NOTES")
check_exhaustive(GOAL_EXERCISE_TIPS, GoalTypeEnum, "GOAL_EXERCISE_TIPS")
check_exhaustive(GOAL_DIET_TIPS, GoalTypeEnum, "GOAL_DIET_TIPS")
check_exhaustive(DIET_PLANS, DietTypeEnum, "DIET_PLANS")
for _diet_type, _plans in DIET_PLANS.items():
    check_exhaustive(_plans, GoalTypeEnum, f"DIET_PLANS[{_diet_type.value}]")

check_exhaustive(CHALLENGE_TEMPLATES, ChallengeTypeEnum, "CHALLENGE_TEMPLATES")
check_exhaustive(SPECIAL_CHALLENGES, ChallengeTypeEnum, "SPECIAL_CHALLENGES")
for _challenge_type, _templates in CHALLENGE_TEMPLATES.items():
    check_exhaustive(_templates, GoalTypeEnum, f"CHALLENGE_TEMPLATES[{_challenge_type.value}]")
