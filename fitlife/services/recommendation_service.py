from fitlife.data import (
    DIET_PLANS,
    EXERCISE_PLANS,
    GOAL_DIET_TIPS,
    GOAL_EXERCISE_TIPS,
    GOAL_EXTRA_WORKOUTS,
    PORTION_NOTES,
)
from fitlife.data.recommendation_plans import GENERAL_TIPS, MEAL_TIMING, WATER_INTAKE_ADVICE
from fitlife.enums.app_enum import (
    ActivityLevelEnum,
    BMICategoryEnum,
    DietTypeEnum,
    GoalTypeEnum,
    parse_enum,
)
from fitlife.errors import ValidationError
from fitlife.mappers.health_mapper import ACTIVITY_TO_DURATION_FACTOR, ACTIVITY_TO_LEVEL_TAG
from fitlife.services.health_profile_service import HealthProfileService
from fitlife.utils.utils import round_half_up


def get_exercise_plan(bmi_category, goals, activity_level):
    """
    Build the weekly workout list for a profile:
    - base plan for the BMI category (Normal if unknown)
    - one extra session for Weight Loss (HIIT) or Muscle Gain (Strength)
    - durations scaled to the activity level, with a level tag on the description
    """
    category = parse_enum(BMICategoryEnum, bmi_category, BMICategoryEnum.normal)
    goal = parse_enum(GoalTypeEnum, goals, GoalTypeEnum.maintain)
    level = parse_enum(ActivityLevelEnum, activity_level, ActivityLevelEnum.moderate)

    workouts = list(EXERCISE_PLANS[category])
    extra = GOAL_EXTRA_WORKOUTS[goal]
    if extra:
        workouts.append(extra)

    factor = ACTIVITY_TO_DURATION_FACTOR[level]
    tag = ACTIVITY_TO_LEVEL_TAG[level]
    return [
        {
            "type": w["type"].value,
            "duration": round_half_up(w["duration"] * factor),
            "description": f"{tag}{w['description']}",
        }
        for w in workouts
    ]


def get_diet_plan(bmi_category, goals, diet_type=DietTypeEnum.veg):
    diet = parse_enum(DietTypeEnum, diet_type, DietTypeEnum.nonveg)
    goal = parse_enum(GoalTypeEnum, goals, GoalTypeEnum.maintain)
    category = parse_enum(BMICategoryEnum, bmi_category)

    plan = {meal: list(options) for meal, options in DIET_PLANS[diet][goal].items()}

    note = PORTION_NOTES.get(category)
    if note:
        plan["snacks"].append(note)
    return plan


def parse_diet_type(value):
    if not value:
        return DietTypeEnum.veg
    diet = parse_enum(DietTypeEnum, value)
    if diet is None:
        raise ValidationError('Invalid diet type. Use "veg" or "nonveg".')
    return diet


class RecommendationService:

    @staticmethod
    def exercise(user_id: str):
        profile = HealthProfileService.require_profile(user_id)
        plan = get_exercise_plan(profile.bmi_category, profile.goals, profile.activity_level)

        return {
            "message": "Personalized exercise plan generated",
            "profile": {
                "bmiCategory": profile.bmi_category.value,
                "goals": profile.goals.value,
                "activityLevel": profile.activity_level.value,
            },
            "exercisePlan": plan,
            "recommendations": {
                "totalWorkouts": len(plan),
                "weeklyMinutes": sum(w["duration"] for w in plan),
                "tip": GOAL_EXERCISE_TIPS[profile.goals],
            },
        }

    @staticmethod
    def diet(user_id: str, diet_type=None):
        diet = parse_diet_type(diet_type)
        profile = HealthProfileService.require_profile(user_id)
        plan = get_diet_plan(profile.bmi_category, profile.goals, diet)

        return {
            "message": "Personalized diet plan generated",
            "profile": {
                "bmiCategory": profile.bmi_category.value,
                "goals": profile.goals.value,
                "recommendedCalories": profile.recommended_calories,
            },
            "dietType": diet.value,
            "dietPlan": plan,
            "recommendations": {
                "dailyCalories": profile.recommended_calories,
                "waterIntake": WATER_INTAKE_ADVICE,
                "mealTiming": dict(MEAL_TIMING),
                "tip": GOAL_DIET_TIPS[profile.goals],
            },
        }

    @staticmethod
    def complete(user_id: str, diet_type=None):
        diet = parse_diet_type(diet_type)
        profile = HealthProfileService.require_profile(user_id)
        exercise_plan = get_exercise_plan(profile.bmi_category, profile.goals, profile.activity_level)
        diet_plan = get_diet_plan(profile.bmi_category, profile.goals, diet)

        return {
            "message": "Complete personalized health plan generated",
            "profile": {
                "name": profile.name,
                "age": profile.age,
                "bmi": profile.bmi,
                "bmiCategory": profile.bmi_category.value,
                "goals": profile.goals.value,
                "activityLevel": profile.activity_level.value,
                "recommendedCalories": profile.recommended_calories,
            },
            "exercisePlan": {
                "workouts": exercise_plan,
                "weeklyMinutes": sum(w["duration"] for w in exercise_plan),
            },
            "dietPlan": {
                "type": diet.value,
                "meals": diet_plan,
                "dailyCalories": profile.recommended_calories,
            },
            "generalTips": list(GENERAL_TIPS),
        }
