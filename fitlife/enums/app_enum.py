from enum import Enum


class GenderEnum(str, Enum):
    male = "Male"
    female = "Female"
    other = "Other"


class ActivityLevelEnum(str, Enum):
    low = "Low"
    moderate = "Moderate"
    high = "High"


class GoalTypeEnum(str, Enum):
    weight_loss = "Weight Loss"
    maintain = "Maintain"
    muscle_gain = "Muscle Gain"


class BMICategoryEnum(str, Enum):
    underweight = "Underweight"
    normal = "Normal"
    overweight = "Overweight"
    obese = "Obese"


class WorkoutTypeEnum(str, Enum):
    cardio = "Cardio"
    strength = "Strength"
    hiit = "HIIT"
    yoga = "Yoga"
    flexibility = "Flexibility"


class ChallengeTypeEnum(str, Enum):
    daily = "Daily"
    weekly = "Weekly"


class DietTypeEnum(str, Enum):
    veg = "veg"
    nonveg = "nonveg"


def enum_values(enum_cls):
    return [member.value for member in enum_cls]


def parse_enum(enum_cls, value, default=None):
    """Return the member whose value is ``value``, or ``default``."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return default
