import random

from fitlife.data import CHALLENGE_TEMPLATES, SPECIAL_CHALLENGES
from fitlife.enums.app_enum import BMICategoryEnum, ChallengeTypeEnum, GoalTypeEnum, parse_enum


def generate_challenge(challenge_type, bmi_category, goals, rng=None):
    """
    Pick a challenge {title, description} for the user.

    Obese and Underweight users always get the fixed low-intensity challenge
    for the period; everyone else gets a uniformly random entry from their
    goal's list (Maintain when the goal is unknown). ``rng`` is anything with
    a ``choice`` method and defaults to the ``random`` module.
    """
    challenge_type = ChallengeTypeEnum(challenge_type)
    rng = rng or random

    category = parse_enum(BMICategoryEnum, bmi_category)
    special = SPECIAL_CHALLENGES[challenge_type].get(category)
    if special:
        return dict(special)

    goal = parse_enum(GoalTypeEnum, goals, GoalTypeEnum.maintain)
    return dict(rng.choice(CHALLENGE_TEMPLATES[challenge_type][goal]))
