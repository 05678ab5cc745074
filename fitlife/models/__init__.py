from .health_profile import HealthProfile
from .daily_log import DailyLog, Workout
from .challenge import Challenge
