from .analytics_service import AnalyticsService
from .challenge_service import ChallengeService
from .daily_log_service import DailyLogService
from .health_profile_service import HealthProfileService
from .recommendation_service import RecommendationService
