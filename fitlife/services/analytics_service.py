from fitlife.services.daily_log_service import DailyLogService
from fitlife.utils.date_utils import local_today, window_start
from fitlife.utils.utils import round_half_up

WATER_GOAL_ML = 2500


def _mean(values):
    return sum(values) / len(values) if values else 0


def compute_streaks(logs):
    """
    Return (current_streak, longest_streak) for logs sorted by date ascending.

    A streak is a run of consecutive calendar days that each have at least one
    workout. A log with no workouts breaks a run, and so does a calendar day
    with no log at all. The current streak is the run ending at the most
    recent log.
    """
    current = 0
    next_day = None
    for log in reversed(logs):
        if not log.workouts:
            break
        if next_day is not None and (next_day - log.log_date).days != 1:
            break
        current += 1
        next_day = log.log_date

    longest = 0
    run = 0
    previous_day = None
    for log in logs:
        if not log.workouts:
            run = 0
        elif run and (log.log_date - previous_day).days == 1:
            run += 1
        else:
            run = 1
        longest = max(longest, run)
        previous_day = log.log_date

    return current, longest


class AnalyticsService:

    @staticmethod
    def _window_logs(user_id: str, days: int, today=None):
        today = today or local_today()
        start = window_start(days, today)
        return DailyLogService.get_logs_in_range(user_id, start, today)

    @staticmethod
    def weight_trend(user_id: str, days: int, today=None):
        logs = [
            log for log in AnalyticsService._window_logs(user_id, days, today)
            if log.weight is not None
        ]
        dates = [log.log_date.isoformat() for log in logs]
        weights = [log.weight for log in logs]

        weight_change = weights[-1] - weights[0] if len(weights) >= 2 else 0
        if weight_change > 0:
            trend = "increasing"
        elif weight_change < 0:
            trend = "decreasing"
        else:
            trend = "stable"

        return {
            "data": {
                "dates": dates,
                "weights": weights,
            },
            "stats": {
                "dataPoints": len(weights),
                "startWeight": weights[0] if weights else None,
                "currentWeight": weights[-1] if weights else None,
                "weightChange": round_half_up(weight_change, 1),
                "averageWeight": round_half_up(_mean(weights), 1),
                "trend": trend,
            },
        }

    @staticmethod
    def water_trend(user_id: str, days: int, today=None):
        logs = AnalyticsService._window_logs(user_id, days, today)
        intakes = [log.water_intake or 0 for log in logs]

        return {
            "data": {
                "dates": [log.log_date.isoformat() for log in logs],
                "waterIntakes": intakes,
            },
            "stats": {
                "dataPoints": len(logs),
                "averageDaily": round_half_up(_mean(intakes)),
                "totalIntake": sum(intakes),
                "goal": WATER_GOAL_ML,
            },
        }

    @staticmethod
    def calorie_trend(user_id: str, days: int, today=None):
        logs = AnalyticsService._window_logs(user_id, days, today)
        calories = [log.calories or 0 for log in logs]

        return {
            "data": {
                "dates": [log.log_date.isoformat() for log in logs],
                "calories": calories,
            },
            "stats": {
                "dataPoints": len(logs),
                "averageDaily": round_half_up(_mean(calories)),
                "totalIntake": sum(calories),
            },
        }

    @staticmethod
    def workout_summary(user_id: str, days: int, today=None):
        logs = AnalyticsService._window_logs(user_id, days, today)

        total_workouts = 0
        total_minutes = 0
        workout_days = 0
        by_type = {}
        dates = []
        daily_minutes = []

        for log in logs:
            day_minutes = log.workout_minutes
            dates.append(log.log_date.isoformat())
            daily_minutes.append(day_minutes)

            if not log.workouts:
                continue

            workout_days += 1
            total_workouts += len(log.workouts)
            total_minutes += day_minutes
            for workout in log.workouts:
                entry = by_type.setdefault(workout.type.value, {"count": 0, "minutes": 0})
                entry["count"] += 1
                entry["minutes"] += workout.duration

        return {
            "data": {
                "dates": dates,
                "dailyMinutes": daily_minutes,
            },
            "summary": {
                "totalWorkouts": total_workouts,
                "totalMinutes": total_minutes,
                "workoutDays": workout_days,
                "averagePerDay": round_half_up(total_minutes / workout_days) if workout_days else 0,
                "workoutsByType": by_type,
                "consistency": round_half_up(workout_days / days * 100),
            },
        }

    @staticmethod
    def dashboard(user_id: str, days: int, today=None):
        logs = AnalyticsService._window_logs(user_id, days, today)
        current_streak, longest_streak = compute_streaks(logs)

        workout_logs = [log for log in logs if log.workouts]

        analytics = {
            "totalDays": days,
            "loggedDays": len(logs),
            "averageCalories": round_half_up(_mean([log.calories or 0 for log in logs])),
            "averageWater": round_half_up(_mean([log.water_intake or 0 for log in logs])),
            "totalWorkouts": sum(len(log.workouts) for log in workout_logs),
            "workoutDays": len(workout_logs),
            "currentStreak": current_streak,
            "longestStreak": longest_streak,
        }

        return {
            "analytics": analytics,
            "chartData": {
                "dates": [log.log_date.isoformat() for log in logs],
                "calories": [log.calories or 0 for log in logs],
                "water": [log.water_intake or 0 for log in logs],
                "workouts": [len(log.workouts) for log in logs],
            },
        }
