from datetime import date, datetime, timedelta

from fitlife.errors import ValidationError


def local_today():
    # Logs and challenges are keyed by the server's local calendar day
    return date.today()


def parse_date(value: str, field: str):
    """Parse YYYY-MM-DD (a full ISO timestamp is truncated to its day)."""
    if isinstance(value, str) and value.endswith("Z"):
        # fromisoformat only accepts the Z suffix from Python 3.11
        value = value[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(value).date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date format for {field}, use YYYY-MM-DD")


def get_week_start(day: date):
    """Monday of the week containing ``day``; Sunday is the last day of its week."""
    return day - timedelta(days=day.weekday())


def window_start(days: int, today: date):
    """First day of the inclusive window of ``days`` days ending today."""
    return today - timedelta(days=days - 1)
