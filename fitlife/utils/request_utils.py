from flask import current_app

from fitlife.errors import ValidationError


def parse_days(value):
    """Parse the ``days`` query parameter, defaulting from config."""
    default = current_app.config["DEFAULT_ANALYTICS_DAYS"]
    maximum = current_app.config["MAX_ANALYTICS_DAYS"]

    if value is None or value == "":
        return default
    try:
        days = int(value)
    except (TypeError, ValueError):
        raise ValidationError("days must be a whole number")
    if days < 1 or days > maximum:
        raise ValidationError(f"days must be between 1 and {maximum}")
    return days
