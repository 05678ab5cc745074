from fitlife.enums.app_enum import enum_values, parse_enum
from fitlife.errors import ValidationError
from fitlife.utils.utils import is_number


def require_number_in_range(value, field, low, high, unit=""):
    if not is_number(value):
        raise ValidationError(f"{field} must be a number")
    if value < low or value > high:
        suffix = f" {unit}" if unit else ""
        raise ValidationError(f"{field} must be between {low} and {high}{suffix}")
    return value


def require_enum(value, enum_cls, field):
    member = parse_enum(enum_cls, value)
    if member is None:
        raise ValidationError(f"Invalid {field}. Must be one of: {', '.join(enum_values(enum_cls))}")
    return member


def require_positive_amount(value, message):
    if not is_number(value) or value <= 0:
        raise ValidationError(message)
    return value
