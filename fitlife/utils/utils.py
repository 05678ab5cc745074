import math
from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value, ndigits=0):
    """
    Round like the clients do (0.5 always goes up).
    Returns an int when ndigits is 0.
    """
    quantum = Decimal(1).scaleb(-ndigits)
    rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    if ndigits == 0:
        return int(rounded)
    return float(rounded)


def is_number(value):
    # bool is an int subclass but never a valid measurement;
    # the JSON parser also accepts NaN and Infinity
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    return isinstance(value, int) or math.isfinite(value)
