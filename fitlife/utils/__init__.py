from .utils import is_number, round_half_up
