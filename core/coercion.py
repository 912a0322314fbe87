import re
import math
from typing import Any

# Plain decimal literals only: no underscores, hex, inf or nan
_DECIMAL = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def to_number(value: Any) -> float | None:
    """
    Numeric view of a scalar used by loose comparison.
    Returns None when the value has no numeric reading.
    """
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if text == "":
            return 0.0
        if not _DECIMAL.match(text):
            return None
        return float(text)
    return None


def loose_equals(left: Any, right: Any) -> bool:
    """
    Cross-type equality for record values.

        str   / str     -> plain comparison
        num   / num     -> numeric comparison
        bool  / bool    -> plain comparison
        str   / num     -> string read as a decimal literal
                           ([+-]digits[.digits][e[+-]digits]), "" is 0,
                           anything else never equals a number
        bool  / num|str -> bool as 0/1, then as above
        None  / None    -> True
        None  / other   -> False

    NaN never equals anything. Anything else (lists, dicts) only equals
    a value of the same type.
    """
    if left is None or right is None:
        return left is None and right is None

    if isinstance(left, str) and isinstance(right, str):
        return left == right
    if isinstance(left, bool) and isinstance(right, bool):
        return left == right

    scalar = (bool, int, float, str)
    if isinstance(left, scalar) and isinstance(right, scalar):
        left_num = to_number(left)
        right_num = to_number(right)
        if left_num is None or right_num is None:
            return False
        if math.isnan(left_num) or math.isnan(right_num):
            return False
        return left_num == right_num

    if type(left) is not type(right):
        return False
    return left == right
