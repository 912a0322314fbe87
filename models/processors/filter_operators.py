from typing import Any
from core.coercion import loose_equals
from models.interfaces.strategy_interface import IFilterOperator


class EqualOperator(IFilterOperator):
    def matches(self, field_value: Any, filter_value: Any) -> bool:
        return loose_equals(field_value, filter_value)


class NotEqualOperator(IFilterOperator):
    def matches(self, field_value: Any, filter_value: Any) -> bool:
        return not loose_equals(field_value, filter_value)


def like_match(text: str, pattern: str) -> bool:
    """
    SQL-style wildcard match restricted to a leading and/or trailing '%'.
    """
    if pattern.startswith("%") and pattern.endswith("%"):
        return pattern[1:-1] in text
    if pattern.startswith("%"):
        return text.endswith(pattern[1:])
    if pattern.endswith("%"):
        return text.startswith(pattern[:-1])
    return text == pattern


class LikeOperator(IFilterOperator):
    def matches(self, field_value: Any, filter_value: Any) -> bool:
        if not isinstance(field_value, str) or not isinstance(filter_value, str):
            return False
        return like_match(field_value, filter_value)


class NotLikeOperator(IFilterOperator):
    def matches(self, field_value: Any, filter_value: Any) -> bool:
        if not isinstance(field_value, str) or not isinstance(filter_value, str):
            return False
        return not like_match(field_value, filter_value)
