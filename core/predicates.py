from typing import Any, Dict, Iterable

from models.api import Filter
from models.interfaces.strategy_interface import IFilterOperator
from models.processors.filter_operators import EqualOperator, NotEqualOperator, LikeOperator, NotLikeOperator

_operators: Dict[str, IFilterOperator] = {
    "Equal": EqualOperator(),
    "NotEqual": NotEqualOperator(),
    "Like": LikeOperator(),
    "NotLike": NotLikeOperator(),
}


def matches(record: Dict[str, Any], flt: Filter) -> bool:
    field_value = record.get(flt.name)

    # Absent or null fields never satisfy a filter, whatever the operator
    if field_value is None:
        return False

    operator = _operators.get(flt.op)
    if operator is None:
        raise ValueError(f"Unknown filter operator: {flt.op}")

    return operator.matches(field_value, flt.value)


def matches_all(record: Dict[str, Any], filters: Iterable[Filter]) -> bool:
    return all(matches(record, flt) for flt in filters)
