from abc import ABC, abstractmethod
from typing import Any


class IFilterOperator(ABC):
    @abstractmethod
    def matches(self, field_value: Any, filter_value: Any) -> bool:
        pass
