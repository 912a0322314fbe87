from typing import Any, Dict, List, Literal
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from core.constants.main_values import DEFAULT_PAGE_NO, DEFAULT_PAGE_SIZE

FilterOp = Literal["Equal", "NotEqual", "Like", "NotLike"]

_bool_adapter = TypeAdapter(bool)


def _positive_int_or(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        return default
    return number if number >= 1 else default


class Filter(BaseModel):
    name: str
    op: FilterOp
    value: Any = None


class PageQuery(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    page_no: int = Field(default=DEFAULT_PAGE_NO, alias="PageNo")
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, alias="PageSize")
    order_by_field: str | None = Field(default=None, alias="OrderByField")
    is_asc: bool = Field(default=False, alias="IsAsc")
    filters: List[Filter] = Field(default_factory=list, alias="Filters")

    # Malformed or missing paging inputs fall back to defaults, never an error
    @field_validator("page_no", mode="before")
    @classmethod
    def _default_page_no(cls, value: Any) -> int:
        return _positive_int_or(value, DEFAULT_PAGE_NO)

    @field_validator("page_size", mode="before")
    @classmethod
    def _default_page_size(cls, value: Any) -> int:
        return _positive_int_or(value, DEFAULT_PAGE_SIZE)

    @field_validator("order_by_field", mode="before")
    @classmethod
    def _blank_order_by(cls, value: Any) -> str | None:
        if value is None or value == "":
            return None
        return str(value)

    @field_validator("is_asc", mode="before")
    @classmethod
    def _default_is_asc(cls, value: Any) -> bool:
        if value is None:
            return False
        try:
            return _bool_adapter.validate_python(value)
        except ValidationError:
            return False

    @field_validator("filters", mode="before")
    @classmethod
    def _null_filters(cls, value: Any) -> Any:
        return [] if value is None else value


class PageData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    records: List[Dict[str, Any]] = Field(alias="List")
    virtual_count: int = Field(alias="VirtualCount")
    page_no: int = Field(alias="PageNo")
    page_size: int = Field(alias="PageSize")


class PageResponse(BaseModel):
    success: bool = True
    data: PageData


class RecordResponse(BaseModel):
    success: bool = True
    data: Dict[str, Any]


class DeleteResponse(BaseModel):
    success: bool = True


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
