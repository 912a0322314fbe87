from typing import Any, Dict, List

from core.predicates import matches_all
from models.api import PageQuery, PageData


def _sort_key(value: Any) -> tuple:
    if isinstance(value, (bool, int, float)):
        return (0, value)
    if isinstance(value, str):
        return (1, value)
    # nested values have no ordering; they tie with each other
    return (2, "")


def sort_records(records: List[Dict[str, Any]], field: str, ascending: bool) -> List[Dict[str, Any]]:
    """
    Stable sort on one field. Records without the field (or with None)
    go to the end in both directions.
    """
    present = [r for r in records if r.get(field) is not None]
    missing = [r for r in records if r.get(field) is None]

    ordered = sorted(present, key=lambda r: _sort_key(r[field]), reverse=not ascending)
    return ordered + missing


def execute(records: List[Dict[str, Any]], query: PageQuery) -> PageData:
    filtered = [r for r in records if matches_all(r, query.filters)]

    if query.order_by_field:
        filtered = sort_records(filtered, query.order_by_field, query.is_asc)

    start = (query.page_no - 1) * query.page_size
    end = start + query.page_size

    return PageData(
        records=[dict(r) for r in filtered[start:end]],
        virtual_count=len(filtered),
        page_no=query.page_no,
        page_size=query.page_size,
    )
