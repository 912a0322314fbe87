from typing import Any, Dict, List, Tuple

from core.coercion import loose_equals
from core.constants.main_values import KEY_FIELDS


def find_record_index(records: List[Dict[str, Any]], key: Any) -> int | None:
    """
    Locates the record addressed by `key`.

    Each key field is tried across the whole collection before falling back
    to the next one (id, then ID, then user_id), so a record matching an
    earlier field always wins over one matching a later field.
    """
    if key is None:
        return None

    for field in KEY_FIELDS:
        for index, record in enumerate(records):
            if field in record and loose_equals(record[field], key):
                return index

    return None


def extract_key(body: Dict[str, Any]) -> Tuple[str | None, Any]:
    """Returns (field, value) of the first key field present in a request body."""
    for field in KEY_FIELDS:
        if body.get(field) is not None:
            return field, body[field]
    return None, None
