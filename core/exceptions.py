from typing import Any


class TableNotFound(LookupError):
    def __init__(self, table_id: Any):
        super().__init__("Table not found")
        self.table_id = table_id


class RecordNotFound(LookupError):
    def __init__(self, table_id: Any, key: Any):
        super().__init__("Record not found")
        self.table_id = table_id
        self.key = key


class PersistenceFailure(OSError):
    """Raised by the snapshot writer; TableStore logs it and keeps the in-memory change."""
