import logging
from typing import Any, Dict, Iterable, List

from core.exceptions import TableNotFound
from models.structure.table import TableDefinition

logger = logging.getLogger("storefront.registry")

Record = Dict[str, Any]

DEFAULT_TABLES: List[TableDefinition] = [
    TableDefinition(table_id="10399", name="wishlist", description="Wishlist entries"),
    TableDefinition(table_id="10400", name="reviews", description="Product reviews"),
    TableDefinition(table_id="10401", name="orders", description="Orders"),
    TableDefinition(table_id="10402", name="order_items", description="Order line items"),
    TableDefinition(table_id="10403", name="products", description="Products"),
    TableDefinition(table_id="10404", name="categories", description="Product categories"),
    TableDefinition(table_id="10411", name="user_profiles", description="User profiles"),
    TableDefinition(table_id="10412", name="notifications", description="Notifications"),
    TableDefinition(table_id="10413", name="campaigns", description="Marketing campaigns"),
    TableDefinition(table_id="10414", name="campaign_messages", description="Per-recipient campaign sends"),
    TableDefinition(name="users", description="Login accounts"),
]


class TableRegistry:
    """
    Fixed set of collections keyed by opaque table id.
    Collections are created once here; later loads only swap their contents.
    """

    def __init__(self, tables: Iterable[TableDefinition] = DEFAULT_TABLES):
        self._tables: List[TableDefinition] = list(tables)
        self._by_id: Dict[str, TableDefinition] = {
            t.table_id: t for t in self._tables if t.is_public()
        }
        self._collections: Dict[str, List[Record]] = {t.name: [] for t in self._tables}

    def resolve(self, table_id: Any) -> List[Record]:
        return self._collections[self.definition(table_id).name]

    def definition(self, table_id: Any) -> TableDefinition:
        if table_id is None:
            raise TableNotFound(table_id)
        definition = self._by_id.get(str(table_id).strip())
        if definition is None:
            raise TableNotFound(table_id)
        return definition

    def collection(self, name: str) -> List[Record]:
        return self._collections[name]

    def collection_names(self) -> List[str]:
        return [t.name for t in self._tables]

    def table_ids(self) -> List[str]:
        return list(self._by_id)

    def dump(self) -> Dict[str, List[Record]]:
        return {name: records for name, records in self._collections.items()}

    def replace_all(self, data: Dict[str, List[Record]]) -> None:
        unknown = set(data) - set(self._collections)
        if unknown:
            logger.warning(f"Ignoring unregistered collections in snapshot: {sorted(unknown)}")

        for name, records in self._collections.items():
            records[:] = [dict(r) for r in data.get(name, [])]

    def counts(self) -> Dict[str, int]:
        return {name: len(records) for name, records in self._collections.items()}
