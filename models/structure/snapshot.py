from typing import Any, Dict, List
from pydantic import RootModel


class Snapshot(RootModel[Dict[str, List[Dict[str, Any]]]]):
    """Persisted registry: one array of records per collection name."""

    def collections(self) -> Dict[str, List[Dict[str, Any]]]:
        return self.root
