import os
import json
import logging
from typing import Any, Dict, List

from core.exceptions import PersistenceFailure
from models.structure.snapshot import Snapshot

logger = logging.getLogger("storefront.snapshot")


class SnapshotFile:
    """
    Whole-registry JSON snapshot on disk.

    Every save rewrites the full document through a temp file and an atomic
    rename, so readers only ever see a complete previous or next state.
    """

    def __init__(self, path: str):
        self.path = path

    def exists(self) -> bool:
        return os.path.exists(self.path)

    def load(self) -> Dict[str, List[Dict[str, Any]]] | None:
        if not self.exists():
            logger.info(f"Snapshot {self.path} not found.")
            return None

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                raw_data = json.load(f)
            snapshot = Snapshot.model_validate(raw_data)
        except (OSError, ValueError) as e:
            # json.JSONDecodeError and pydantic's ValidationError are both ValueErrors
            logger.error(f"Snapshot {self.path} is unreadable, ignoring it: {e}")
            return None

        return snapshot.collections()

    def save(self, data: Dict[str, List[Dict[str, Any]]]) -> None:
        temp_file = f"{self.path}.tmp"
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)

            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, default=str)
                f.flush()
                os.fsync(f.fileno())

            os.replace(temp_file, self.path)
        except (OSError, TypeError, ValueError) as e:
            if os.path.exists(temp_file):
                os.remove(temp_file)
            raise PersistenceFailure(f"Failed to write snapshot {self.path}: {e}") from e
