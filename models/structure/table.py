from pydantic import BaseModel


class TableDefinition(BaseModel):
    # --- Header ---
    table_id: str | None = None
    name: str

    # --- Body ---
    description: str = ""

    def is_public(self) -> bool:
        return self.table_id is not None
