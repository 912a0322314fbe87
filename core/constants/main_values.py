import os

DATA_DIR = os.getenv("DATA_DIR", ".")

STORAGE_FILE = os.path.join(DATA_DIR, "storefront_db.json")
LOG_FILE = os.getenv("LOG_FILE", "storefront.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEFAULT_PAGE_NO = 1
DEFAULT_PAGE_SIZE = 10

# Precedence order used to locate a record for update/delete
KEY_FIELDS = ("id", "ID", "user_id")
