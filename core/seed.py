from typing import Any, Dict, List

SEED_TIMESTAMP = "2024-01-01T00:00:00+00:00"

ADMIN_USER_ID = "1"
ADMIN_EMAIL = "admin@example.com"


def _products() -> List[Dict[str, Any]]:
    products = []
    for i in range(1, 11):
        products.append({
            "id": str(i),
            "name": f"Product {i}",
            "description": f"Description for Product {i}",
            "price": 10 + (i * 37) % 100,
            "image": "/placeholder.svg",
            "category_id": str((i - 1) % 3 + 1),
            "stock": 1 + (i * 53) % 100,
            "created_at": SEED_TIMESTAMP,
        })
    return products


def build_seed() -> Dict[str, List[Dict[str, Any]]]:
    """
    Initial data installed when no snapshot can be loaded.
    Always returns the same content.
    """
    return {
        "users": [{
            "ID": ADMIN_USER_ID,
            "Name": "Admin User",
            "Email": ADMIN_EMAIL,
        }],
        "user_profiles": [{
            "user_id": ADMIN_USER_ID,
            "phone_number": "1234567890",
            "full_name": "Admin User",
            "avatar_url": "",
            "email_notifications": True,
            "whatsapp_notifications": True,
            "marketing_notifications": True,
            "auth_method": "email",
            "role": "admin",
            "created_at": SEED_TIMESTAMP,
        }],
        "products": _products(),
        "categories": [
            {"id": str(i), "name": f"Category {i}", "description": f"Description for Category {i}"}
            for i in range(1, 4)
        ],
    }
