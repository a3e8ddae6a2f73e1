"""
Database base module - imports all models so metadata is complete.

Importing this module registers every SQLAlchemy model with ``Base.metadata``,
which is what ``create_all`` and the seed scripts rely on.
"""

from app.auth.models.user import User
from app.orders.models.order import Order

__all__ = [
    "User",
    "Order",
]
