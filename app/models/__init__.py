from .base import Base, metadata
from .definitions import NAMED_QUERIES, User
from .tables import SOCIAL_ACCOUNT_COLUMNS, users_table

__all__ = ["Base", "metadata", "NAMED_QUERIES", "User", "SOCIAL_ACCOUNT_COLUMNS", "users_table"]
