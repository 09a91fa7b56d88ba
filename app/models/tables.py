"""
Schema-as-code definition of the `users` table.
The table is declared explicitly and the `User` class is mapped onto it, so the
storage layout can be read (and created) without going through the ORM class.
"""

from sqlalchemy import BigInteger, Column, Integer, String, Table, UniqueConstraint

from .base import metadata

# BIGINT identity in production; SQLite only autoincrements an INTEGER PRIMARY KEY
ID_TYPE = BigInteger().with_variant(Integer, "sqlite")

SOCIAL_ACCOUNT_COLUMNS = ("facebook", "google", "linkedin", "github", "foursquare", "twitter")

users_table = Table(
    "users",
    metadata,
    Column("id", ID_TYPE, primary_key=True, autoincrement=True, comment="Unique User ID."),
    Column("email", String(254), nullable=True, comment="User's email address, unique across all users."),
    Column("password", String(255), nullable=True, comment="Opaque credential; never serialized."),
    Column("display_name", String(255), nullable=True, comment="Name shown to other users; never blank."),
    *(Column(name, String(255), nullable=True, comment=f"Linked {name} account.") for name in SOCIAL_ACCOUNT_COLUMNS),
    UniqueConstraint("email"),
)
