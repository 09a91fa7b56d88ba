from sqlalchemy import Select, select

from .base import Base
from .tables import users_table

# --- CORE IDENTITY ENTITY ---


class User(Base):
    """
    The User record, mapped onto the explicit `users` table.

    Every attribute defaults to None on construction; `id` is assigned by the
    storage engine on first flush and is never set by application code.
    Email uniqueness is a database constraint, and field validation runs in
    app.validation before a write, not here.
    """

    __table__ = users_table

    FIND_ALL = "User.findAll"

    def __repr__(self) -> str:
        # never include the password
        return f"User(id={self.id!r}, email={self.email!r}, display_name={self.display_name!r})"


# --- NAMED QUERIES ---

NAMED_QUERIES: dict[str, Select] = {
    User.FIND_ALL: select(User),
}
