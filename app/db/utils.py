from typing import Any

from sqlalchemy import inspect


def apply_dict_updates(entity: object, update_data: dict[str, Any], excluded_attrs: set[str] | None) -> None:
    """
    Dynamically applies key-value pairs from a dictionary to an ORM entity.

    Only keys naming a mapped column are applied; anything else in
    `update_data` is ignored.

    Args:
        entity: The SQLAlchemy ORM object (transient or loaded into the session).
        update_data: Dictionary of fields and values to update.
        excluded_attrs: Attribute names to explicitly ignore/skip updating.
    """
    excluded_attrs = excluded_attrs if excluded_attrs else set()
    column_attrs = inspect(entity).mapper.column_attrs.keys()

    for key, value in update_data.items():

        if key in excluded_attrs:
            continue

        if key in column_attrs:
            setattr(entity, key, value)
