"""Database schema DDL for the ``dogs`` table.

``DOG_COLUMNS`` is the single source of column order: the model, the
repository's column lists and positional hydration are all derived from it.
"""

DOGS_TABLE = "dogs"

DOG_COLUMNS: dict[str, str] = {
    "id": "INTEGER PRIMARY KEY",
    "name": "TEXT",
    "color": "TEXT",
    "breed": "TEXT",
    "instagram": "TEXT",
}

# Every column except the primary key, in insert/update order.
DOG_DATA_COLUMNS: tuple[str, ...] = tuple(c for c in DOG_COLUMNS if c != "id")


def schema_definition() -> str:
    return ", ".join(f"{name} {sql_type}" for name, sql_type in DOG_COLUMNS.items())


CREATE_DOGS_SQL = f"CREATE TABLE IF NOT EXISTS {DOGS_TABLE} ({schema_definition()})"

DROP_DOGS_SQL = f"DROP TABLE IF EXISTS {DOGS_TABLE}"

TABLE_EXISTS_SQL = "SELECT tbl_name FROM sqlite_master WHERE type = 'table' AND tbl_name = ?"
